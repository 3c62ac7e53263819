"""
Commands that change where the request goes.
"""

import re
from typing import List
from urllib.parse import quote

from reqline.commands.base import Command, RequestCommand
from reqline.commands.registry import register_command
from reqline.display import Display
from reqline.errors import InvalidRequestError

NAVIGATION = "Navigation"

ESCAPE_SEQUENCE = re.compile(r"%[0-9A-Fa-f]{2}")

PATH_SAFE = "!$&'()*+,;=:"
FRAGMENT_SAFE = PATH_SAFE + "/?@"

PROMPT_NOTE = "The console prompt shows the address for the current request."


def url_escape(text: str, display: Display, safe: str) -> str:
    """
    URL-escape ``text`` unless it is already escaped.

    Text containing ``%XX`` sequences is left alone, with a warning, so that
    escaping it twice cannot happen: escaping already escaped output is a no-op.
    """
    if ESCAPE_SEQUENCE.search(text):
        display.say(
            display.notice(
                f"Argument '{text}' was not URL-escaped because it contains escape sequences"
            )
        )
        return text
    return quote(text, safe=safe)


@register_command
class Address(RequestCommand):
    category_name = NAVIGATION
    arguments_usage = "ADDRESS"
    help_text = "Changes the address of the request"
    help_extended_text = (
        "Changes the address used for the request. Does not communicate with the host.\n"
        "\n"
        "The scheme defaults to http, and the port defaults to the scheme's default port. "
        "Cookies are cleared if the host changes.\n"
        "\n"
        f"{PROMPT_NOTE}"
    )
    see_also = ("host-set", "port-set", "path-set", "query-set", "fragment-set")

    def change(self, request):
        return self.notify_if_cookies_cleared(
            request, lambda: request.with_address(self.arguments[0])
        )


@register_command
class HostSet(RequestCommand):
    category_name = NAVIGATION
    arguments_usage = "HOST"
    help_text = "Changes the host of the request's address"
    help_extended_text = (
        "Changes the host used for the request. Does not communicate with the host.\n"
        "\n"
        "Cookies are cleared when the host changes.\n"
        "\n"
        f"{PROMPT_NOTE}"
    )
    see_also = ("address",)

    def change(self, request):
        return self.notify_if_cookies_cleared(
            request, lambda: request.with_host(self.arguments[0])
        )


@register_command
class PortSet(RequestCommand):
    category_name = NAVIGATION
    arguments_usage = "PORT"
    help_text = "Changes the TCP port of the request's address"
    help_extended_text = (
        "Changes the TCP port used for the request. Does not communicate with the host.\n"
        "\n"
        f"{PROMPT_NOTE}"
    )
    see_also = ("address",)

    def change(self, request):
        try:
            port = int(self.arguments[0])
        except ValueError as e:
            raise InvalidRequestError(f"Invalid port: {self.arguments[0]}") from e
        return request.with_port(port)


@register_command
class PathSet(RequestCommand):
    category_name = NAVIGATION
    arguments_usage = "PATH"
    help_text = "Changes the path of the request's address"
    help_extended_text = (
        "Changes the path used for the request. Does not communicate with the host.\n"
        "\n"
        "The path will be URL-encoded if necessary.\n"
        "\n"
        f"{PROMPT_NOTE}"
    )
    see_also = ("address",)

    @classmethod
    def sanitize_arguments(cls, arguments: List[str], display: Display) -> List[str]:
        return [
            "/".join(url_escape(segment, display, PATH_SAFE) for segment in argument.split("/"))
            for argument in arguments
        ]

    def change(self, request):
        return request.with_path(self.arguments[0])


@register_command
class Cd(Command):
    alias_for = PathSet


@register_command
class FragmentSet(RequestCommand):
    category_name = NAVIGATION
    arguments_usage = "FRAGMENT"
    help_text = "Sets the fragment of the request's address"
    help_extended_text = (
        "Sets the page fragment used for the request. Does not communicate with the host.\n"
        "\n"
        "The page fragment will be URL-encoded if necessary.\n"
        "\n"
        f"{PROMPT_NOTE}"
    )
    see_also = ("fragment-unset", "address")

    @classmethod
    def sanitize_arguments(cls, arguments: List[str], display: Display) -> List[str]:
        return [url_escape(argument, display, FRAGMENT_SAFE) for argument in arguments]

    def change(self, request):
        return request.with_fragment(self.arguments[0])


@register_command
class FragmentUnset(RequestCommand):
    category_name = NAVIGATION
    help_text = "Removes the fragment from the request's address"
    help_extended_text = (
        "Removes the page fragment used for the request. Does not communicate with the host.\n"
        "\n"
        f"{PROMPT_NOTE}"
    )
    see_also = ("fragment-set", "address")

    def change(self, request):
        return request.without_fragment()


@register_command
class FragmentClear(Command):
    alias_for = FragmentUnset
