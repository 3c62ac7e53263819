"""
Commands that change what the request carries.
"""

from typing import List

from reqline.commands.base import RequestCommand
from reqline.commands.navigation import url_escape
from reqline.commands.registry import register_command
from reqline.display import Display

BUILDING_REQUESTS = "Building Requests"

QUERY_SAFE = "!$'()*+,;:/?@"


@register_command
class QuerySet(RequestCommand):
    category_name = BUILDING_REQUESTS
    arguments_usage = "NAME [VALUE]"
    help_text = "Sets a query-string parameter of the request's address"
    help_extended_text = (
        "Sets a query-string parameter used for the request. Does not communicate "
        "with the host.\n"
        "\n"
        "If the parameter is already present, its first occurrence is replaced. "
        "The name and value will be URL-encoded unless they already contain escape "
        "sequences."
    )
    see_also = ("query-clear", "address")

    @classmethod
    def argument_range(cls):
        return (1, 2)

    @classmethod
    def sanitize_arguments(cls, arguments: List[str], display: Display) -> List[str]:
        return [url_escape(argument, display, QUERY_SAFE) for argument in arguments]

    def change(self, request):
        name = self.arguments[0]
        value = self.arguments[1] if len(self.arguments) > 1 else None
        return request.with_query_parameter(name, value)


@register_command
class QueryClear(RequestCommand):
    category_name = BUILDING_REQUESTS
    help_text = "Removes the query string from the request's address"
    see_also = ("query-set",)

    def change(self, request):
        return request.without_query()


@register_command
class CookiesAdd(RequestCommand):
    category_name = BUILDING_REQUESTS
    arguments_usage = "NAME [VALUE]"
    help_text = "Adds a cookie to the request"
    help_extended_text = (
        "Adds a cookie to the request. Does not communicate with the host.\n"
        "\n"
        "Cookies with the same name may be added more than once. Cookies are "
        "cleared when the request's host changes."
    )
    see_also = ("cookies-clear",)

    @classmethod
    def argument_range(cls):
        return (1, 2)

    def change(self, request):
        value = self.arguments[1] if len(self.arguments) > 1 else None
        return request.with_cookie(self.arguments[0], value)


@register_command
class CookiesClear(RequestCommand):
    category_name = BUILDING_REQUESTS
    help_text = "Removes all cookies from the request"
    see_also = ("cookies-add",)

    def change(self, request):
        return self.notify_if_cookies_cleared(request, request.without_cookies)
