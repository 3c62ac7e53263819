"""
Base class for reqline console commands.

Every command is a subclass of Command registered in a namespace. The class
itself describes the command (name, category, help, alias target) and knows
how to recognize a command line that invokes it; an instance carries the
parsed arguments and the session and performs the command.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, List, Optional, Sequence, Tuple, Type, Union

from reqline.commands.abbreviation import abbreviation_for, display_pattern
from reqline.commands.pattern import CommandLinePattern, pattern_for
from reqline.commands.registry import DEFAULT_NAMESPACE, get_registry
from reqline.commands.tokenizer import split_arguments
from reqline.core.logging import get_logger
from reqline.display import Display, RichDisplay
from reqline.errors import InvalidRequestError, UnclosedQuoteError
from reqline.session import Request, Session

logger = get_logger(__name__)


class BuildFailure(Enum):
    """Reasons a matching command line could not be built into a command."""
    UNCLOSED_QUOTE = "unclosed_quote"


UNCLOSED_QUOTE = BuildFailure.UNCLOSED_QUOTE


@dataclass
class CommandResult:
    """Result of command execution."""
    success: bool
    message: Optional[str] = None
    should_exit: bool = False


def command_line_for_class_name(class_name: str) -> str:
    """Convert a class name such as ``FragmentSet`` into ``fragment-set``."""
    return re.sub(r"(.)([A-Z])", r"\1-\2", class_name.split(".")[-1]).lower()


class Command:
    """Base class for all reqline console commands."""

    namespace: ClassVar[str] = DEFAULT_NAMESPACE

    # Command this one forwards to, or None for a command with its own logic
    alias_for: ClassVar[Optional[Type["Command"]]] = None

    category_name: ClassVar[Optional[str]] = None
    arguments_usage: ClassVar[Optional[str]] = None
    help_text: ClassVar[Optional[str]] = None
    help_extended_text: ClassVar[Optional[str]] = None
    see_also: ClassVar[Tuple[str, ...]] = ()

    def __init__(
        self,
        arguments: Union[Sequence[str], str, None] = None,
        session: Optional[Session] = None,
        display: Optional[Display] = None,
    ):
        if arguments is None:
            arguments = []
        elif isinstance(arguments, str):
            arguments = [arguments]
        self.arguments: List[str] = list(arguments)
        self.session = session
        self.display = display or RichDisplay()

    # Class-level description -------------------------------------------------

    @classmethod
    def raw_name(cls) -> str:
        """Full name of the command as typed, without abbreviation."""
        return command_line_for_class_name(cls.__name__)

    @classmethod
    def is_alias(cls) -> bool:
        return cls.alias_for is not None

    @classmethod
    def namespace_siblings(cls) -> List[Type["Command"]]:
        return get_registry().siblings(cls)

    @classmethod
    def aliases(cls) -> List[Type["Command"]]:
        """Sibling commands that are aliases for this one."""
        return [sibling for sibling in cls.namespace_siblings() if sibling.alias_for is cls]

    @classmethod
    def category(cls) -> Optional[str]:
        if cls.alias_for is not None:
            return cls.alias_for.category()
        return cls.category_name

    @classmethod
    def abbreviation(cls) -> str:
        """
        Shortest prefix of the name that no sibling shares.

        Recomputed against the current siblings on every call, so it stays
        unique as commands join or leave the namespace.
        """
        sibling_names = [sibling.raw_name() for sibling in cls.namespace_siblings()]
        return abbreviation_for(sibling_names, cls.raw_name())

    @classmethod
    def command_line(cls) -> str:
        """The command as shown in help, with its optional part in brackets."""
        return display_pattern(cls.abbreviation(), cls.raw_name())

    @classmethod
    def command_line_arguments(cls) -> Optional[str]:
        if cls.alias_for is not None:
            return cls.alias_for.command_line_arguments()
        return cls.arguments_usage

    @classmethod
    def usage(cls) -> str:
        arguments = cls.command_line_arguments()
        if arguments:
            return f"{cls.command_line()} {arguments}"
        return cls.command_line()

    @classmethod
    def complete_for(cls, text: str) -> bool:
        """True if ``text`` can be autocompleted to this command."""
        return cls.raw_name()[:len(text)] == text

    @classmethod
    def help(cls, display: Optional[Display] = None) -> str:
        display = display or RichDisplay()
        if cls.alias_for is not None:
            return f"Alias for {display.strong(cls.alias_for.command_line())}"
        if cls.help_text:
            return cls.help_text
        return f"(Help for {display.strong(cls.command_line())} is not available)"

    @classmethod
    def help_extended(cls, display: Optional[Display] = None) -> str:
        if cls.help_extended_text:
            return cls.help_extended_text
        return f"{cls.help(display)}."

    @classmethod
    def see_also_commands(cls) -> List[Type["Command"]]:
        related = [cls.alias_for] if cls.alias_for is not None else []
        registry = get_registry()
        for name in cls.see_also:
            command = registry.find(cls.namespace, name)
            if command is not None and command not in related:
                related.append(command)
        return related

    # Recognizing command lines -------------------------------------------------

    @classmethod
    def pattern(cls) -> CommandLinePattern:
        return pattern_for(cls.abbreviation(), cls.raw_name())

    @classmethod
    def sanitize_arguments(cls, arguments: List[str], display: Display) -> List[str]:
        """Escape, split or otherwise rework arguments before the command is built."""
        if cls.alias_for is not None:
            return cls.alias_for.sanitize_arguments(arguments, display)
        return arguments

    @classmethod
    def build_for(
        cls, command_line: str, **attributes
    ) -> Union["Command", BuildFailure, None]:
        """
        Build the command if ``command_line`` invokes it.

        Args:
            command_line: Line typed by the user
            **attributes: Passed to the constructor (session, display, arguments)

        Returns:
            A new command, None if the line does not invoke this command, or
            UNCLOSED_QUOTE if the arguments cannot be split
        """
        match = cls.pattern().match(command_line)
        if match is None:
            return None

        if match.tail is not None:
            try:
                arguments = split_arguments(match.tail)
            except UnclosedQuoteError as e:
                logger.debug(f"{cls.raw_name()}: {e}")
                return UNCLOSED_QUOTE
            display = attributes.get("display") or RichDisplay()
            attributes["arguments"] = cls.sanitize_arguments(arguments, display)

        logger.debug(f"Matched {cls.raw_name()} with arguments {attributes.get('arguments')}")
        return cls(**attributes)

    # Performing ----------------------------------------------------------------

    def perform(self) -> Optional[CommandResult]:
        """Perform the command, forwarding to the aliased command if any."""
        if self.alias_for is None:
            raise NotImplementedError(f"{self.raw_name()} is not implemented yet")
        target = self.alias_for(arguments=self.arguments, session=self.session, display=self.display)
        return target.perform()

    def add_request_if_new(self, transform: Callable[[Request], Optional[Request]]) -> "Command":
        """
        Apply ``transform`` to the session's last request.

        The returned request is appended to the session only if it is a
        different object from the last request.
        """
        last_request = self.session.requests[-1]
        maybe_next_request = transform(last_request)
        if maybe_next_request is not None and maybe_next_request is not last_request:
            self.session.requests.append(maybe_next_request)
            logger.debug(f"{self.raw_name()}: {maybe_next_request.address}")
        return self

    def notify_if_cookies_cleared(self, request: Request, change: Callable[[], Request]) -> Request:
        """Run ``change`` and tell the user if it dropped the request's cookies."""
        changed_request = change()
        if request.cookies_present() and not changed_request.cookies_present():
            self.display.say(self.display.notice("Cookies cleared"))
        return changed_request

    def usage_error(self) -> CommandResult:
        return CommandResult(success=False, message=f"Usage: {self.display.escape(self.usage())}")

    def expect_arguments(self, minimum: int, maximum: Optional[int] = None) -> bool:
        maximum = minimum if maximum is None else maximum
        return minimum <= len(self.arguments) <= maximum


class RequestCommand(Command):
    """Command that replaces the current request with a changed copy."""

    def change(self, request: Request) -> Request:
        raise NotImplementedError(f"{self.raw_name()} does not change requests")

    @classmethod
    def argument_range(cls) -> Tuple[int, int]:
        return (1, 1) if cls.arguments_usage else (0, 0)

    def perform(self) -> CommandResult:
        if not self.expect_arguments(*self.argument_range()):
            return self.usage_error()
        try:
            self.add_request_if_new(self.change)
        except InvalidRequestError as e:
            return CommandResult(success=False, message=self.display.escape(str(e)))
        return CommandResult(success=True)
