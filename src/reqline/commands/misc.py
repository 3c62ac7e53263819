"""
Console housekeeping commands: help, history, undo and quitting.
"""

from typing import Dict, List, Optional, Type

from rich.table import Table

from reqline.commands.base import Command, CommandResult
from reqline.commands.registry import get_registry, register_command

MISCELLANEOUS = "Miscellaneous"

CATEGORY_ORDER = ["Navigation", "Building Requests", MISCELLANEOUS]


@register_command
class Help(Command):
    category_name = MISCELLANEOUS
    arguments_usage = "[COMMAND]"
    help_text = "Displays this help table, or help on the specified command"
    help_extended_text = (
        "Displays a table of all commands by category. With a command name, "
        "possibly abbreviated, displays extended help on that command."
    )

    def perform(self) -> CommandResult:
        if len(self.arguments) > 1:
            return self.usage_error()
        if self.arguments:
            return self._show_command(self.arguments[0])
        self._show_table()
        return CommandResult(success=True)

    def _find(self, text: str) -> Optional[Type[Command]]:
        for command in get_registry().variants(self.namespace):
            if command.pattern().matches(text):
                return command
        return None

    def _show_command(self, text: str) -> CommandResult:
        command = self._find(text)
        if command is None:
            return CommandResult(
                success=False, message=f"No such command: {self.display.escape(text)}"
            )

        display = self.display
        display.say(display.strong(command.usage()))
        display.say()
        display.say(command.help_extended(display))

        aliases = command.aliases()
        if aliases:
            display.say()
            names = ", ".join(display.strong(alias.command_line()) for alias in aliases)
            display.say(f"Aliases: {names}")

        see_also = command.see_also_commands()
        if see_also:
            display.say()
            names = ", ".join(display.strong(other.command_line()) for other in see_also)
            display.say(f"See also: {names}")
        return CommandResult(success=True)

    def _show_table(self) -> None:
        by_category: Dict[str, List[Type[Command]]] = {}
        for command in get_registry().variants(self.namespace):
            if command.is_alias():
                continue
            by_category.setdefault(command.category() or MISCELLANEOUS, []).append(command)

        categories = [c for c in CATEGORY_ORDER if c in by_category]
        categories += sorted(c for c in by_category if c not in CATEGORY_ORDER)

        table = Table(title="Available Commands")
        table.add_column("Command", style="cyan")
        table.add_column("Arguments")
        table.add_column("Description", style="white")
        table.add_column("Aliases", style="dim")

        for category in categories:
            table.add_row(self.display.render(self.display.strong(category)), "", "", "")
            for command in sorted(by_category[category], key=lambda c: c.raw_name()):
                aliases = ", ".join(alias.command_line() for alias in command.aliases())
                table.add_row(
                    self.display.render(self.display.escape(command.command_line())),
                    self.display.render(self.display.escape(command.command_line_arguments() or "")),
                    self.display.render(command.help(self.display)),
                    self.display.render(self.display.escape(aliases)),
                )

        self.display.console.print(table)


@register_command
class History(Command):
    category_name = MISCELLANEOUS
    help_text = "Displays the addresses of the requests built so far"
    see_also = ("undo",)

    def perform(self) -> CommandResult:
        if self.arguments:
            return self.usage_error()
        for number, request in enumerate(self.session.requests, start=1):
            self.display.say(f"{number:>3}. {self.display.escape(request.address)}")
        return CommandResult(success=True)


@register_command
class Undo(Command):
    category_name = MISCELLANEOUS
    help_text = "Returns to the previous request"
    help_extended_text = (
        "Discards the current request and returns to the one before it. "
        "The first request of the session is never discarded."
    )
    see_also = ("history",)

    def perform(self) -> CommandResult:
        if self.arguments:
            return self.usage_error()
        if self.session.undo() is None:
            return CommandResult(success=False, message="Nothing to undo")
        return CommandResult(success=True)


@register_command
class Quit(Command):
    category_name = MISCELLANEOUS
    help_text = "Quits reqline"

    def perform(self) -> CommandResult:
        return CommandResult(success=True, should_exit=True)


@register_command
class Exit(Command):
    alias_for = Quit
