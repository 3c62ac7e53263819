"""
Text styling for help and warning output.

Commands never style text themselves: they are handed a Display that knows
how to emphasize a word, how to flag a notice and where to print. The
interactive console uses RichDisplay; tests use PlainDisplay.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.markup import escape as escape_markup
from rich.text import Text

from reqline.console import console as shared_console


class Display(ABC):
    """Formatter and output sink for command text."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console

    @property
    def console(self) -> Console:
        return self._console or shared_console

    @abstractmethod
    def strong(self, text: str) -> str:
        """Emphasize a command name or other key term."""
        pass

    @abstractmethod
    def notice(self, text: str) -> str:
        """Mark text as a warning to the user."""
        pass

    @abstractmethod
    def escape(self, text: str) -> str:
        """Make user-supplied text safe to embed in styled output."""
        pass

    @abstractmethod
    def render(self, text: str) -> Text:
        """Turn (possibly styled) text into a Rich renderable, e.g. for a table cell."""
        pass

    @abstractmethod
    def say(self, text: str = "") -> None:
        """Print a line of (possibly styled) text."""
        pass


class RichDisplay(Display):
    """Display that emits Rich console markup."""

    def strong(self, text: str) -> str:
        return f"[bold]{escape_markup(text)}[/bold]"

    def notice(self, text: str) -> str:
        return f"[yellow]*** {escape_markup(text)}[/yellow]"

    def escape(self, text: str) -> str:
        return escape_markup(text)

    def render(self, text: str) -> Text:
        return Text.from_markup(text)

    def say(self, text: str = "") -> None:
        self.console.print(text, highlight=False, soft_wrap=True)


class PlainDisplay(Display):
    """Display that emits unstyled text."""

    def strong(self, text: str) -> str:
        return text

    def notice(self, text: str) -> str:
        return f"*** {text}"

    def escape(self, text: str) -> str:
        return text

    def render(self, text: str) -> Text:
        return Text(text)

    def say(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
