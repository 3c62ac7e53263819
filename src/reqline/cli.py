"""
reqline CLI interface - interactive console for building HTTP requests.
"""

from typing import Optional

import typer
from rich.panel import Panel
from rich.prompt import Prompt

from reqline import __version__
from reqline.commands import UNCLOSED_QUOTE, get_registry
from reqline.config import ReqlineSettings, get_settings
from reqline.core.logging import get_logger, setup_logging
from reqline.display import Display, PlainDisplay, RichDisplay
from reqline.errors import InvalidRequestError
from reqline.session import Session

app = typer.Typer(
    name="reqline",
    help="Interactive console for building HTTP requests",
    add_completion=False,
    rich_markup_mode=None,
)

logger = get_logger(__name__)


@app.command()
def console(
    address: Optional[str] = typer.Argument(
        None, help="Address of the first request"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Enable verbose output"
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet", help="Suppress non-critical output"
    ),
    plain: bool = typer.Option(
        False, "--plain", help="Print without styling"
    ),
) -> None:
    """Start the interactive reqline console."""
    settings = get_settings()
    _setup(settings, verbose, quiet)
    display = _make_display(settings, plain)

    try:
        session = Session(address or settings.default_address)
    except InvalidRequestError as e:
        display.say(f"Invalid address: {display.escape(str(e))}")
        raise typer.Exit(1)

    _start_interactive_console(session, display, settings.namespace)


@app.command()
def commands(
    plain: bool = typer.Option(False, "--plain", help="Print without styling"),
) -> None:
    """List the console commands."""
    settings = get_settings()
    display = _make_display(settings, plain)
    execute_console_command("help", Session(settings.default_address), display, settings.namespace)


@app.command()
def version() -> None:
    """Show version information."""
    RichDisplay().say(f"reqline version {__version__}")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """reqline - Interactive console for building HTTP requests."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(console, address=None, verbose=False, quiet=False, plain=False)


def _setup(settings: ReqlineSettings, verbose: bool, quiet: bool) -> None:
    setup_logging(
        level=settings.log_level,
        log_file=settings.resolved_log_file(),
        verbose=verbose,
        quiet=quiet,
    )


def _make_display(settings: ReqlineSettings, plain: bool) -> Display:
    if plain or settings.plain_output:
        return PlainDisplay()
    return RichDisplay()


def _start_interactive_console(session: Session, display: Display, namespace: str) -> None:
    """Start the interactive reqline console."""
    _show_banner(display)

    try:
        while True:
            try:
                prompt_text = _build_prompt(session, display)
                user_input = Prompt.ask(prompt_text, console=display.console).strip()
                if not user_input:
                    continue
                if execute_console_command(user_input, session, display, namespace):
                    break
            except EOFError:
                break
    except KeyboardInterrupt:
        display.say()

    logger.info(f"Console closed after {len(session.requests)} request(s)")


def _show_banner(display: Display) -> None:
    """Show the reqline console banner."""
    if isinstance(display, PlainDisplay):
        display.say(f"reqline {__version__} - type help for commands")
        return
    banner = Panel(
        f"[bold blue]reqline[/bold blue] [dim]{__version__}[/dim]\n\n"
        "Type [cyan]help[/cyan] for commands. Commands may be abbreviated.",
        title="Welcome to reqline",
        border_style="blue",
    )
    display.console.print(banner)


def _build_prompt(session: Session, display: Display) -> str:
    """Build the interactive prompt."""
    return f"{display.strong(session.last_request.address)}>"


def execute_console_command(
    command_line: str, session: Session, display: Display, namespace: str
) -> bool:
    """
    Execute one console command line.

    Returns:
        True if the console should exit
    """
    registry = get_registry()
    built = registry.build_for(namespace, command_line, session=session, display=display)

    if built is UNCLOSED_QUOTE:
        display.say(display.notice("Unclosed quoted string"))
        return False

    if built is None:
        words = command_line.split()
        word = words[0] if words else command_line
        candidates = registry.completions(namespace, word.lower())
        if len(candidates) == 1:
            display.say(
                display.notice(f"Unknown command '{word}'")
                + f" - did you mean {display.strong(candidates[0])}?"
            )
        elif candidates:
            names = ", ".join(display.strong(name) for name in candidates)
            display.say(display.notice(f"Ambiguous command '{word}'") + f" - did you mean {names}?")
        else:
            display.say(display.notice(f"Unknown command '{word}'") + " - type help for commands")
        return False

    try:
        result = built.perform()
    except Exception as e:
        logger.exception(f"{built.raw_name()} failed")
        display.say(display.notice(f"Error: {e}"))
        return False

    if result is None:
        return False
    if result.message:
        display.say(result.message)
    return result.should_exit


if __name__ == "__main__":
    app()
