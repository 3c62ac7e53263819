"""Tests for display, configuration, logging and the console loop."""

import io
import logging

import pytest
from pydantic import ValidationError
from rich.console import Console

from reqline.cli import execute_console_command
from reqline.commands import get_registry
from reqline.config import ReqlineSettings
from reqline.core.logging import setup_logging
from reqline.display import PlainDisplay, RichDisplay
from reqline.session import Session


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def display(output):
    return PlainDisplay(Console(file=output, width=200))


class TestDisplay:
    """Test plain and Rich displays."""

    def test_plain_display(self, output, display):
        assert display.strong("path[-set]") == "path[-set]"
        assert display.notice("careful") == "*** careful"
        display.say("a [b] c")
        assert output.getvalue() == "a [b] c\n"

    def test_rich_display_escapes_markup(self):
        display = RichDisplay()
        assert display.strong("path[-set]") == "[bold]path[-set][/bold]"
        assert display.strong("pa[th-set]") == "[bold]pa\\[th-set][/bold]"
        assert display.notice("x[y]") == "[yellow]*** x\\[y][/yellow]"

    def test_rich_display_output(self):
        output = io.StringIO()
        display = RichDisplay(Console(file=output, color_system=None, width=200))
        display.say(display.notice("Argument 'a[b]' was left alone"))
        display.say(f"Alias for {display.strong('pa[th-set]')}")
        assert output.getvalue() == (
            "*** Argument 'a[b]' was left alone\n"
            "Alias for pa[th-set]\n"
        )

    def test_render(self):
        assert RichDisplay().render("[bold]x[/bold]").plain == "x"
        assert PlainDisplay().render("a[b]").plain == "a[b]"


class TestSettings:
    """Test ReqlineSettings."""

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REQLINE_WORKSPACE_ROOT", str(tmp_path))
        settings = ReqlineSettings()
        assert settings.default_address == "http://0.0.0.0/"
        assert settings.namespace == "commands"
        assert settings.plain_output is False
        assert settings.log_level == "WARNING"
        assert settings.resolved_log_file() == tmp_path / "logs" / "reqline_console.log"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("REQLINE_DEFAULT_ADDRESS", "https://example.com/")
        monkeypatch.setenv("REQLINE_PLAIN_OUTPUT", "true")
        monkeypatch.setenv("REQLINE_LOG_LEVEL", "debug")
        settings = ReqlineSettings()
        assert settings.default_address == "https://example.com/"
        assert settings.plain_output is True
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("REQLINE_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            ReqlineSettings()


class TestLogging:
    """Test logging setup."""

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "reqline.log"
        logger = setup_logging(level="WARNING", log_file=log_file)
        try:
            logging.getLogger("reqline.commands.base").debug("matched something")
            for handler in logger.handlers:
                handler.flush()
            assert "matched something" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_quiet(self):
        logger = setup_logging(quiet=True)
        try:
            assert logger.level == logging.ERROR
        finally:
            logger.handlers.clear()


class TestConsoleCommands:
    """Test executing command lines the way the console does."""

    def test_changes_request(self, display):
        session = Session("example.com")
        assert execute_console_command("cd users", session, display, "commands") is False
        assert session.last_request.address == "http://example.com/users"

    def test_unclosed_quote(self, output, display):
        execute_console_command('path "x', Session(), display, "commands")
        assert output.getvalue() == "*** Unclosed quoted string\n"

    def test_unknown_command(self, output, display):
        execute_console_command("bogus stuff", Session(), display, "commands")
        assert output.getvalue() == "*** Unknown command 'bogus' - type help for commands\n"

    def test_ambiguous_command(self, output, display):
        execute_console_command("fragment x", Session(), display, "commands")
        assert output.getvalue() == (
            "*** Ambiguous command 'fragment' - did you mean "
            "fragment-clear, fragment-set, fragment-unset?\n"
        )

    def test_single_candidate(self, output, display, monkeypatch):
        monkeypatch.setattr(
            get_registry(), "completions", lambda namespace, text: ["fragment-set"]
        )
        execute_console_command("Fragment-x y", Session(), display, "commands")
        assert output.getvalue() == (
            "*** Unknown command 'Fragment-x' - did you mean fragment-set?\n"
        )

    def test_failure_message(self, output, display):
        execute_console_command("port-set nope", Session(), display, "commands")
        assert output.getvalue() == "Invalid port: nope\n"

    def test_quit(self, display):
        assert execute_console_command("quit", Session(), display, "commands") is True
        assert execute_console_command("EXIT", Session(), display, "commands") is True
