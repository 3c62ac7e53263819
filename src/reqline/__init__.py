"""
reqline - Interactive console for building HTTP requests

Commands are typed in abbreviated form ("path /users", "fragment-s top");
each line is matched against the registered commands, its arguments are
split shell-style, and the matching command changes the current request.
"""

__version__ = "0.1.0"
__author__ = "reqline contributors"
__license__ = "MIT"

from reqline.core.logging import setup_logging, get_logger
from reqline.session import Request, Session
from reqline.commands import (
    UNCLOSED_QUOTE,
    Command,
    CommandResult,
    get_registry,
    register_command,
)

__all__ = [
    "Request",
    "Session",
    "Command",
    "CommandResult",
    "UNCLOSED_QUOTE",
    "get_registry",
    "register_command",
    "setup_logging",
    "get_logger",
]
