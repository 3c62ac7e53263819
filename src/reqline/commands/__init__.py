"""
reqline console commands.

Importing this package registers every built-in command in the default
namespace.
"""

from reqline.commands.base import (
    UNCLOSED_QUOTE,
    BuildFailure,
    Command,
    CommandResult,
    RequestCommand,
)
from reqline.commands.registry import (
    DEFAULT_NAMESPACE,
    CommandRegistry,
    get_registry,
    register_command,
)
from reqline.commands import building, misc, navigation  # noqa: F401

__all__ = [
    "UNCLOSED_QUOTE",
    "BuildFailure",
    "Command",
    "CommandResult",
    "RequestCommand",
    "DEFAULT_NAMESPACE",
    "CommandRegistry",
    "get_registry",
    "register_command",
]
