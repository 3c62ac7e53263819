"""
Command registry for reqline.

Commands are grouped into namespaces. Siblings in a namespace share the
abbreviation space: each command's abbreviation is computed against the
others, and the registry refuses a command that would make two siblings
indistinguishable.
"""

from typing import TYPE_CHECKING, Dict, List, Optional, Type, Union

from reqline.core.logging import get_logger
from reqline.errors import CommandRegistrationError

if TYPE_CHECKING:
    from reqline.commands.base import BuildFailure, Command

logger = get_logger(__name__)

DEFAULT_NAMESPACE = "commands"


class CommandRegistry:
    """Registry of command classes by namespace, in registration order."""

    def __init__(self):
        self._namespaces: Dict[str, List[Type["Command"]]] = {}

    def register(self, command: Type["Command"]) -> Type["Command"]:
        """
        Add a command class to its namespace.

        Raises:
            CommandRegistrationError: if a sibling has the same name, or if the
                command's abbreviation would collide with a sibling's
        """
        variants = self._namespaces.setdefault(command.namespace, [])
        if command in variants:
            return command

        name = command.raw_name()
        for variant in variants:
            if variant.raw_name() == name:
                raise CommandRegistrationError(
                    f"Command '{name}' is already registered in namespace '{command.namespace}'"
                )

        variants.append(command)
        try:
            self._check_abbreviations(command.namespace)
        except CommandRegistrationError:
            variants.remove(command)
            raise

        logger.debug(f"Registered command '{name}' in namespace '{command.namespace}'")
        return command

    def unregister(self, command: Type["Command"]) -> None:
        variants = self._namespaces.get(command.namespace, [])
        if command in variants:
            variants.remove(command)

    def _check_abbreviations(self, namespace: str) -> None:
        seen: Dict[str, Type["Command"]] = {}
        for variant in self._namespaces[namespace]:
            mandatory = variant.pattern().mandatory.lower()
            if mandatory in seen:
                raise CommandRegistrationError(
                    f"Commands '{seen[mandatory].raw_name()}' and '{variant.raw_name()}' "
                    f"share the abbreviation '{mandatory}'"
                )
            seen[mandatory] = variant

    def namespaces(self) -> List[str]:
        return sorted(self._namespaces.keys())

    def variants(self, namespace: str = DEFAULT_NAMESPACE) -> List[Type["Command"]]:
        """All commands in a namespace, in registration order."""
        return list(self._namespaces.get(namespace, []))

    def siblings(self, command: Type["Command"]) -> List[Type["Command"]]:
        """Other commands in the namespace of ``command``."""
        return [variant for variant in self.variants(command.namespace) if variant is not command]

    def find(self, namespace: str, raw_name: str) -> Optional[Type["Command"]]:
        for variant in self._namespaces.get(namespace, []):
            if variant.raw_name() == raw_name:
                return variant
        return None

    def build_for(
        self, namespace: str, command_line: str, **attributes
    ) -> Union["Command", "BuildFailure", None]:
        """
        Build the first command in ``namespace`` that ``command_line`` invokes.

        Abbreviations are unique within a namespace, so at most one command
        matches; if several did, the first registered would win.
        """
        for variant in self._namespaces.get(namespace, []):
            built = variant.build_for(command_line, **attributes)
            if built is not None:
                return built
        logger.debug(f"No command in namespace '{namespace}' matches {command_line!r}")
        return None

    def completions(self, namespace: str, text: str) -> List[str]:
        """Full names of the commands ``text`` could be completed to."""
        return sorted(
            variant.raw_name()
            for variant in self._namespaces.get(namespace, [])
            if variant.complete_for(text)
        )


# Global registry instance
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def register_command(command: Type["Command"]) -> Type["Command"]:
    """Register a command class globally. Usable as a class decorator."""
    return _registry.register(command)
