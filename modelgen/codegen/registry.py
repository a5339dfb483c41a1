"""
Command registry for managing available generator commands.

Provides registration and instantiation of commands by name or alias.
"""

from typing import Any, Dict, List, Optional, Type

from rich.console import Console

from .commands.base import Command
from .core.config import GeneratorConfig
from .core.errors import GeneratorError


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class CommandRegistry:
    """Registry for managing available commands."""

    def __init__(self):
        """Initialize empty registry."""
        self._commands: Dict[str, Type[Command]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        name: str,
        command_class: Type[Command],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a command.

        Args:
            name: Primary command name (e.g., 'model')
            command_class: Class implementing Command
            aliases: Alternative names for this command
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If command class is invalid or conflicts exist
        """
        if not isinstance(command_class, type) or not issubclass(command_class, Command):
            raise RegistryError("Command class must inherit from Command")

        name_key = name.lower()

        if name_key in self._commands and not replace:
            return

        alias_keys = [
            alias.lower() for alias in (aliases or []) if alias.lower() != name_key
        ]

        # Validate every alias before touching the registry
        if not replace:
            for alias_key in alias_keys:
                if alias_key in self._commands:
                    raise RegistryError(
                        f"Alias '{alias_key}' conflicts with existing command"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != name_key:
                    raise RegistryError(
                        f"Alias '{alias_key}' already points to '{self._aliases[alias_key]}'"
                    )

        self._commands[name_key] = command_class
        for alias_key in alias_keys:
            self._aliases[alias_key] = name_key

    def unregister(self, name: str):
        """
        Unregister a command and its aliases.

        Args:
            name: Command name to unregister
        """
        name_key = name.lower()
        self._commands.pop(name_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == name_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve(self, name: str) -> str:
        """Map a name or alias onto the primary command name."""
        name_key = name.lower()
        if name_key in self._commands:
            return name_key
        if name_key in self._aliases:
            return self._aliases[name_key]

        raise RegistryError(
            f"No command registered as: {name}. "
            f"Available: {', '.join(self.list_commands())}"
        )

    def get_command_class(self, name: str) -> Type[Command]:
        """
        Get command class by name or alias.

        Raises:
            RegistryError: If the command is not registered
        """
        return self._commands[self.resolve(name)]

    def create_command(
        self,
        name: str,
        config: GeneratorConfig,
        console: Optional[Console] = None,
        **kwargs: Any,
    ) -> Command:
        """
        Create a command instance.

        Args:
            name: Command name or alias
            config: Generator configuration
            console: Output console
            **kwargs: Extra constructor arguments for the command

        Returns:
            Configured command instance
        """
        command_class = self.get_command_class(name)
        return command_class(config, console, **kwargs)

    def list_commands(self) -> List[str]:
        """Get list of registered primary command names."""
        return sorted(self._commands.keys())

    def get_aliases(self, name: str) -> List[str]:
        """Get all aliases for a primary command name."""
        name_key = name.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == name_key
        )

    def is_registered(self, name: str) -> bool:
        """Check if a name or alias is registered."""
        name_key = name.lower()
        return name_key in self._commands or name_key in self._aliases
