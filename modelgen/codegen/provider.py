"""
Service provider that registers the model command.
"""

from typing import List

from .commands.model import ModelCommand
from .registry import CommandRegistry


class ModelCommandServiceProvider:
    """Registers ``ModelCommand`` with a command registry."""

    COMMAND_NAME = "model"
    ALIASES = ["make:model"]

    def register(self, registry: CommandRegistry):
        """Register the provided commands."""
        registry.register(self.COMMAND_NAME, ModelCommand, aliases=self.ALIASES)

    def boot(self, registry: CommandRegistry):
        """Hook run after every provider has registered."""
        pass

    def provides(self) -> List[str]:
        """Get the command names provided by this provider."""
        return [self.COMMAND_NAME]


# Providers loaded by default, in registration order
DEFAULT_PROVIDERS = [ModelCommandServiceProvider]


_global_registry = None


def get_registry() -> CommandRegistry:
    """Get the global command registry, registering default providers once."""
    global _global_registry
    if _global_registry is None:
        _global_registry = build_registry()
    return _global_registry


def build_registry(providers=None) -> CommandRegistry:
    """Create a registry and run ``register`` then ``boot`` on each provider."""
    registry = CommandRegistry()
    instances = [provider() for provider in (providers or DEFAULT_PROVIDERS)]

    for provider in instances:
        provider.register(registry)
    for provider in instances:
        provider.boot(registry)

    return registry
