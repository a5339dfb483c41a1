"""
Model code generation.

Generates model classes from stub files and the live database schema.
"""

from .registry import CommandRegistry, RegistryError
from .provider import ModelCommandServiceProvider, build_registry, get_registry
from .commands import Command, ModelCommand
from .core.generator import ModelGenerator, GenerationResult, generate_model
from .core.config import GeneratorConfig, ConfigManager, load_config
from .core.errors import GeneratorError, PreexistingTargetError

__version__ = "0.1.0"

__all__ = [
    "CommandRegistry",
    "RegistryError",
    "ModelCommandServiceProvider",
    "build_registry",
    "get_registry",
    "Command",
    "ModelCommand",
    "ModelGenerator",
    "GenerationResult",
    "generate_model",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "GeneratorError",
    "PreexistingTargetError",
]
