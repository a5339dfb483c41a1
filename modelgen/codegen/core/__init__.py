"""
Core model generation components.

Provides the name resolver, schema introspector, stub renderer and writer
used by the generator commands.
"""

from .errors import (
    GeneratorError,
    InvalidNameError,
    PreexistingTargetError,
    TemplateError,
    FilesystemWriteError,
    ConfigError,
)
from .generator import ModelGenerator, GenerationResult, generate_model
from .naming import (
    ClassNameResolver,
    to_underscore,
    namespace_of,
    class_basename,
    table_name_for,
)
from .schema import ColumnMetadata, SchemaIntrospector, alias_type
from .templates import StubRenderer, load_stub
from .writer import SourceWriter
from .config import GeneratorConfig, ConfigManager, load_config

__all__ = [
    # Errors
    "GeneratorError",
    "InvalidNameError",
    "PreexistingTargetError",
    "TemplateError",
    "FilesystemWriteError",
    "ConfigError",
    # Generator
    "ModelGenerator",
    "GenerationResult",
    "generate_model",
    # Naming
    "ClassNameResolver",
    "to_underscore",
    "namespace_of",
    "class_basename",
    "table_name_for",
    # Schema
    "ColumnMetadata",
    "SchemaIntrospector",
    "alias_type",
    # Stubs and output
    "StubRenderer",
    "load_stub",
    "SourceWriter",
    # Configuration
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
]
