"""
Naming utilities for model generation.

Resolves user supplied class names into fully qualified PHP class names,
maps them onto source paths and derives table names from class names.
"""

import re
from pathlib import Path
from typing import Optional, Union

from .errors import InvalidNameError

NAMESPACE_SEPARATOR = "\\"
SOURCE_EXTENSION = ".php"

_UPPERCASE_RUN = re.compile(r"([A-Z]+)")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")


def to_underscore(value: str) -> str:
    """
    Convert a camel case string to underscore form.

    Each run of uppercase letters becomes ``_`` plus the lowercased run,
    repeated underscores collapse into one and the result is trimmed, so
    ``UserProfile`` becomes ``user_profile`` and ``ID`` becomes ``id``.
    """
    converted = _UPPERCASE_RUN.sub(lambda match: "_" + match.group(0).lower(), value)
    return _REPEATED_UNDERSCORES.sub("_", converted).strip("_")


def namespace_of(name: str) -> str:
    """Get the namespace of a class name, without the class name itself."""
    segments = name.split(NAMESPACE_SEPARATOR)
    return NAMESPACE_SEPARATOR.join(segments[:-1]).strip(NAMESPACE_SEPARATOR)


def class_basename(name: str) -> str:
    """Get the last segment of a class name."""
    return name.split(NAMESPACE_SEPARATOR)[-1]


class ClassNameResolver:
    """Turns short class names into qualified names and file paths."""

    def __init__(
        self,
        root_namespace: str = "App",
        base_path: Union[str, Path] = "app",
        models_namespace: str = "Models",
    ):
        """
        Initialize the resolver.

        Args:
            root_namespace: Application root namespace, with or without the
                trailing separator
            base_path: Directory the root namespace maps to
            models_namespace: Sub-namespace short names are placed under
        """
        root = root_namespace.strip(NAMESPACE_SEPARATOR)
        if not root:
            raise InvalidNameError("Root namespace must not be empty")

        self.root_namespace = root + NAMESPACE_SEPARATOR
        self.base_path = Path(base_path)
        self.models_namespace = models_namespace.strip(NAMESPACE_SEPARATOR)

    @property
    def default_namespace(self) -> str:
        """Namespace that unqualified names are placed in."""
        root = self.root_namespace.rstrip(NAMESPACE_SEPARATOR)
        if not self.models_namespace:
            return root
        return root + NAMESPACE_SEPARATOR + self.models_namespace

    def qualify(self, raw_name: str) -> str:
        """
        Resolve a class name against the root namespace.

        Args:
            raw_name: Name using ``/`` or ``\\`` separators, possibly already
                qualified

        Returns:
            Fully qualified class name starting with the root namespace

        Raises:
            InvalidNameError: If the name is empty
        """
        name = raw_name.strip()
        if not name:
            raise InvalidNameError("Class name must not be empty")

        while True:
            name = name.lstrip("\\/")

            if name.startswith(self.root_namespace):
                return name

            name = name.replace("/", NAMESPACE_SEPARATOR)
            name = self.default_namespace + NAMESPACE_SEPARATOR + name

    def path_for(self, qualified_name: str) -> Path:
        """Get the destination source path for a qualified class name."""
        relative = qualified_name.replace(self.root_namespace, "", 1)
        return self.base_path / (
            relative.replace(NAMESPACE_SEPARATOR, "/") + SOURCE_EXTENSION
        )

    def exists(self, raw_name: str) -> bool:
        """Determine if the class file for ``raw_name`` already exists."""
        return self.path_for(self.qualify(raw_name)).exists()


def table_name_for(qualified_name: str, override: Optional[str] = None) -> str:
    """
    Derive the table name for a model class.

    An explicit override is used verbatim. Otherwise the class basename is
    pluralised with a trailing ``s`` and converted to underscore form.
    """
    if override and override.strip():
        return override.strip()

    return to_underscore(class_basename(qualified_name) + "s")
