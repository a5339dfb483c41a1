"""
Stub rendering for model generation.

Stubs are plain text files holding literal placeholder tokens. Rendering is
a single replacement pass over a closed set of tokens; there are no loops,
conditionals or filters.
"""

import re
from pathlib import Path
from typing import Dict, Optional, Union

from .errors import TemplateError
from .naming import (
    NAMESPACE_SEPARATOR,
    ClassNameResolver,
    class_basename,
    namespace_of,
)
from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_STUB_PATH = Path(__file__).resolve().parent.parent / "stubs" / "model.plain.stub"

# Suffix appended to the imported parent class symbol
PARENT_CLASS_SUFFIX = "Model"

TOKEN_NAMESPACE = "DummyNamespace"
TOKEN_ROOT_NAMESPACE = "DummyRootNamespace"
TOKEN_CLASS = "DummyClass"
TOKEN_TABLE = "DummyTable"
TOKEN_COMMENTS = "DummyComments"
TOKEN_FIELDS = "DummyFields"
TOKEN_USE_NAMESPACE = "DummyUseNamespace"
TOKEN_EXTEND_CLASS = "DummyExtendClass"

TOKENS = (
    TOKEN_NAMESPACE,
    TOKEN_ROOT_NAMESPACE,
    TOKEN_CLASS,
    TOKEN_TABLE,
    TOKEN_COMMENTS,
    TOKEN_FIELDS,
    TOKEN_USE_NAMESPACE,
    TOKEN_EXTEND_CLASS,
)

# Longest first, so a token that prefixes another can never match early
_TOKEN_PATTERN = re.compile(
    "|".join(re.escape(token) for token in sorted(TOKENS, key=len, reverse=True))
)


def load_stub(path: Union[str, Path, None] = None) -> str:
    """
    Read a stub file.

    Args:
        path: Stub location, defaults to the packaged model stub

    Raises:
        TemplateError: If the stub cannot be read
    """
    stub_path = Path(path) if path else DEFAULT_STUB_PATH
    try:
        content = stub_path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"Failed to read stub {stub_path}: {e}") from e

    logger.debug("Loaded stub %s", stub_path)
    return content


def substitute(stub: str, replacements: Dict[str, str]) -> str:
    """Replace every known token in ``stub`` in one pass."""
    return _TOKEN_PATTERN.sub(
        lambda match: replacements.get(match.group(0), match.group(0)), stub
    )


class StubRenderer:
    """Renders the model stub for a qualified class name."""

    def __init__(self, resolver: ClassNameResolver):
        self.resolver = resolver

    def parent_import(self, extend: Optional[str]) -> str:
        """
        Build the import statement for the parent class.

        A parent given with two or more namespace segments is taken as fully
        qualified and needs no import.
        """
        extend = extend or ""
        if len(extend.split(NAMESPACE_SEPARATOR)) >= 2:
            return ""

        if extend.strip():
            qualified = self.resolver.qualify(extend)
        else:
            qualified = self.resolver.default_namespace + NAMESPACE_SEPARATOR
        return f"use {qualified}{PARENT_CLASS_SUFFIX};"

    def render(
        self,
        stub: str,
        qualified_name: str,
        table: str,
        comments: str,
        fields: str,
        extend: Optional[str] = None,
    ) -> str:
        """
        Render the stub.

        Args:
            stub: Stub text
            qualified_name: Fully qualified class name
            table: Table name
            comments: ``@property`` docblock lines
            fields: Quoted fillable field list
            extend: Parent class argument, short or fully qualified

        Returns:
            Generated source text
        """
        namespace = namespace_of(qualified_name)
        extend = (extend or "").strip()

        replacements = {
            TOKEN_NAMESPACE: namespace,
            TOKEN_ROOT_NAMESPACE: self.resolver.root_namespace,
            TOKEN_CLASS: class_basename(qualified_name),
            TOKEN_TABLE: table,
            TOKEN_COMMENTS: comments,
            TOKEN_FIELDS: fields,
            TOKEN_USE_NAMESPACE: self.parent_import(extend),
            TOKEN_EXTEND_CLASS: class_basename(
                extend.replace("/", NAMESPACE_SEPARATOR)
            ),
        }
        source = substitute(stub, replacements)

        # The base model is already visible from inside its own namespace
        own_import = f"use {namespace}{NAMESPACE_SEPARATOR}{PARENT_CLASS_SUFFIX};\n"
        return source.replace(own_import, "")
