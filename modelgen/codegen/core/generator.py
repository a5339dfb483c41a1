"""
Model class generator.

Wires name resolution, schema introspection, stub rendering and file
writing into one pass per command execution.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from sqlalchemy.engine import Engine

from .config import GeneratorConfig
from .errors import PreexistingTargetError
from .naming import ClassNameResolver, class_basename, table_name_for
from .schema import SchemaIntrospector
from .templates import StubRenderer, load_stub
from .writer import SourceWriter
from ...logging_config import get_logger

logger = get_logger(__name__)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        path: Path,
        written: bool = False,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated source
            path: Destination path of the class file
            written: Whether the file was written to disk
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.path = path
        self.written = written
        self.warnings = warnings or []
        self.metadata = metadata or {}


class ModelGenerator:
    """Generates a model class file from the database schema."""

    def __init__(
        self,
        config: GeneratorConfig,
        introspector: Optional[SchemaIntrospector] = None,
        writer: Optional[SourceWriter] = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Generator configuration
            introspector: Schema source; built from the configured
                connection on first use when omitted
            writer: File writer
        """
        self.config = config
        self.resolver = ClassNameResolver(
            root_namespace=config.root_namespace,
            base_path=config.base_path,
            models_namespace=config.models_namespace,
        )
        self.renderer = StubRenderer(self.resolver)
        self.writer = writer or SourceWriter()
        self._introspector = introspector
        self._engine: Optional[Engine] = None

    @property
    def introspector(self) -> SchemaIntrospector:
        if self._introspector is None:
            database = self.config.database_name()
            self._engine = self.config.create_engine()
            self._introspector = SchemaIntrospector(self._engine, database)
        return self._introspector

    def close(self):
        """Dispose the engine this generator created, if any."""
        if self._engine is None:
            return

        logger.debug("Disposing engine for connection %s", self.config.connection)
        self._engine.dispose()
        self._engine = None
        self._introspector = None

    def build_class(
        self,
        qualified_name: str,
        table: str,
        extend: Optional[str] = None,
        warnings: Optional[List[str]] = None,
    ) -> str:
        """Render the model source for a qualified class name."""
        stub = load_stub(self.config.stub_path)

        comments = self.introspector.comments(table)
        fields = self.introspector.fields(table)
        if not comments and warnings is not None:
            warnings.append(f"No columns found for table '{table}'")

        return self.renderer.render(
            stub, qualified_name, table, comments, fields, extend
        )

    def generate(
        self,
        name: str,
        table: Optional[str] = None,
        extend: Optional[str] = None,
        force: bool = False,
        dry_run: bool = False,
    ) -> GenerationResult:
        """
        Generate the model class for ``name``.

        Args:
            name: Class name as typed by the user
            table: Table name override, used verbatim
            extend: Parent class argument
            force: Overwrite an existing class file
            dry_run: Render without touching the filesystem

        Returns:
            GenerationResult with the source and destination path

        Raises:
            PreexistingTargetError: If the class file exists and ``force``
                is not set
        """
        qualified_name = self.resolver.qualify(name)
        path = self.resolver.path_for(qualified_name)
        table_name = table_name_for(qualified_name, table)

        logger.info(
            "Generating %s for table %s at %s", qualified_name, table_name, path
        )

        if not dry_run and not force and self.resolver.exists(name):
            raise PreexistingTargetError(path)

        warnings = []
        try:
            code = self.build_class(qualified_name, table_name, extend, warnings)
        finally:
            self.close()

        if not dry_run:
            self.writer.write(path, code, force=force)

        metadata = {
            "class": qualified_name,
            "class_name": class_basename(qualified_name),
            "table": table_name,
            "path": str(path),
            "extends": extend or "Model",
            "dry_run": dry_run,
        }
        return GenerationResult(
            code, path, written=not dry_run, warnings=warnings, metadata=metadata
        )


def generate_model(
    config: GeneratorConfig,
    name: str,
    table: Optional[str] = None,
    extend: Optional[str] = None,
    force: bool = False,
) -> GenerationResult:
    """
    Convenience function to generate one model class.

    Args:
        config: Generator configuration
        name: Class name
        table: Table name override
        extend: Parent class argument
        force: Overwrite an existing class file

    Returns:
        GenerationResult for the written file
    """
    return ModelGenerator(config).generate(name, table, extend, force)
