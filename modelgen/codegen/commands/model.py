"""
The ``model`` command: generate a model class from a database table.
"""

import argparse
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from .base import Command
from ..core.config import GeneratorConfig
from ..core.errors import GeneratorError, PreexistingTargetError
from ..core.generator import GenerationResult, ModelGenerator
from ...logging_config import get_logger

logger = get_logger(__name__)


class ModelCommand(Command):
    """Create a new model class from the table schema."""

    type = "Model"
    description = "Create a new model class"

    def __init__(
        self,
        config: GeneratorConfig,
        console: Console = None,
        generator: Optional[ModelGenerator] = None,
    ):
        super().__init__(config, console)
        self._generator = generator

    @property
    def generator(self) -> ModelGenerator:
        if self._generator is None:
            self._generator = ModelGenerator(self.config)
        return self._generator

    @classmethod
    def configure(cls, parser: argparse.ArgumentParser):
        parser.add_argument("name", help="The name of the model")
        parser.add_argument(
            "--table",
            metavar="TABLE",
            help="Table to read columns from (default: derived from the class name)",
        )
        parser.add_argument(
            "--extend",
            metavar="CLASS",
            help="Parent class; short names import <root>\\Models\\<CLASS>Model",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite the class file if it already exists",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Print the generated class instead of writing it",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show generation result metadata",
        )

    def handle(self, args: argparse.Namespace) -> int:
        try:
            result = self.generator.generate(
                args.name,
                table=args.table,
                extend=args.extend,
                force=args.force,
                dry_run=args.dry_run,
            )
        except PreexistingTargetError as e:
            logger.info("Not overwriting %s", e.path)
            self.error(f"{self.type} already exists!")
            return 1
        except GeneratorError as e:
            logger.error("Model generation failed: %s", e)
            self.error(f"✗ {e}")
            return 1

        if args.dry_run:
            self._print_source(result)
        else:
            self.info(f"{self.type} created successfully.")

        if args.verbose:
            self._print_metadata(result)

        for warning in result.warnings:
            self.console.print(f"[yellow]⚠️  {escape(warning)}[/yellow]")

        return 0

    def _print_source(self, result: GenerationResult):
        self.console.print(f"[dim]{escape(str(result.path))}[/dim]")
        self.console.print(Syntax(result.code, "php", theme="monokai"))

    def _print_metadata(self, result: GenerationResult):
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        self.console.print()
        self.console.print(metadata_table)
