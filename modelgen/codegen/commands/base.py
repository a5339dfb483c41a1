"""
Base class for generator commands.
"""

import argparse
from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape

from ..core.config import GeneratorConfig


class Command(ABC):
    """A subcommand exposed on the command line."""

    #: Human readable kind of artifact the command produces
    type = "Class"

    #: One line description shown in ``--help``
    description = ""

    def __init__(self, config: GeneratorConfig, console: Console = None):
        """Initialize command with configuration and an output console."""
        self.config = config
        self.console = console or Console()

    @classmethod
    @abstractmethod
    def configure(cls, parser: argparse.ArgumentParser):
        """Add the command's arguments and options to ``parser``."""
        pass

    @abstractmethod
    def handle(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        pass

    def info(self, message: str):
        self.console.print(f"[green]{escape(message)}[/green]")

    def error(self, message: str):
        self.console.print(f"[red]{escape(message)}[/red]")
