from __future__ import annotations

import argparse
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from .codegen.core.config import get_config_manager
from .codegen.core.errors import GeneratorError
from .codegen.provider import get_registry
from .codegen.registry import CommandRegistry
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per registered command.

    Args:
        registry: Registry providing the available commands.

    Returns:
        The configured top-level parser.
    """
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Generate model classes from database tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  modelgen model User
  modelgen model Blog/Post --table blog_posts
  modelgen model Order --extend Base --force
  modelgen --config modelgen.json model Invoice --dry-run
        """.strip(),
    )

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--root-namespace", metavar="NAMESPACE", help="Application root namespace"
    )
    parser.add_argument(
        "--base-path", metavar="DIR", help="Directory the root namespace maps to"
    )
    parser.add_argument(
        "--connection", metavar="NAME", help="Database connection to introspect"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default: MODELGEN_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    for name in registry.list_commands():
        command_class = registry.get_command_class(name)
        subparser = subparsers.add_parser(
            name,
            aliases=registry.get_aliases(name),
            help=command_class.description,
        )
        subparser.set_defaults(command=name)
        command_class.configure(subparser)

    return parser


def main(
    argv: Sequence[str] | None = None,
    console: Console | None = None,
    registry: CommandRegistry | None = None,
) -> int:
    """Run the command line.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv``.
        console: Console for operator-facing output.
        registry: Command registry; defaults to the global one.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    console = console or Console()
    registry = registry or get_registry()

    parser = build_parser(registry)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return 1

    overrides = {
        "root_namespace": args.root_namespace,
        "base_path": args.base_path,
        "connection": args.connection,
    }

    try:
        manager = get_config_manager()
        config = manager.get_config(overrides, args.config)
        for warning in manager.validate_config(config):
            logger.warning("Configuration: %s", warning)

        command = registry.create_command(args.command, config, console)
    except GeneratorError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        logger.error("Startup failed: %s", e)
        return 1

    logger.info("Running command %s", args.command)
    return command.handle(args)
