"""
Command-line interface for wrapper generation.

Provides the ``wrapgen`` console script.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .core.config import ConfigError, GeneratorConfig, get_config_manager, load_config
from .core.emitter import EmissionDriver, EmissionResult
from .core.errors import GeneratorError
from .core.interface import InterfaceError
from .logging_config import get_logger, setup_logging
from .registry import (
    RegistryError,
    get_generator,
    get_registry,
    list_all_language_info,
    list_supported_languages,
)
from .utils import InterfaceLoadError, load_interface_file, load_manifest

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Status output goes to stderr so generated code can be piped from stdout
console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="wrapgen",
        description="Generate validated wrapper classes from interface descriptions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wrapgen generate GREYActions.h -o GREYActions.js
  wrapgen generate GREYActions.json -l python -o grey_actions.py
  wrapgen run manifest.json
  wrapgen languages
        """.strip(),
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: $WRAPGEN_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write the log to FILE")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    generate = subparsers.add_parser(
        "generate",
        help="Generate one wrapper file",
        description="Generate a wrapper from an Objective-C header or a JSON interface description",
    )
    generate.add_argument("input", help="Header (.h) or JSON interface description (.json)")
    generate.add_argument("--output", "-o", help="Output file (default: stdout)")
    _add_generation_args(generate)
    generate.add_argument(
        "--no-helpers",
        action="store_true",
        help="Don't copy the global helper functions into the output",
    )
    generate.set_defaults(func=_handle_generate)

    run = subparsers.add_parser(
        "run",
        help="Generate every file pair of a manifest",
        description="Generate wrappers for a JSON manifest mapping input paths to output paths",
    )
    run.add_argument("manifest", help="JSON manifest, paths relative to the manifest")
    _add_generation_args(run)
    run.set_defaults(func=_handle_run)

    languages = subparsers.add_parser("languages", help="List supported target languages")
    languages.set_defaults(func=_handle_languages)

    return parser


def _add_generation_args(parser: argparse.ArgumentParser):
    """Add options shared by the generating subcommands."""
    parser.add_argument(
        "--language",
        "-l",
        default="javascript",
        help="Target language (default: javascript)",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--method-case",
        choices=["snake", "camel", "pascal"],
        help="Naming case for wrapper methods",
    )
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't copy interface comments into generated code",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    if not getattr(args, "func", None):
        parser.print_help(sys.stderr)
        return 1

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except (GeneratorError, InterfaceError, InterfaceLoadError, RegistryError) as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides: Dict[str, Any] = {}

    if args.no_comments:
        overrides["add_comments"] = False

    if getattr(args, "no_helpers", False):
        overrides["include_helpers"] = False

    if args.method_case:
        overrides["method_case"] = args.method_case

    try:
        config = load_config(language, custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    problems = get_config_manager().validate_config(config)
    if problems:
        raise CLIError(f"Configuration error: {'; '.join(problems)}")
    return config


def _create_driver(args: argparse.Namespace) -> EmissionDriver:
    """Resolve the target language and build an emission driver for it."""
    if not get_registry().is_supported(args.language):
        raise CLIError(
            f"Unsupported language '{args.language}'. "
            f"Supported languages: {', '.join(list_supported_languages())}"
        )

    language = get_registry().resolve(args.language)
    return EmissionDriver(get_generator(language, _build_config(args, language)))


def _handle_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    driver = _create_driver(args)

    if args.output:
        result = driver.emit(args.input, args.output)
        console.print(
            f"[green]✓[/green] Generated [bold]{result.class_name}[/bold] "
            f"({result.method_count} methods) to [cyan]{escape(str(result.output_path))}[/cyan]"
        )
        _print_warnings(result.warnings)
        return 0

    generated = driver.render(load_interface_file(args.input))
    if not generated.success:
        console.print(f"[red]✗ Code generation failed:[/red] {escape(generated.error_message)}")
        return 1

    sys.stdout.write(generated.code)
    sys.stdout.flush()
    _print_warnings(generated.warnings)
    return 0


def _handle_run(args: argparse.Namespace) -> int:
    """Handle the run subcommand."""
    files = load_manifest(args.manifest)
    driver = _create_driver(args)

    results = driver.run(files)
    _print_summary(results)
    return 0


def _handle_languages(args: argparse.Namespace) -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(title="Supported Languages", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["class"], aliases)

    console.print(table)
    console.print(
        Panel(
            "[bold]Usage:[/bold] wrapgen generate [dim]Foo.h[/dim] -l [cyan]LANGUAGE[/cyan]",
            title="Quick Start",
            border_style="blue",
        )
    )
    return 0


def _print_summary(results: List[EmissionResult]):
    """Print one table row per generated file."""
    table = Table(title="Generated Files", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Input", style="dim")
    table.add_column("Output", style="cyan")
    table.add_column("Class", style="bold")
    table.add_column("Methods", justify="right")
    table.add_column("Warnings", justify="right", style="yellow")

    for result in results:
        table.add_row(
            escape(str(result.input_path)),
            escape(str(result.output_path)),
            result.class_name,
            str(result.method_count),
            str(len(result.warnings)),
        )

    console.print(table)
    console.print(f"[green]✓[/green] Generated {len(results)} file(s)")


def _print_warnings(warnings: List[str]):
    if warnings:
        console.print("[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")


if __name__ == "__main__":
    sys.exit(main())
