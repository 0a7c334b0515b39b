"""
Command-line interface for object2code.

Loads an object (a JSON document or an importable Python object),
serializes it and prints the statements, or writes them to a file.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__, render_fixture
from .codegen.core import ConfigError, SerializerConfig, TemplateError, load_config
from .codegen.core.stream import serialize
from .codegen.registry import (
    RegistryError,
    get_dialect,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from .logging_config import get_logger, setup_logging
from .utils import InputLoaderError, load_json, load_object

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="object2code",
        description="Serialize an object graph as statements that rebuild it.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    input_group = parser.add_argument_group("input")
    source = input_group.add_mutually_exclusive_group()
    source.add_argument("--json", metavar="FILE", help="JSON file to serialize")
    source.add_argument("--url", help="URL to fetch a JSON document from")
    source.add_argument(
        "--object",
        metavar="MODULE:ATTR",
        help="Importable Python object, e.g. 'myapp.fixtures:ORDER'",
    )
    input_group.add_argument(
        "--call",
        action="store_true",
        help="Call the --object target without arguments and serialize the result",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--language", "-l", default="java", help="Target language (default: java)"
    )
    output_group.add_argument("--output", "-o", help="Output file (default: stdout)")
    output_group.add_argument("--config", help="Configuration file path (JSON)")
    output_group.add_argument(
        "--max-depth",
        type=int,
        help="Maximum recursion depth, 0 for unlimited",
    )
    output_group.add_argument(
        "--only-fields",
        action="store_true",
        help="Only use properties backed by a field",
    )
    output_group.add_argument(
        "--fixture",
        nargs="?",
        const="",
        metavar="NAME",
        help="Wrap the statements in a fixture (optionally naming the factory)",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages", action="store_true", help="List supported languages"
    )
    info_group.add_argument(
        "--language-info", metavar="LANGUAGE", help="Show details for a language"
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug output and metadata"
    )
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write the log to this file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else args.log_level, args.log_file)

    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not (args.json or args.url or args.object):
            console.print("[red]✗[/red] Input source required (--json, --url or --object)")
            return 1

        if not _validate_language(args.language):
            return 1

        loaded = _load_input(args)
        if loaded is None:
            return 1
        source, obj = loaded

        config = _build_config(args)
        return _serialize_and_output(obj, source, config, args)

    except (ConfigError, RegistryError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Dialect Class", style="dim")
    table.add_column("Aliases", style="blue")

    for name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(name, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)
    info_text = (
        f"[bold]Language:[/bold] {info['name']}\n"
        f"[bold]File Extension:[/bold] {info['file_extension']}\n"
        f"[bold]Dialect Class:[/bold] {info['class']}\n"
        f"[bold]Module:[/bold] {info['module']}\n"
        f"[bold]Fixture Name:[/bold] {info['fixture_name']}"
    )
    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Dialect", border_style="green")
    )

    examples_text = (
        "Serialize a JSON document:\n"
        f"[cyan]object2code -l {language} --json data.json[/cyan]\n\n"
        "Serialize a Python object into a fixture file:\n"
        f"[cyan]object2code -l {language} --object app.fixtures:ORDER "
        f"--fixture -o Fixture{info['file_extension']}[/cyan]"
    )
    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))
    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    if is_language_supported(language):
        return True
    if not silent:
        console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        console.print(
            f"[dim]Supported languages: {', '.join(list_supported_languages())}[/dim]"
        )
    return False


def _load_input(args: argparse.Namespace) -> Optional[tuple]:
    """Load the object named by the input options."""
    try:
        if args.object:
            return load_object(args.object, call=args.call)
        return load_json(file_path=args.json, url=args.url)
    except FileNotFoundError as e:
        console.print(f"[red]✗ {e}[/red]")
    except InputLoaderError as e:
        console.print(f"[red]✗ Failed to load input:[/red] {e}")
    return None


def _build_config(args: argparse.Namespace) -> SerializerConfig:
    """Merge the config file and command-line overrides."""
    # Aliases share the defaults of their primary language
    language = get_registry().resolve_name(args.language)

    overrides: dict = {"dialect": language}
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.only_fields:
        overrides["only_properties_with_matching_field"] = True
    if args.fixture:
        overrides["fixture_name"] = args.fixture

    return load_config(language, custom_config=overrides, config_file=args.config)


def _serialize_and_output(
    obj: Any, source: str, config: SerializerConfig, args: argparse.Namespace
) -> int:
    """Serialize and handle output with rich formatting."""
    logger.info("Serializing %s as %s", source, config.dialect)
    result = serialize(obj, dialect=args.language, config=config)

    if not result.success:
        console.print(f"[red]✗ Serialization failed:[/red] {result.error_message}")
        if result.exception and result.exception.__cause__:
            console.print(f"[dim]Details: {result.exception.__cause__}[/dim]")
        return 1

    code = result.code
    if args.fixture is not None:
        try:
            code = render_fixture(result, get_dialect(args.language, config))
        except TemplateError as e:
            console.print(f"[red]✗ Fixture rendering failed:[/red] {e}")
            return 1
    elif code and not code.endswith("\n"):
        code += "\n"

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(code, encoding=config.encoding)
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(f"[green]✓[/green] Code saved to [cyan]{output_path}[/cyan]")
    elif sys.stdout.isatty():
        language = result.metadata.get("language", "java")
        console.print(Syntax(code, language, theme="monokai"))
    else:
        console.print(code, end="", markup=False, highlight=False, soft_wrap=True)

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Serialization Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            if key == "classes":
                continue
            metadata_table.add_row(key.replace("_", " ").title(), str(value))
        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0
