"""
Command-line interface for env-to-json.

This module provides the CLI entry point and argument parsing.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .config import ConfigurationError, EnvToJsonConfig, split_list
from .converter import DEFAULT_ENV_FILE, ConvertOptions, convert_env
from .formatters import SUPPORTED_FORMATS

console = Console()
err_console = Console(stderr=True)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    try:
        return _run(argv)
    except KeyboardInterrupt:
        err_console.print("[yellow]Cancelled.[/yellow]")
        return 130
    except Exception as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="env-to-json",
        description="Convert .env files to JSON, YAML or a JS module",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  env-to-json                              # Convert .env to JSON
  env-to-json .env.local --format=yaml     # Convert to YAML
  env-to-json --whitelist=PORT,DB_HOST     # Filter specific keys
  env-to-json --exclude=SECRET --output=config.json
  env-to-json --prefix=REACT_APP_ --format=yaml
  env-to-json --redact=PASSWORD,TOKEN --format=json
  env-to-json --generate-example           # Write .env.example
        """,
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help=f"Input environment file (default: {DEFAULT_ENV_FILE})",
    )

    parser.add_argument(
        "--format",
        help=f"Output format: {'|'.join(SUPPORTED_FORMATS)} (default: json)",
    )

    parser.add_argument(
        "--output",
        help="Save to file instead of stdout",
    )

    parser.add_argument(
        "--whitelist",
        type=split_list,
        help="Only include these keys (comma-separated)",
    )

    parser.add_argument(
        "--exclude",
        type=split_list,
        help="Exclude these keys (comma-separated)",
    )

    parser.add_argument(
        "--prefix",
        help="Only include keys starting with this prefix",
    )

    parser.add_argument(
        "--redact",
        type=split_list,
        help="Redact values whose key or value contains these terms (comma-separated)",
    )

    parser.add_argument(
        "--generate-example",
        action="store_true",
        default=None,
        help="Generate a .env.example file with all keys and blank values",
    )

    parser.add_argument(
        "--config",
        help="Configuration file path",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"env-to-json {__version__}",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase verbosity",
    )

    return parser


def _configure_logging(verbose: int) -> None:
    """Send library log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose > 0 else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _build_options(args: argparse.Namespace, config: EnvToJsonConfig) -> ConvertOptions:
    """Merge command-line arguments over configuration defaults."""

    def pick(name: str, default=None):
        value = getattr(args, name)
        return config.get(name, default) if value is None else value

    return ConvertOptions(
        file=pick("file", DEFAULT_ENV_FILE),
        format=pick("format", "json"),
        output=pick("output"),
        whitelist=pick("whitelist", []),
        exclude=pick("exclude", []),
        prefix=pick("prefix"),
        redact=pick("redact", []),
        generate_example=bool(pick("generate_example", False)),
    )


def _run(argv: list[str] | None) -> int:
    args = _build_parser().parse_args(argv)

    _configure_logging(args.verbose)

    try:
        config = EnvToJsonConfig.load(args.config)
    except ConfigurationError as exc:
        err_console.print(f"[red]Error: {escape(exc.message)}[/red]")
        return 1

    if args.verbose > 0 and config.source is not None:
        err_console.print(f"[cyan]Config file:[/cyan] {escape(str(config.source))}")

    options = _build_options(args, config)

    if options.format.lower() not in SUPPORTED_FORMATS:
        err_console.print(
            f"[red]Error: Invalid format '{escape(options.format)}'. "
            f"Valid formats: {', '.join(SUPPORTED_FORMATS)}[/red]"
        )
        return 1

    result = convert_env(options)

    if not result.success:
        err_console.print(f"[red]Error: {escape(result.error or 'conversion failed')}[/red]")
        return 1

    if result.message:
        console.print(f"[green]{escape(result.message)}[/green]")

    if result.data and not options.output and not options.generate_example:
        sys.stdout.write(result.data + "\n")
        sys.stdout.flush()

    return 0
