"""
Conversion pipeline for env-to-json.

This module ties the pieces together:

    read -> parse -> filter -> redact -> format -> (return or write)

Example:
    result = convert_env(file=".env.local", format="yaml", redact=["SECRET"])
    if result.success:
        print(result.data)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from pathlib import Path

from .files import EnvFileNotFoundError, file_exists, read_file, write_file
from .filters import FilterConfig, apply_filters, validate_filters
from .formatters import format_output, generate_example
from .parser import parse_env
from .redaction import mask_secrets

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"

EXAMPLE_SUFFIX_PATTERN = re.compile(r"\.env.*$")


@dataclass
class ConvertOptions:
    """Options for a single conversion."""

    file: str = DEFAULT_ENV_FILE
    format: str = "json"
    output: str | None = None
    whitelist: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    prefix: str | None = None
    redact: list[str] = field(default_factory=list)
    generate_example: bool = False


@dataclass
class ConversionResult:
    """Result of a conversion."""

    success: bool
    data: str | None = None
    error: str | None = None
    message: str | None = None

    @classmethod
    def failure(cls, error: str) -> "ConversionResult":
        return cls(success=False, error=error)


def example_path_for(env_file: str | Path) -> Path:
    """
    Derive the example file path for an env file.

    The first ``.env`` in the file name and everything after it becomes
    ``.env.example``; names without ``.env`` get it appended.

    Examples:
        .env            -> .env.example
        config/.env.dev -> config/.env.example
        sample.env      -> sample.env.example
        settings.txt    -> settings.txt.env.example
    """
    path = Path(env_file)

    if EXAMPLE_SUFFIX_PATTERN.search(path.name):
        name = EXAMPLE_SUFFIX_PATTERN.sub(".env.example", path.name, count=1)
    else:
        name = f"{path.name}.env.example"

    return path.with_name(name)


def resolve_input_file(requested: str | Path) -> str:
    """
    Pick the file to read.

    A missing explicit path falls back to ``.env`` when that exists.

    Raises:
        EnvFileNotFoundError: If neither the requested file nor a fallback exists
    """
    requested = str(requested)

    if file_exists(requested):
        return requested

    if requested != DEFAULT_ENV_FILE and file_exists(DEFAULT_ENV_FILE):
        logger.warning("File %s not found, using %s instead", requested, DEFAULT_ENV_FILE)
        return DEFAULT_ENV_FILE

    raise EnvFileNotFoundError(f"Environment file not found: {requested}")


def convert_env(options: ConvertOptions | None = None, **kwargs) -> ConversionResult:
    """
    Convert an env file to JSON, YAML or a JS module.

    Args:
        options: Conversion options. Keyword arguments build a
            ConvertOptions when this is omitted, and override its
            fields when it is given.

    Returns:
        A ConversionResult. Conversion errors are reported through it,
        never raised.

    Raises:
        TypeError: For keyword arguments that are not ConvertOptions fields
    """
    if options is None:
        options = ConvertOptions(**kwargs)
    elif kwargs:
        options = replace(options, **kwargs)

    try:
        filter_config = FilterConfig.from_options(
            whitelist=options.whitelist,
            exclude=options.exclude,
            prefix=options.prefix,
        )
        validate_filters(filter_config).raise_for_errors()

        env_file = resolve_input_file(options.file)
        env = parse_env(read_file(env_file))
        logger.debug("Parsed %d variable(s) from %s", len(env), env_file)

        if options.generate_example:
            content = generate_example(env)
            example_file = example_path_for(env_file)
            write_file(example_file, content)
            logger.debug("Wrote example file %s", example_file)

            return ConversionResult(
                success=True,
                data=content,
                message=f"Generated {example_file}",
            )

        env = apply_filters(env, filter_config)

        if options.redact:
            env = mask_secrets(env, options.redact)

        formatted = format_output(env, options.format)

        if options.output:
            write_file(options.output, formatted)
            logger.debug("Wrote %d variable(s) to %s", len(env), options.output)

            return ConversionResult(
                success=True,
                data=formatted,
                message=f"Output written to {options.output}",
            )

        return ConversionResult(success=True, data=formatted)

    except Exception as exc:
        logger.debug("Conversion of %s failed", options.file, exc_info=True)
        return ConversionResult.failure(str(exc))


def load_env(file_path: str | Path = DEFAULT_ENV_FILE) -> dict[str, str]:
    """
    Load and parse an env file.

    Unlike convert_env there is no fallback and errors are raised.

    Raises:
        EnvFileNotFoundError: If the file does not exist
        EnvFileError: If the file cannot be read
    """
    if not file_exists(file_path):
        raise EnvFileNotFoundError(f"Environment file not found: {file_path}")

    return parse_env(read_file(file_path))
