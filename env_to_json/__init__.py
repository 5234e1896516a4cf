"""
env-to-json: Convert .env files to JSON, YAML or a JS module.

Parses environment files, optionally filters keys and redacts secrets,
and renders the result in a structured format.

Basic Usage:
    env-to-json .env.local --format=yaml --redact=PASSWORD,TOKEN

Library Usage:
    from env_to_json import convert_env

    result = convert_env(file=".env", format="json", exclude=["DEBUG"])
"""

__version__ = "1.0.0"

from .config import ConfigurationError, EnvToJsonConfig
from .converter import ConversionResult, ConvertOptions, convert_env, load_env
from .files import EnvFileError, EnvFileNotFoundError
from .filters import FilterConfig, FilterValidationError, apply_filters, validate_filters
from .formatters import UnsupportedFormatError, format_output, generate_example
from .parser import EnvVariable, parse_env
from .redaction import REDACTED, RedactionPatternError, mask_secrets
from .cli import main

__all__ = [
    "main",
    "convert_env",
    "load_env",
    "parse_env",
    "format_output",
    "generate_example",
    "apply_filters",
    "validate_filters",
    "mask_secrets",
    "ConvertOptions",
    "ConversionResult",
    "FilterConfig",
    "EnvVariable",
    "EnvToJsonConfig",
    "REDACTED",
    "ConfigurationError",
    "EnvFileError",
    "EnvFileNotFoundError",
    "FilterValidationError",
    "UnsupportedFormatError",
    "RedactionPatternError",
]
