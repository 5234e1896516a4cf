"""
Key filters for env-to-json.

Three independent filters reduce a parsed mapping:

- prefix: keep keys starting with a given string
- whitelist: keep only the listed keys
- exclude: drop the listed keys

They compose in a fixed order (prefix, whitelist, exclude). The whitelist
is computed from the unfiltered mapping, so when both are given the
whitelist wins over the prefix. The exclude filter always runs last.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class FilterConfig:
    """
    Filter options for a conversion.

    ``None`` means the option was not provided. An empty list means it was
    provided with nothing in it, which ``validate_filters`` rejects.
    """

    whitelist: list[str] | None = None
    exclude: list[str] | None = None
    prefix: Any = None

    @classmethod
    def from_options(
        cls,
        whitelist: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
        prefix: Any = None,
    ) -> "FilterConfig":
        """Build a config from only the options that carry a value."""
        whitelist = list(whitelist or [])
        exclude = list(exclude or [])

        return cls(
            whitelist=whitelist or None,
            exclude=exclude or None,
            prefix=prefix or None,
        )


@dataclass
class FilterValidation:
    """Outcome of validating a FilterConfig."""

    valid: bool
    errors: list[str] = field(default_factory=list)

    def raise_for_errors(self) -> None:
        """Raise FilterValidationError if validation failed."""
        if not self.valid:
            raise FilterValidationError(self.errors)


def apply_prefix(env: Mapping[str, str], prefix: str | None) -> dict[str, str]:
    """Keep entries whose key starts with ``prefix`` (case-sensitive)."""
    if not prefix:
        return dict(env)

    return {key: value for key, value in env.items() if key.startswith(prefix)}


def apply_whitelist(env: Mapping[str, str], whitelist: Iterable[str] | None) -> dict[str, str]:
    """Keep only whitelisted keys, in whitelist order."""
    whitelist = list(whitelist or [])
    if not whitelist:
        return dict(env)

    return {key: env[key] for key in whitelist if key in env}


def apply_exclude(env: Mapping[str, str], exclude: Iterable[str] | None) -> dict[str, str]:
    """Drop excluded keys."""
    excluded = set(exclude or [])
    if not excluded:
        return dict(env)

    return {key: value for key, value in env.items() if key not in excluded}


def apply_filters(env: Mapping[str, str], config: FilterConfig | None = None) -> dict[str, str]:
    """
    Apply all filters in their fixed order.

    Args:
        env: Parsed environment mapping (left untouched)
        config: Filter options; absent or empty fields are no-ops

    Returns:
        A new, filtered mapping
    """
    if config is None:
        return dict(env)

    filtered = dict(env)

    if config.prefix:
        filtered = apply_prefix(filtered, config.prefix)

    # Whitelist starts again from the original mapping
    if config.whitelist:
        filtered = apply_whitelist(env, config.whitelist)

    if config.exclude:
        filtered = apply_exclude(filtered, config.exclude)

    return filtered


def validate_filters(config: FilterConfig) -> FilterValidation:
    """
    Validate the shape of filter options.

    Passing both a whitelist and a prefix is allowed but logs a warning,
    since the whitelist takes precedence.
    """
    errors: list[str] = []

    if config.whitelist and config.prefix:
        logger.warning("Both whitelist and prefix specified. Whitelist takes precedence.")

    if config.whitelist is not None and len(config.whitelist) == 0:
        errors.append("Whitelist cannot be empty when specified")

    if config.exclude is not None and len(config.exclude) == 0:
        errors.append("Exclude list cannot be empty when specified")

    if config.prefix is not None and not isinstance(config.prefix, str):
        errors.append("Prefix must be a string")

    return FilterValidation(valid=not errors, errors=errors)


class FilterValidationError(Exception):
    """Exception raised when filter options are malformed."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"Filter validation failed: {', '.join(self.errors)}")
