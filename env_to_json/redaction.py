"""
Secret redaction for env-to-json.

Values are masked when any redaction term occurs, case-insensitively,
anywhere in the key or the value. Terms are joined into a single
alternation without escaping, so regex metacharacters in a term keep
their regex meaning.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

REDACTED = "***REDACTED***"


def build_redact_pattern(terms: Sequence[str]) -> re.Pattern[str]:
    """Compile redaction terms into one case-insensitive pattern."""
    try:
        return re.compile("|".join(terms), re.IGNORECASE)
    except re.error as exc:
        raise RedactionPatternError(f"Invalid redact terms {list(terms)!r}: {exc}") from exc


def mask_secrets(env: Mapping[str, str], terms: Sequence[str] | None = None) -> dict[str, str]:
    """
    Mask sensitive values.

    Args:
        env: Environment mapping (left untouched)
        terms: Substrings that mark an entry as sensitive

    Returns:
        A new mapping where matching entries have the value ``***REDACTED***``
    """
    if not terms:
        return dict(env)

    pattern = build_redact_pattern(terms)
    masked = dict(env)

    for key, value in masked.items():
        if pattern.search(key) or pattern.search(str(value)):
            masked[key] = REDACTED

    return masked


class RedactionPatternError(Exception):
    """Exception raised when redaction terms do not form a valid pattern."""
