"""
Environment file parser for env-to-json.

This module turns raw ``.env`` text into an ordered mapping of keys to
string values.

Parsing is deliberately permissive: lines that are not assignments are
skipped rather than reported, so any text yields a best-effort mapping.

Known behavior:
    Comments are stripped before quotes are considered, so a ``#`` inside
    a quoted value also starts a comment::

        API_URL="http://example.com#fragment"   ->   API_URL='"http://example.com'

    A ``#`` preceded by a backslash is kept as part of the value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# A "#" that is not escaped with a backslash starts a comment
COMMENT_PATTERN = re.compile(r"(?<!\\)#")

# Applied in order; each pass sees the output of the previous one
ESCAPE_SEQUENCES: tuple[tuple[str, str], ...] = (
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
    ("\\\\", "\\"),
    ('\\"', '"'),
    ("\\'", "'"),
)


@dataclass
class EnvVariable:
    """Represents a single environment variable from an env file."""

    key: str
    value: str
    line_number: int
    raw_value: str


def strip_comment(line: str) -> str:
    """Remove everything from the first unescaped ``#`` onward."""
    match = COMMENT_PATTERN.search(line)
    if match is None:
        return line
    return line[: match.start()]


def unquote(value: str) -> str:
    """Strip exactly one layer of matching single or double quotes."""
    if (value.startswith('"') and value.endswith('"')) or (
        value.startswith("'") and value.endswith("'")
    ):
        return value[1:-1]
    return value


def unescape(value: str) -> str:
    """Resolve backslash escape sequences."""
    for sequence, replacement in ESCAPE_SEQUENCES:
        value = value.replace(sequence, replacement)
    return value


def parse_lines(lines: list[str]) -> list[EnvVariable]:
    """
    Parse lines into EnvVariable objects.

    Args:
        lines: Physical lines of an env file

    Returns:
        One EnvVariable per assignment line, in file order. Duplicate keys
        are kept here; collapsing them is up to the caller.
    """
    variables = []

    for line_num, line in enumerate(lines, 1):
        stripped_line = strip_comment(line).strip()

        if not stripped_line:
            continue

        if "=" not in stripped_line:
            continue

        key, raw_value = stripped_line.split("=", 1)
        key = key.strip()

        if not key:
            continue

        variables.append(
            EnvVariable(
                key=key,
                value=unescape(unquote(raw_value.strip())),
                line_number=line_num,
                raw_value=line,
            )
        )

    return variables


def parse_env(content: str) -> dict[str, str]:
    """
    Parse env file content into an ordered key/value mapping.

    Later assignments to the same key overwrite earlier ones. Malformed
    lines are skipped, never reported.

    Args:
        content: Raw ``.env`` text

    Returns:
        Mapping of keys to values in first-seen order
    """
    env: dict[str, str] = {}

    for variable in parse_lines(content.split("\n")):
        env[variable.key] = variable.value

    return env
