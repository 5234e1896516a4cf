"""
Output formatters for env-to-json.

Supported formats:
    json  pretty-printed JSON, two-space indent
    yaml  block-style YAML, two-space indent, no line wrapping, no aliases
    js    a CommonJS module: ``module.exports = <json>;``
"""

from __future__ import annotations

import json
from collections.abc import Mapping

import yaml

SUPPORTED_FORMATS = ("json", "yaml", "js")


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that never emits anchors or aliases."""

    def ignore_aliases(self, data) -> bool:
        return True


def _to_json(env: Mapping[str, str]) -> str:
    return json.dumps(dict(env), indent=2, ensure_ascii=False)


def _to_yaml(env: Mapping[str, str]) -> str:
    return yaml.dump(
        dict(env),
        Dumper=_NoAliasDumper,
        indent=2,
        width=float("inf"),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def _to_js(env: Mapping[str, str]) -> str:
    return f"module.exports = {_to_json(env)};"


_FORMATTERS = {
    "json": _to_json,
    "yaml": _to_yaml,
    "js": _to_js,
}


def format_output(env: Mapping[str, str], format_name: str = "json") -> str:
    """
    Render a mapping in the requested format.

    Args:
        env: Mapping to render, serialized in its current order
        format_name: One of json, yaml or js (case-insensitive)

    Raises:
        UnsupportedFormatError: For any other format name
    """
    formatter = _FORMATTERS.get(str(format_name).lower())

    if formatter is None:
        raise UnsupportedFormatError(format_name)

    return formatter(env)


def generate_example(env: Mapping[str, str]) -> str:
    """Build ``.env.example`` content: sorted keys with blank values."""
    lines = [f"{key}=" for key in sorted(env)]
    return "\n".join(lines) + "\n"


class UnsupportedFormatError(Exception):
    """Exception raised for an unknown output format."""

    def __init__(self, format_name: str) -> None:
        self.format_name = format_name
        super().__init__(
            f"Unsupported format: {format_name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
