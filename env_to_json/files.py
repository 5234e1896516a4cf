"""
File helpers for env-to-json.

Thin blocking wrappers around reading and writing text files that turn
OS errors into EnvFileError with the offending path in the message.
"""

from __future__ import annotations

from pathlib import Path


def file_exists(file_path: str | Path) -> bool:
    """Check whether ``file_path`` exists."""
    try:
        return Path(file_path).exists()
    except OSError:
        return False


def read_file(file_path: str | Path) -> str:
    """
    Read a UTF-8 text file.

    Raises:
        EnvFileNotFoundError: If the file does not exist
        EnvFileError: If the file cannot be read
    """
    path = Path(file_path)

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise EnvFileNotFoundError(f"Environment file not found: {file_path}") from exc
    except OSError as exc:
        raise EnvFileError(f"Failed to read file {file_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise EnvFileError(f"Failed to read file {file_path}: {exc}") from exc


def write_file(file_path: str | Path, content: str) -> None:
    """
    Write a UTF-8 text file, creating parent directories as needed.

    Raises:
        EnvFileError: If the file cannot be written
    """
    path = Path(file_path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise EnvFileError(f"Failed to write file {file_path}: {exc}") from exc


class EnvFileError(Exception):
    """Exception raised for environment file read/write errors."""


class EnvFileNotFoundError(EnvFileError):
    """Exception raised when an environment file does not exist."""
