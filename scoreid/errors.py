"""Error taxonomy and exit code mapping for CLI.

Library functions in ``scoreid.core`` never raise for messy text; these errors
only cover the file and command boundary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ScoreIdError(Exception):
    """Base error for deterministic CLI exit codes."""

    exit_code: int = 1


class ValidationError(ScoreIdError):
    """Invalid user input, command usage or file contents."""

    exit_code = 2


class InvalidRecordError(ValidationError):
    """A stored record that cannot be read as a logbook entry or repertoire item."""

    def __init__(self, kind: str, index: int, reason: str, record_id: Optional[str] = None) -> None:
        self.kind = kind
        self.index = index
        self.record_id = record_id
        label = f"{kind} at index {index}"
        if record_id:
            label += f" (id {record_id!r})"
        super().__init__(f"Invalid {label}: {reason}")


class ConfigError(ValidationError, ValueError):
    """A settings file or environment override that cannot be used."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} (config {path})"
        super().__init__(message)


class RuntimeFailure(ScoreIdError):
    """Unexpected runtime failure."""

    exit_code = 1


class IOFailure(ScoreIdError):
    """A record file that is missing or cannot be written."""

    exit_code = 3

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


def exit_code_for_exception(exc: BaseException) -> int:
    """Resolve a deterministic exit code for an exception."""
    if isinstance(exc, ScoreIdError):
        return exc.exit_code
    if isinstance(exc, OSError):
        return IOFailure.exit_code
    return RuntimeFailure.exit_code
