"""Deterministic CLI output helpers."""

from __future__ import annotations

import json
from typing import Iterable

SCHEMA_VERSION = "v1"


def emit_output(
    *,
    command: str,
    payload: dict,
    json_output: bool,
    output_sink=print,
    human_lines: Iterable[str] = (),
) -> None:
    """Emit one JSON envelope line, or the human-readable lines."""
    if json_output:
        envelope = {
            "schema_version": SCHEMA_VERSION,
            "command": command,
            "data": payload,
        }
        output_sink(json.dumps(envelope, sort_keys=True, separators=(",", ":"), ensure_ascii=True))
        return
    for line in human_lines:
        output_sink(line)


def emit_error(*, command: str, exc: BaseException, exit_code: int, json_output: bool, output_sink=print) -> None:
    """Emit a failed command as an envelope with ``status: ERROR``, or one stderr-style line."""
    emit_output(
        command=command,
        payload={
            "status": "ERROR",
            "error_type": exc.__class__.__name__,
            "error_message": str(exc),
            "exit_code": exit_code,
        },
        json_output=json_output,
        output_sink=output_sink,
        human_lines=(f"{command}: error={exc}",),
    )
