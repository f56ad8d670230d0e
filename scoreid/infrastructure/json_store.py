"""Load and save JSON record files (a top-level array of objects)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from scoreid.errors import IOFailure, ValidationError

logger = logging.getLogger(__name__)


def load_records(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of objects.

    Raises:
        IOFailure: the file does not exist
        ValidationError: the file is not JSON or not an array of objects
    """
    path = Path(path)
    if not path.exists():
        raise IOFailure(f"File does not exist: {path}", path=path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValidationError(f"Expected a JSON array of objects in {path}")
    logger.debug("Loaded %d records from %s", len(data), path)
    return data


def save_records(path: Path, records: list[dict[str, Any]]) -> None:
    """Write records atomically: temp file in the same directory, then rename.

    A failed write removes the temp file and leaves ``path`` untouched.
    """
    path = Path(path)
    temp = path.with_suffix(path.suffix + ".tmp")
    try:
        temp.write_text(json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        os.replace(str(temp), str(path))
    except BaseException:
        temp.unlink(missing_ok=True)
        raise
    logger.info("Wrote %d records to %s", len(records), path)
