"""CLI entrypoint smoke tests."""

from __future__ import annotations

import subprocess
import sys


def test_cli_entrypoint_help() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "scoreid.cli", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert "usage: scoreid" in result.stdout.lower()


def test_cli_score_id_subprocess() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "scoreid.cli", "score-id", "Sonata Op. 1", "--composer", "Beethoven"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "sonata op. 1-beethoven"
