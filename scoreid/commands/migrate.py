"""Migrate command - bring stored score ids to the current form."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from scoreid.commands.output import emit_output
from scoreid.core.migrations import normalize_logbook_records, repair_canonical_score_ids
from scoreid.infrastructure.json_store import load_records, save_records


def run_migrate(args: Namespace, *, output_sink=print) -> int:
    """Repair corrupted catalog ids, then normalize piece ids and score ids."""
    records = load_records(Path(args.file))
    repaired, repairs = repair_canonical_score_ids(records)
    migrated, stats = normalize_logbook_records(repaired)

    if args.output:
        save_records(Path(args.output), migrated)

    emit_output(
        command="migrate",
        payload={
            "file": str(args.file),
            "output": str(args.output) if args.output else None,
            "records": len(migrated),
            "repaired": repairs,
            "entries_normalized": stats.entries_normalized,
            "pieces_normalized": stats.pieces_normalized,
            "score_ids_normalized": stats.score_ids_normalized,
        },
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=(
            f"migrate: records={len(migrated)} repaired={repairs} "
            f"entries={stats.entries_normalized} pieces={stats.pieces_normalized} "
            f"score_ids={stats.score_ids_normalized}",
        ),
    )
    return 0
