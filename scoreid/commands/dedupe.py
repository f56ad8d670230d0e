"""Dedupe commands - collapse duplicate logbook entries and repertoire items."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from scoreid.commands.output import emit_output
from scoreid.commands.records import entries_from_records, repertoire_from_records
from scoreid.core.logbook import cleanup_duplicates, detect_duplicates
from scoreid.core.repertoire import cleanup_duplicate_repertoire
from scoreid.infrastructure.json_store import load_records, save_records


def run_dedupe_logbook(args: Namespace, *, output_sink=print) -> int:
    """Detect duplicate log entries and optionally write the cleaned log."""
    entries = entries_from_records(load_records(Path(args.file)))
    duplicates = detect_duplicates(entries)
    result = cleanup_duplicates(entries, duplicates)

    if args.output:
        save_records(Path(args.output), [entry.to_dict() for entry in result.entries])

    payload = {
        "file": str(args.file),
        "output": str(args.output) if args.output else None,
        "duplicates_found": result.duplicates_found,
        "duplicates_removed": result.duplicates_removed,
        "entries_preserved": result.entries_preserved,
        "duplicates": [duplicate.to_dict() for duplicate in duplicates],
        "conflicts": [{"ids": list(conflict.ids), "reason": conflict.reason} for conflict in result.conflicts],
    }
    lines = [
        f"{duplicate.entry.id} duplicates {duplicate.duplicate_of} "
        f"({duplicate.confidence:.2f}, {duplicate.reason})"
        for duplicate in duplicates
    ]
    lines.append(
        f"dedupe-logbook: found={result.duplicates_found} removed={result.duplicates_removed} "
        f"preserved={result.entries_preserved}"
    )
    emit_output(
        command="dedupe-logbook",
        payload=payload,
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=lines,
    )
    return 0


def run_dedupe_repertoire(args: Namespace, *, output_sink=print) -> int:
    """Merge duplicate repertoire items and optionally write the cleaned list."""
    items = repertoire_from_records(load_records(Path(args.file)))
    result = cleanup_duplicate_repertoire(items)

    if args.output:
        save_records(Path(args.output), [item.to_dict() for item in result.cleaned])

    emit_output(
        command="dedupe-repertoire",
        payload={
            "file": str(args.file),
            "output": str(args.output) if args.output else None,
            "items": len(items),
            "cleaned": len(result.cleaned),
            "merged": [item.score_id for item in result.duplicates],
        },
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=(
            f"dedupe-repertoire: items={len(items)} cleaned={len(result.cleaned)} "
            f"merged={len(result.duplicates)}",
        ),
    )
    return 0
