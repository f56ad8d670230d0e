"""Composer command - resolve a raw composer string."""

from __future__ import annotations

from argparse import Namespace

from scoreid.commands.output import emit_output
from scoreid.core.identity.canonicalizer import extract_catalog_info, is_known_composer


def run_composer(args: Namespace, *, output_sink=print) -> int:
    """Show the canonical composer name and any catalog number."""
    info = extract_catalog_info(args.name)
    known = is_known_composer(args.name)
    lines = [info.composer or "(empty)"]
    if info.catalog_number:
        lines.append(f"catalog: {info.catalog_number}")
    emit_output(
        command="composer",
        payload={
            "input": args.name,
            "canonical": info.composer,
            "catalog_number": info.catalog_number,
            "known": known,
        },
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=lines,
    )
    return 0
