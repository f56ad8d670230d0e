"""Similar command - find repertoire items that probably name the same piece."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from scoreid.commands.output import emit_output
from scoreid.commands.records import repertoire_from_records
from scoreid.core.identity.matching import find_similar_pieces
from scoreid.errors import ValidationError
from scoreid.infrastructure.json_store import load_records
from scoreid.settings import Settings


def run_similar(args: Namespace, *, settings: Settings | None = None, output_sink=print) -> int:
    """List repertoire items similar to TITLE (and --composer), best first."""
    settings = settings or Settings()
    threshold = args.threshold if args.threshold is not None else settings.similarity_threshold
    if not 0.0 <= threshold <= 1.0:
        raise ValidationError(f"Threshold must be between 0 and 1: {threshold}")

    items = repertoire_from_records(load_records(Path(args.repertoire)))
    matches = find_similar_pieces(args.title, args.composer, items, threshold=threshold)

    emit_output(
        command="similar",
        payload={
            "title": args.title,
            "composer": args.composer,
            "threshold": threshold,
            "matches": [match.to_dict() for match in matches],
        },
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=[
            f"{match.similarity:.2f} {match.confidence:<6} {match.score_id}" for match in matches
        ]
        or ["no similar pieces"],
    )
    return 0
