"""Score id commands - generate and parse score ids."""

from __future__ import annotations

from argparse import Namespace

from scoreid.commands.output import emit_output
from scoreid.core.identity.score_id import generate_score_id, is_canonical_score_id, parse_score_id


def run_score_id(args: Namespace, *, output_sink=print) -> int:
    """Print the score id for a title and optional composer."""
    score_id = generate_score_id(args.title, args.composer)
    emit_output(
        command="score-id",
        payload={"title": args.title, "composer": args.composer, "score_id": score_id},
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=(score_id,),
    )
    return 0


def run_parse(args: Namespace, *, output_sink=print) -> int:
    """Split a score id into its title and composer halves."""
    parsed = parse_score_id(args.score_id)
    canonical = is_canonical_score_id(args.score_id)
    emit_output(
        command="parse",
        payload={
            "score_id": args.score_id,
            "title": parsed.title,
            "composer": parsed.composer,
            "canonical": canonical,
        },
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=(f"title: {parsed.title}", f"composer: {parsed.composer or '-'}"),
    )
    return 0
