"""Same command - decide whether two score ids name the same piece."""

from __future__ import annotations

from argparse import Namespace

from scoreid.commands.output import emit_output
from scoreid.core.identity.score_id import is_same_score, is_same_score_with_fuzzy
from scoreid.errors import ValidationError
from scoreid.settings import Settings


def run_same(args: Namespace, *, settings: Settings | None = None, output_sink=print) -> int:
    """Compare FIRST and SECOND exactly, then with fuzzy matching.

    The fuzzy threshold comes from ``--threshold`` or the settings file.
    """
    settings = settings or Settings()
    threshold = args.threshold if args.threshold is not None else settings.fuzzy_threshold
    if not 0.0 <= threshold <= 1.0:
        raise ValidationError(f"Threshold must be between 0 and 1: {threshold}")

    exact = is_same_score(args.first, args.second)
    fuzzy = exact or is_same_score_with_fuzzy(args.first, args.second, threshold=threshold)

    if exact:
        verdict = "same piece"
    elif fuzzy:
        verdict = f"probably the same piece (fuzzy, threshold {threshold:.2f})"
    else:
        verdict = "different pieces"

    emit_output(
        command="same",
        payload={
            "first": args.first,
            "second": args.second,
            "threshold": threshold,
            "same": exact,
            "fuzzy_same": fuzzy,
        },
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=[verdict],
    )
    return 0
