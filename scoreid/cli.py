"""Command-line interface for scoreid."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from scoreid import __version__


def _add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )


def _add_output_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the cleaned records to this JSON file",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scoreid",
        description="Piece and score identity tools for a practice logbook",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"scoreid {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings path (default: ~/.config/scoreid/settings.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    score_id_parser = subparsers.add_parser(
        "score-id",
        help="Generate the score id for a piece",
    )
    score_id_parser.add_argument("title", help="Piece title")
    score_id_parser.add_argument("--composer", help="Composer name")
    _add_json_flag(score_id_parser)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Split a score id into title and composer",
    )
    parse_parser.add_argument("score_id", help="Score id to parse")
    _add_json_flag(parse_parser)

    composer_parser = subparsers.add_parser(
        "composer",
        help="Resolve the canonical name of a composer",
    )
    composer_parser.add_argument("name", help="Raw composer string")
    _add_json_flag(composer_parser)

    similar_parser = subparsers.add_parser(
        "similar",
        help="Find repertoire items similar to a piece",
    )
    similar_parser.add_argument("title", help="Piece title")
    similar_parser.add_argument("--composer", help="Composer name")
    similar_parser.add_argument(
        "--repertoire",
        type=Path,
        required=True,
        help="Repertoire JSON file",
    )
    similar_parser.add_argument(
        "--threshold",
        type=float,
        help="Minimum similarity (default from settings, 0.7)",
    )
    _add_json_flag(similar_parser)

    same_parser = subparsers.add_parser(
        "same",
        help="Check whether two score ids name the same piece",
    )
    same_parser.add_argument("first", help="First score id")
    same_parser.add_argument("second", help="Second score id")
    same_parser.add_argument(
        "--threshold",
        type=float,
        help="Fuzzy match threshold (default from settings, 0.9)",
    )
    _add_json_flag(same_parser)

    dedupe_logbook_parser = subparsers.add_parser(
        "dedupe-logbook",
        help="Detect and remove duplicate logbook entries",
    )
    dedupe_logbook_parser.add_argument("file", type=Path, help="Logbook JSON file")
    _add_output_flag(dedupe_logbook_parser)
    _add_json_flag(dedupe_logbook_parser)

    dedupe_repertoire_parser = subparsers.add_parser(
        "dedupe-repertoire",
        help="Merge duplicate repertoire items",
    )
    dedupe_repertoire_parser.add_argument("file", type=Path, help="Repertoire JSON file")
    _add_output_flag(dedupe_repertoire_parser)
    _add_json_flag(dedupe_repertoire_parser)

    migrate_parser = subparsers.add_parser(
        "migrate",
        help="Normalize stored score ids",
    )
    migrate_parser.add_argument("file", type=Path, help="Logbook or repertoire JSON file")
    _add_output_flag(migrate_parser)
    _add_json_flag(migrate_parser)

    return parser


def main() -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    try:
        from .settings import default_config_path, load_settings

        settings = load_settings(args.config or default_config_path())
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.logging_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

        # Import here to avoid slow startup
        if args.command == "score-id":
            from .commands.score_id import run_score_id
            return run_score_id(args)
        elif args.command == "parse":
            from .commands.score_id import run_parse
            return run_parse(args)
        elif args.command == "composer":
            from .commands.composer import run_composer
            return run_composer(args)
        elif args.command == "similar":
            from .commands.similar import run_similar
            return run_similar(args, settings=settings)
        elif args.command == "same":
            from .commands.same import run_same
            return run_same(args, settings=settings)
        elif args.command == "dedupe-logbook":
            from .commands.dedupe import run_dedupe_logbook
            return run_dedupe_logbook(args)
        elif args.command == "dedupe-repertoire":
            from .commands.dedupe import run_dedupe_repertoire
            return run_dedupe_repertoire(args)
        elif args.command == "migrate":
            from .commands.migrate import run_migrate
            return run_migrate(args)
        else:
            parser.print_help()
            return 1
    except Exception as exc:  # pragma: no cover - exercised in CLI tests
        from .commands.output import emit_error
        from .errors import exit_code_for_exception

        exit_code = exit_code_for_exception(exc)
        if getattr(args, "json", False):
            emit_error(command=args.command, exc=exc, exit_code=exit_code, json_output=True)
        else:
            print(str(exc), file=sys.stderr)
        return exit_code


if __name__ == "__main__":
    sys.exit(main())
