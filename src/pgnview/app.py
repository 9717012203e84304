"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgnview.core.enums import GameResult
from pgnview.core.notation import (
    PgnError,
    StringifyOptions,
    game_result_from_pgn,
    parse_pgn_game,
    stringify_game,
    variation_movetext,
)
from pgnview.openings import OpeningBook

_LOGGER = logging.getLogger("pgnview")

_RESULT_LABELS = {
    GameResult.WHITE_WINS: "White wins",
    GameResult.BLACK_WINS: "Black wins",
    GameResult.DRAW: "Draw",
    GameResult.IN_PROGRESS: "Unfinished",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnview",
        description="Inspect a PGN game: tags, moves, variations and opening.",
    )
    parser.add_argument("pgn", type=Path, help="PGN file holding a single game")
    parser.add_argument("--eco", type=Path, help="ECO catalog used to name the opening")
    parser.add_argument(
        "--variations",
        action="store_true",
        help="List every variation as a complete line",
    )
    parser.add_argument(
        "--stringify",
        action="store_true",
        help="Print the game re-serialized as PGN instead of a summary",
    )
    parser.add_argument(
        "--no-annotations",
        action="store_true",
        help="Leave comments out of --stringify output",
    )
    parser.add_argument(
        "--no-variations",
        action="store_true",
        help="Leave variations out of --stringify output",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the ``pgnview`` command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = args.pgn.read_text(encoding="utf-8-sig", errors="replace")
        game = parse_pgn_game(text)
    except (OSError, PgnError) as exc:
        _LOGGER.error("Cannot read %s: %s", args.pgn, exc)
        return 1

    if args.stringify:
        options = StringifyOptions(
            include_annotations=not args.no_annotations,
            include_variations=not args.no_variations,
        )
        sys.stdout.write(stringify_game(game, options))
        return 0

    for tag in game.tags:
        print(f"{tag.name}: {tag.value}")
    print(f"Moves: {variation_movetext(game.sans())}")
    label = _RESULT_LABELS[game_result_from_pgn(game.result_token)]
    print(f"Result: {game.result_token} ({label})")

    if args.eco is not None:
        book = OpeningBook()
        try:
            book.load_file(args.eco)
        except OSError as exc:
            _LOGGER.error("Cannot read ECO catalog %s: %s", args.eco, exc)
            return 1
        opening = book.identify(game.sans())
        if opening.is_known:
            print(f"Opening: {opening.eco_code} {opening.name}")
        else:
            print("Opening: unknown")

    if args.variations:
        for index, line in enumerate(game.variations[1:], start=1):
            print(f"Variation {index}: {variation_movetext(line)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
