"""Core domain layer — PGN notation with zero external dependencies.

Quick start::

    from pgnview.core import parse_pgn_game, stringify_game

    game = parse_pgn_game(pgn_text)
    print(game.tags.get("White"), game.sans())
    print(stringify_game(game))
"""

from pgnview.core.enums import GameResult, Side, TokenType
from pgnview.core.notation import (
    ParsedPgn,
    PgnError,
    PgnMove,
    StringifyOptions,
    TagStore,
    parse_pgn,
    parse_pgn_game,
    stringify,
    stringify_game,
    tokenize,
)

__all__ = [
    # Enums
    "GameResult",
    "Side",
    "TokenType",
    # Notation
    "ParsedPgn",
    "PgnError",
    "PgnMove",
    "StringifyOptions",
    "TagStore",
    "parse_pgn",
    "parse_pgn_game",
    "stringify",
    "stringify_game",
    "tokenize",
]
