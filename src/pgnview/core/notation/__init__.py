"""Notation package: PGN tags, tokens, move trees and serialization."""

from pgnview.core.notation.errors import (
    MalformedTagError,
    PgnError,
    UnbalancedVariationError,
    UnterminatedAnnotationError,
)
from pgnview.core.notation.models import (
    ParsedPgn,
    PgnMove,
    StringifyOptions,
    Tag,
    Token,
)
from pgnview.core.notation.pgn import (
    PGN_RESULT_TOKENS,
    check_variation_balance,
    game_result_from_pgn,
    parse_mainline,
    parse_pgn,
    parse_pgn_game,
    parse_variations,
)
from pgnview.core.notation.tags import TAG_NAMES, TagStore, is_known_tag, parse_tags
from pgnview.core.notation.tokenizer import annotation_text, tokenize
from pgnview.core.notation.writer import (
    stringify,
    stringify_game,
    stringify_moves,
    stringify_tags,
    variation_movetext,
)

__all__ = [
    # Errors
    "PgnError",
    "MalformedTagError",
    "UnterminatedAnnotationError",
    "UnbalancedVariationError",
    # Models
    "Tag",
    "Token",
    "PgnMove",
    "ParsedPgn",
    "StringifyOptions",
    # Tags
    "TAG_NAMES",
    "TagStore",
    "is_known_tag",
    "parse_tags",
    # Tokens
    "tokenize",
    "annotation_text",
    # Move tree
    "PGN_RESULT_TOKENS",
    "check_variation_balance",
    "parse_mainline",
    "parse_variations",
    "parse_pgn_game",
    "parse_pgn",
    "game_result_from_pgn",
    # Serialization
    "stringify",
    "stringify_game",
    "stringify_moves",
    "stringify_tags",
    "variation_movetext",
]
