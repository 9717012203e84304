"""Lexical scanner for PGN movetext."""

from __future__ import annotations

from pgnview.core.enums import TokenType
from pgnview.core.notation.errors import UnterminatedAnnotationError
from pgnview.core.notation.models import Token
from pgnview.core.notation.tags import tag_section_end

_MOVE_START = frozenset("abcdefghKQBNRO")
_MOVE_STOP = "(){}"


def movetext_bounds(pgn_text: str, result: str = "") -> tuple[int, int]:
    """Return the ``[start, end)`` span of *pgn_text* that holds movetext.

    The span starts at the first ``"1."`` after the tag section and ends
    before the trailing result marker. The marker is cut by its length, never
    searched for, since result strings may also occur inside comments.
    """
    tags_end = tag_section_end(pgn_text)
    start = pgn_text.find("1.", tags_end)
    if start < 0:
        start = tags_end

    end = len(pgn_text.rstrip())
    if result and pgn_text[:end].endswith(result):
        end -= len(result)
    return start, max(start, end)


def tokenize(pgn_text: str, result: str = "") -> list[Token]:
    """Split PGN movetext into number, move, annotation and variation tokens.

    *result* is the value of the ``Result`` tag; the trailing result marker of
    that length is left out of the scan.
    """
    tokens: list[Token] = []
    idx, end = movetext_bounds(pgn_text, result)

    while idx < end:
        ch = pgn_text[idx]

        if ch.isdigit():
            stop = idx + 1
            while stop < end and (pgn_text[stop].isdigit() or pgn_text[stop] == "."):
                stop += 1
            tokens.append(Token(TokenType.NUMBER, pgn_text[idx:stop]))
            idx = stop
            continue

        if ch == "(":
            tokens.append(Token(TokenType.VARIATION_OPEN, ch))
            idx += 1
            continue

        if ch == ")":
            tokens.append(Token(TokenType.VARIATION_CLOSE, ch))
            idx += 1
            continue

        if ch == "{":
            close = pgn_text.find("}", idx + 1, end)
            if close < 0:
                raise UnterminatedAnnotationError(idx)
            tokens.append(Token(TokenType.ANNOTATION, pgn_text[idx : close + 1]))
            idx = close + 1
            continue

        if ch == ";":
            stop = pgn_text.find("\n", idx + 1, end)
            if stop < 0:
                stop = end
            tokens.append(Token(TokenType.ANNOTATION, pgn_text[idx:stop].rstrip()))
            idx = stop
            continue

        if ch in _MOVE_START:
            stop = idx + 1
            while (
                stop < end
                and not pgn_text[stop].isspace()
                and pgn_text[stop] not in _MOVE_STOP
            ):
                stop += 1
            tokens.append(Token(TokenType.MOVE, pgn_text[idx:stop]))
            idx = stop
            continue

        # Whitespace, stray punctuation and "$n" glyph markers.
        idx += 1

    return tokens


def annotation_text(token_text: str) -> str:
    """Return the comment body of an annotation token, whitespace-collapsed."""
    if token_text.startswith("{"):
        body = token_text[1:-1] if token_text.endswith("}") else token_text[1:]
    elif token_text.startswith(";"):
        body = token_text[1:]
    else:
        body = token_text
    return " ".join(body.split())
