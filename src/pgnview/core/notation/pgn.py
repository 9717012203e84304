"""PGN game parsing: mainline moves and the variation tree."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pgnview.core.enums import GameResult, Side, TokenType
from pgnview.core.notation.errors import UnbalancedVariationError
from pgnview.core.notation.models import ParsedPgn, PgnMove, Token
from pgnview.core.notation.tags import TagStore
from pgnview.core.notation.tokenizer import annotation_text, tokenize

_LOGGER = logging.getLogger(__name__)

PGN_RESULT_TOKENS = ("1-0", "0-1", "1/2-1/2", "*")


def game_result_from_pgn(token: str) -> GameResult:
    """Convert PGN result token to :class:`GameResult`."""
    if token == "1-0":
        return GameResult.WHITE_WINS
    if token == "0-1":
        return GameResult.BLACK_WINS
    if token == "1/2-1/2":
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


def check_variation_balance(tokens: Sequence[Token]) -> None:
    """Raise :class:`UnbalancedVariationError` unless parentheses pair up."""
    open_indices: list[int] = []
    for index, token in enumerate(tokens):
        if token.type == TokenType.VARIATION_OPEN:
            open_indices.append(index)
        elif token.type == TokenType.VARIATION_CLOSE:
            if not open_indices:
                raise UnbalancedVariationError(index)
            open_indices.pop()
    if open_indices:
        raise UnbalancedVariationError(open_indices[0])


def _next_ply(ordinal: int, side: Side) -> tuple[int, Side]:
    if side == Side.BLACK:
        return ordinal + 1, Side.WHITE
    return ordinal, Side.BLACK


def _previous_ply(ordinal: int, side: Side) -> tuple[int, Side]:
    if side == Side.WHITE:
        return ordinal - 1, Side.BLACK
    return ordinal, Side.WHITE


def _join_movetext(parts: list[str]) -> str:
    text = ""
    for part in parts:
        if text and not text.endswith("(") and part != ")":
            text += " "
        text += part
    return text


def _append_annotation(move: PgnMove, comment: str) -> None:
    if move.annotation:
        move.annotation = f"{move.annotation} {comment}"
    else:
        move.annotation = comment


def _append_variation(move: PgnMove, variation: str) -> None:
    if move.variation:
        move.variation = f"{move.variation} {variation}"
    else:
        move.variation = variation


def parse_mainline(tokens: Sequence[Token]) -> list[PgnMove]:
    """Build mainline moves with their annotations and raw variation text.

    Moves inside parentheses are not added to the mainline; they are
    re-serialized into a text buffer that is attached to the last mainline
    move once the outermost variation closes.

    The buffer is renumbered rather than copied: each variation counts from
    the position it branches at, so ``(2. f4 exf4)`` replacing White's second
    move reads the same whatever numbers the source used. A Black move gets
    an explicit ``N...`` prefix when it opens a variation or follows a
    comment or a closed sub-variation; otherwise it goes unnumbered.
    """
    check_variation_balance(tokens)

    moves: list[PgnMove] = []
    ordinal = 1
    side = Side.WHITE
    depth = 0
    parts: list[str] = []
    # Next ordinal/side inside each open variation, innermost last.
    contexts: list[tuple[int, Side]] = []
    number_black = False

    for token in tokens:
        if token.type == TokenType.MOVE:
            if depth == 0:
                moves.append(PgnMove(ordinal=ordinal, side=side, san=token.text))
                ordinal, side = _next_ply(ordinal, side)
                continue

            var_ordinal, var_side = contexts[-1]
            if var_side == Side.WHITE:
                parts.append(f"{var_ordinal}. {token.text}")
            elif number_black:
                parts.append(f"{var_ordinal}... {token.text}")
            else:
                parts.append(token.text)
            contexts[-1] = _next_ply(var_ordinal, var_side)
            number_black = False

        elif token.type == TokenType.ANNOTATION:
            comment = annotation_text(token.text)
            if not comment:
                continue
            if depth == 0:
                if moves:
                    _append_annotation(moves[-1], comment)
                continue
            # PGN comments cannot contain a closing brace.
            parts.append(f"{{{comment.replace('}', ']')}}}")
            number_black = True

        elif token.type == TokenType.VARIATION_OPEN:
            if depth == 0:
                parts = []
                enclosing = (ordinal, side)
            else:
                enclosing = contexts[-1]
            contexts.append(_previous_ply(*enclosing))
            parts.append("(")
            depth += 1
            number_black = True

        elif token.type == TokenType.VARIATION_CLOSE:
            contexts.pop()
            parts.append(")")
            depth -= 1
            number_black = True
            if depth == 0:
                if moves:
                    _append_variation(moves[-1], _join_movetext(parts))
                else:
                    _LOGGER.warning("Variation before the first move dropped")
                parts = []

    return moves


def parse_variations(tokens: Sequence[Token]) -> list[list[str]]:
    """Return every line of the game as a complete SAN sequence.

    Index 0 is the mainline. A variation starts with a copy of the line it
    branches from, minus that line's last move, so each entry is replayable
    from the initial position.
    """
    check_variation_balance(tokens)

    variations: list[list[str]] = [[]]
    stack = [0]

    for token in tokens:
        if token.type == TokenType.MOVE:
            variations[stack[-1]].append(token.text)
        elif token.type == TokenType.VARIATION_OPEN:
            parent = variations[stack[-1]]
            variations.append(parent[:-1])
            stack.append(len(variations) - 1)
        elif token.type == TokenType.VARIATION_CLOSE:
            stack.pop()

    return variations


def _trailing_result(pgn_text: str) -> str:
    body = pgn_text.rstrip()
    for token in PGN_RESULT_TOKENS:
        if not body.endswith(token):
            continue
        head = body[: -len(token)]
        if not head or head[-1].isspace() or head[-1] in ")}":
            return token
    return ""


def parse_pgn_game(pgn_text: str) -> ParsedPgn:
    """Parse a single PGN game into tags, moves, variations and result."""
    tags = TagStore.from_text(pgn_text)
    declared = tags.get("Result")
    trailing = _trailing_result(pgn_text)

    tokens = tokenize(pgn_text, declared or trailing)
    moves = parse_mainline(tokens)
    variations = parse_variations(tokens)

    return ParsedPgn(
        tags=tags,
        moves=moves,
        variations=variations,
        result_token=declared or trailing or "*",
    )


def parse_pgn(pgn_text: str) -> tuple[dict[str, str], list[str], str]:
    """Parse *pgn_text* and return headers + SAN mainline + result."""
    parsed = parse_pgn_game(pgn_text)
    return parsed.headers, parsed.sans(), parsed.result_token
