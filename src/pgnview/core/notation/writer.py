"""PGN serialization: the inverse of :mod:`pgnview.core.notation.pgn`."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pgnview.core.enums import Side
from pgnview.core.notation.models import ParsedPgn, PgnMove, StringifyOptions, Tag


def stringify_tags(tags: Iterable[Tag]) -> str:
    """Render tag pairs one per line, in order."""
    lines: list[str] = []
    for tag in tags:
        escaped = tag.value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{tag.name} "{escaped}"]\n')
    return "".join(lines)


def stringify_moves(
    moves: Sequence[PgnMove], options: StringifyOptions | None = None
) -> str:
    """Render mainline moves, optionally with glyphs, comments and variations."""
    if options is None:
        options = StringifyOptions()

    parts: list[str] = []
    for move in moves:
        if move.side == Side.WHITE:
            parts.append(f"{move.ordinal}.{move.san}")
        else:
            parts.append(move.san)

        if options.include_glyph_codes:
            parts.extend(move.glyph_codes)
        if options.include_annotations and move.annotation:
            safe_comment = move.annotation.replace("}", "]")
            parts.append(f"{{{safe_comment}}}")
        if options.include_variations and move.variation:
            parts.append(move.variation)
    return " ".join(parts)


def stringify(
    tags: Iterable[Tag],
    moves: Sequence[PgnMove],
    result_token: str,
    options: StringifyOptions | None = None,
) -> str:
    """Build a single-game PGN document."""
    movetext = stringify_moves(moves, options)
    if movetext:
        movetext = f"{movetext} {result_token}"
    else:
        movetext = result_token
    return f"{stringify_tags(tags)}\n{movetext}\n"


def stringify_game(parsed: ParsedPgn, options: StringifyOptions | None = None) -> str:
    """Render a parsed game back to PGN text."""
    return stringify(parsed.tags, parsed.moves, parsed.result_token, options)


def variation_movetext(sans: Sequence[str]) -> str:
    """Render a flat SAN line as numbered movetext, e.g. ``1. e4 e5 2. Nf3``."""
    parts: list[str] = []
    for ply, san in enumerate(sans):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(san)
    return " ".join(parts)
