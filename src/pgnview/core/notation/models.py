"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pgnview.core.enums import Side, TokenType

if TYPE_CHECKING:
    from pgnview.core.notation.tags import TagStore


@dataclass(slots=True, frozen=True)
class Tag:
    """A single ``[Name "Value"]`` tag pair."""

    name: str
    value: str


@dataclass(slots=True, frozen=True)
class Token:
    """A lexical token of PGN movetext."""

    type: TokenType
    text: str


@dataclass(slots=True)
class PgnMove:
    """A single mainline move extracted from PGN movetext."""

    ordinal: int
    side: Side
    san: str
    glyph_codes: list[str] = field(default_factory=list)
    annotation: str = ""
    variation: str = ""


@dataclass(slots=True)
class StringifyOptions:
    """What to emit besides the bare mainline when writing PGN."""

    include_glyph_codes: bool = True
    include_annotations: bool = True
    include_variations: bool = True


@dataclass(slots=True)
class ParsedPgn:
    """Structured PGN payload: tags, mainline moves and every variation.

    ``variations[0]`` is the mainline; every other entry is a complete
    alternative line including the moves it inherits.
    """

    tags: TagStore
    moves: list[PgnMove]
    variations: list[list[str]]
    result_token: str

    @property
    def headers(self) -> dict[str, str]:
        return self.tags.as_dict()

    def sans(self) -> list[str]:
        """Return the mainline SAN strings."""
        return [move.san for move in self.moves]
