"""Core enumerations for the notation layer."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Side(IntEnum):
    """Side that plays a move."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class TokenType(StrEnum):
    """Kinds of lexical tokens found in PGN movetext."""

    NUMBER = "n"
    MOVE = "m"
    ANNOTATION = "a"
    VARIATION_OPEN = "vo"
    VARIATION_CLOSE = "vc"


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
