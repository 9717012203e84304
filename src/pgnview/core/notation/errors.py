"""Structured errors raised while reading PGN text."""

from __future__ import annotations


class PgnError(ValueError):
    """Base class for PGN parsing failures."""


class MalformedTagError(PgnError):
    """A tag-pair segment has no quoted value."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"Malformed PGN tag: [{segment}]")
        self.segment = segment


class UnterminatedAnnotationError(PgnError):
    """A ``{`` comment is never closed."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Unterminated annotation starting at offset {position}")
        self.position = position


class UnbalancedVariationError(PgnError):
    """Variation parentheses do not pair up."""

    def __init__(self, token_index: int) -> None:
        super().__init__(f"Unbalanced variation at token {token_index}")
        self.token_index = token_index
