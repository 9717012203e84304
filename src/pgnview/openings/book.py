"""Shared handle to the current opening tree."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from pgnview.openings.eco import build_tree, identify, identify_movetext
from pgnview.openings.models import Opening, OpeningTree

_LOGGER = logging.getLogger(__name__)


class OpeningBook:
    """Holds one opening tree and swaps it wholesale on reload.

    A tree is always built completely before it is published, so readers
    see either the previous tree or the new one, never a partial build.
    """

    __slots__ = ("_lock", "_tree")

    def __init__(self, tree: OpeningTree | None = None) -> None:
        self._lock = threading.Lock()
        self._tree = tree

    @property
    def tree(self) -> OpeningTree | None:
        return self._tree

    @property
    def is_loaded(self) -> bool:
        return self._tree is not None

    def publish(self, tree: OpeningTree | None) -> None:
        """Replace the current tree with *tree*."""
        with self._lock:
            self._tree = tree
        if tree is not None:
            _LOGGER.info("Opening tree published (%d nodes)", len(tree))

    def clear(self) -> None:
        self.publish(None)

    def load(self, catalog: str | bytes) -> OpeningTree:
        """Build a tree from *catalog* and publish it."""
        tree = build_tree(catalog)
        self.publish(tree)
        return tree

    def load_file(self, path: Path | str) -> OpeningTree:
        """Build and publish a tree from a catalog file on disk."""
        return self.load(Path(path).read_bytes())

    def identify(self, sans: Iterable[str]) -> Opening:
        return identify(self._tree, sans)

    def identify_movetext(self, movetext: str) -> Opening:
        return identify_movetext(self._tree, movetext)
