"""ECO catalog ingestion and opening classification.

Catalog lines look like::

    C60 "Ruy Lopez" 1.e4 e5 2.Nf3 Nc6 3.Bb5 *

Lines starting with whitespace continue the previous line; ``#`` lines and
blank lines are ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from pgnview.core.notation.pgn import PGN_RESULT_TOKENS
from pgnview.openings.models import UNKNOWN_OPENING, Opening, OpeningTree

_LOGGER = logging.getLogger(__name__)

_MOVE_NUMBER_PREFIX_RE = re.compile(r"^\d+\.+")


def strip_move_number(token: str) -> str:
    """Drop a leading move-number marker: ``"1.e4"`` -> ``"e4"``."""
    return _MOVE_NUMBER_PREFIX_RE.sub("", token)


def normalize_catalog(catalog: str) -> list[str]:
    """Return catalog entries with continuation lines folded in.

    Must run before any line is parsed, since an entry's moves may span
    several physical lines.
    """
    lines: list[str] = []
    for raw_line in catalog.removeprefix("\ufeff").splitlines():
        line = raw_line.rstrip("\r")
        if not line.strip():
            continue
        if line.startswith("#"):
            continue
        if line[0].isspace():
            if not lines:
                _LOGGER.warning("Catalog continuation line without an entry: %r", line)
                continue
            lines[-1] += line
            continue
        lines.append(line)
    return lines


def parse_catalog_line(line: str) -> tuple[str, str, list[str]]:
    """Split one catalog entry into ``(eco_code, name, sans)``."""
    open_quote = line.find('"')
    close_quote = line.find('"', open_quote + 1) if open_quote >= 0 else -1
    if close_quote < 0:
        raise ValueError(f"Catalog line has no quoted name: {line!r}")

    eco_code = line[:open_quote].strip()
    name = line[open_quote + 1 : close_quote]
    sans: list[str] = []
    for token in line[close_quote + 1 :].split():
        if token in PGN_RESULT_TOKENS:
            continue
        san = strip_move_number(token)
        if san:
            sans.append(san)
    return eco_code, name, sans


def add_line(tree: OpeningTree, eco_code: str, name: str, sans: Iterable[str]) -> int:
    """Insert one catalog line and return the handle of its last node.

    Existing nodes are never relabeled: the first entry that ends on a node
    names it.
    """
    handle = OpeningTree.ROOT
    for san in sans:
        child = tree.child(handle, san)
        if child is None:
            child = tree.add_child(handle, san)
        handle = child

    if handle != OpeningTree.ROOT:
        node = tree.node(handle)
        if not node.has_code:
            node.eco_code = eco_code
            node.name = name
    return handle


def build_tree(catalog: str | bytes) -> OpeningTree:
    """Build a complete opening tree from catalog text."""
    if isinstance(catalog, bytes):
        catalog = catalog.decode("utf-8-sig", errors="replace")

    tree = OpeningTree()
    entries = 0
    for line in normalize_catalog(catalog):
        try:
            eco_code, name, sans = parse_catalog_line(line)
        except ValueError as exc:
            _LOGGER.warning("Skipping catalog line: %s", exc)
            continue
        add_line(tree, eco_code, name, sans)
        entries += 1

    _LOGGER.debug("Built opening tree: %d entries, %d nodes", entries, len(tree))
    return tree


def identify(tree: OpeningTree | None, sans: Iterable[str]) -> Opening:
    """Return the deepest named opening reached by playing *sans*."""
    if tree is None:
        return UNKNOWN_OPENING

    opening = UNKNOWN_OPENING
    handle = OpeningTree.ROOT
    for token in sans:
        child = tree.child(handle, strip_move_number(token))
        if child is None:
            break
        handle = child
        node = tree.node(handle)
        if node.has_code:
            opening = Opening(eco_code=node.eco_code, name=node.name)
    return opening


def identify_movetext(tree: OpeningTree | None, movetext: str) -> Opening:
    """Classify a movetext string such as ``"1. e4 e5 2. Nf3"``."""
    sans = [
        san
        for san in (strip_move_number(token) for token in movetext.split())
        if san
    ]
    return identify(tree, sans)
