"""Opening layer — ECO catalog tree and move-sequence classification.

Quick start::

    from pgnview.openings import OpeningBook

    book = OpeningBook()
    book.load(catalog_text)
    book.identify(["e4", "e5", "Nf3", "Nc6", "Bb5"])

The Qt worker (:mod:`pgnview.openings.qt_bridge`) and background session
(:mod:`pgnview.openings.session`) are imported explicitly since they need
PyQt6.
"""

from pgnview.openings.book import OpeningBook
from pgnview.openings.eco import (
    add_line,
    build_tree,
    identify,
    identify_movetext,
    normalize_catalog,
    parse_catalog_line,
    strip_move_number,
)
from pgnview.openings.models import UNKNOWN_OPENING, Opening, OpeningNode, OpeningTree

__all__ = [
    # Models
    "Opening",
    "OpeningNode",
    "OpeningTree",
    "UNKNOWN_OPENING",
    # Catalog
    "add_line",
    "build_tree",
    "normalize_catalog",
    "parse_catalog_line",
    "strip_move_number",
    # Classification
    "OpeningBook",
    "identify",
    "identify_movetext",
]
