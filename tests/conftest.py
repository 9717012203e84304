"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

TWO_KNIGHTS_PGN = (
    "1. e4 e5 2. Nf3 Nc6 3. Bc4 Nf6 4. Ng5 d5 "
    "(4... Bc5 5. Bxf7+ Ke7 6. Bb3) 5. exd5 Nxd5"
)

RUY_LOPEZ_CATALOG = 'C60 "Ruy Lopez" 1.e4 e5 2.Nf3 Nc6 3.Bb5\n'


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt signal/thread tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def two_knights_pgn() -> str:
    return TWO_KNIGHTS_PGN


@pytest.fixture
def ruy_lopez_catalog() -> str:
    return RUY_LOPEZ_CATALOG
