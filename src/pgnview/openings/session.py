"""Background catalog loading that publishes into an :class:`OpeningBook`."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from pgnview.openings.book import OpeningBook
from pgnview.openings.models import OpeningTree
from pgnview.openings.qt_bridge import CatalogWorker

_LOGGER = logging.getLogger(__name__)


class _CatalogCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    load_file_requested = pyqtSignal(str, int)
    load_bytes_requested = pyqtSignal(bytes, int)


class CatalogSession:
    """Owns the catalog worker thread and hands finished trees to a book.

    Only the most recent request is published; results of superseded
    requests are dropped.
    """

    _THREAD_WAIT_MS = 2000

    __slots__ = (
        "__weakref__",
        "_book",
        "_on_loaded",
        "_on_error",
        "_command_bus",
        "_thread",
        "_worker",
        "_request_id",
        "_pending_request",
        "_is_started",
    )

    def __init__(
        self,
        book: OpeningBook,
        *,
        on_loaded: Callable[[OpeningTree], None] | None = None,
        on_error: Callable[[str], None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        self._book = book
        self._on_loaded = on_loaded
        self._on_error = on_error
        self._command_bus = _CatalogCommandBus(parent)
        self._thread = QThread(parent)
        self._worker = CatalogWorker()
        self._request_id = 0
        self._pending_request: int | None = None
        self._is_started = False

    @property
    def is_loading(self) -> bool:
        return self._pending_request is not None

    def setup(self) -> None:
        """Start the worker in a dedicated thread and connect callbacks."""
        if self._is_started:
            return
        self._worker.moveToThread(self._thread)
        self._command_bus.load_file_requested.connect(self._worker.load_file)
        self._command_bus.load_bytes_requested.connect(self._worker.load_bytes)
        self._worker.catalog_ready.connect(self._on_catalog_ready)
        self._worker.catalog_error.connect(self._on_catalog_error)
        self._thread.finished.connect(self._worker.deleteLater)
        self._thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Drop pending work, stop the worker thread and release the worker.

        A fresh worker is prepared so :meth:`setup` can run again.
        """
        if not self._is_started:
            return
        self._pending_request = None
        self._command_bus.load_file_requested.disconnect()
        self._command_bus.load_bytes_requested.disconnect()
        self._worker.catalog_ready.disconnect()
        self._worker.catalog_error.disconnect()
        self._thread.quit()
        self._thread.wait(self._THREAD_WAIT_MS)
        self._worker = CatalogWorker()
        self._is_started = False

    def request_file(self, path: Path | str) -> int | None:
        """Queue loading of the catalog file at *path*."""
        if not self._is_started:
            return None
        request_id = self._next_request()
        self._command_bus.load_file_requested.emit(str(path), request_id)
        return request_id

    def request_bytes(self, data: bytes) -> int | None:
        """Queue building a tree from catalog bytes fetched by the caller."""
        if not self._is_started:
            return None
        request_id = self._next_request()
        self._command_bus.load_bytes_requested.emit(data, request_id)
        return request_id

    def _next_request(self) -> int:
        self._request_id += 1
        self._pending_request = self._request_id
        return self._request_id

    def _on_catalog_ready(self, request_id: int, tree_obj: object) -> None:
        if request_id != self._pending_request:
            return
        if not isinstance(tree_obj, OpeningTree):
            return
        self._pending_request = None
        self._book.publish(tree_obj)
        if self._on_loaded is not None:
            self._on_loaded(tree_obj)

    def _on_catalog_error(self, request_id: int, message: str) -> None:
        if request_id != self._pending_request:
            return
        self._pending_request = None
        _LOGGER.warning("Opening catalog failed to load: %s", message)
        if self._on_error is not None:
            self._on_error(message)
