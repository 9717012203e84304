"""Qt bridge to build opening trees in a worker thread."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from pgnview.openings.eco import build_tree


class CatalogWorker(QObject):
    """Thread-affine worker that turns catalog sources into opening trees."""

    catalog_ready = pyqtSignal(int, object)
    catalog_error = pyqtSignal(int, str)

    @pyqtSlot(str, int)
    def load_file(self, path: str, request_id: int) -> None:
        """Read the catalog at *path* and emit the resulting tree."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            self.catalog_error.emit(request_id, str(exc))
            return
        self.load_bytes(data, request_id)

    @pyqtSlot(bytes, int)
    def load_bytes(self, data: bytes, request_id: int) -> None:
        """Build a tree from raw catalog bytes and emit it."""
        try:
            tree = build_tree(data)
        except Exception as exc:
            self.catalog_error.emit(request_id, str(exc))
            return
        self.catalog_ready.emit(request_id, tree)
