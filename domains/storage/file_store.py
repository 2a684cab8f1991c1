"""JSON-file document store (one file per key under DATA_DIR)."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from logger import logger
from .base import DocumentStore, StoreError


class FileDocumentStore(DocumentStore):
    """Stores each document as ``<data_dir>/<key>.json``.

    Writes go to a temp file in the same directory and are moved into place
    with ``os.replace``, so a reader sees either the old or the new document.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    async def get(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.exists():
            return None

        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {path}: {e}") from e

    async def put(self, key: str, document: Any) -> None:
        path = self._path(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    # Indented for easier debugging of the cached file
                    json.dump(document, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"Failed to write {path}: {e}") from e

        logger.debug(f"Wrote document '{key}' to {path}")
