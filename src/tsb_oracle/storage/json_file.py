"""Single JSON document on disk holding every state slot."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import NotInitialized
from ..logger import get_logger
from .base import Storage

logger = get_logger(__name__)


class JsonFileStorage(Storage):
    """Storage persisted to a JSON file.

    Every write rewrites the whole document into a temp file in the same
    directory and renames it over the original, so readers see either the
    previous or the new document, never a partial write.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"State file {self._path} does not hold a JSON object")
        return data

    def load(self, key: str) -> Any:
        data = self._read()
        if key not in data:
            raise NotInitialized(key)
        return data[key]

    def save_many(self, slots: Mapping[str, Any]) -> None:
        data = self._read()
        data.update(slots)

        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved state slots %s to %s", sorted(slots), self._path)
