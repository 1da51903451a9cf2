from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from ..errors import NotInitialized
from .base import Storage


class MemoryStorage(Storage):
    """Dict-backed storage; contents live as long as the instance."""

    def __init__(self) -> None:
        self._slots: dict[str, Any] = {}

    def load(self, key: str) -> Any:
        if key not in self._slots:
            raise NotInitialized(key)
        return copy.deepcopy(self._slots[key])

    def save_many(self, slots: Mapping[str, Any]) -> None:
        # Copy everything first so a failing deepcopy leaves the dict untouched
        staged = {key: copy.deepcopy(value) for key, value in slots.items()}
        self._slots.update(staged)
