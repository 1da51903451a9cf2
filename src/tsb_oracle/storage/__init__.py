from __future__ import annotations

from .base import Storage
from .json_file import JsonFileStorage
from .memory import MemoryStorage

__all__ = ["Storage", "JsonFileStorage", "MemoryStorage"]
