from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Storage(ABC):
    """Key-value substrate for the persisted admin identity and price record.

    Values are JSON-compatible (str, numbers, lists, dicts).
    """

    @abstractmethod
    def load(self, key: str) -> Any:
        """Return the value stored under ``key``.

        Raises:
            NotInitialized: If nothing has been saved under ``key``
        """
        ...

    @abstractmethod
    def save_many(self, slots: Mapping[str, Any]) -> None:
        """Store every ``slots`` entry in one write.

        Either all entries become visible or none do.
        """
        ...

    def save(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self.save_many({key: value})
