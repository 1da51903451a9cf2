from __future__ import annotations

from .base import ExternalDataSource
from .http_source import HttpDataSource

__all__ = ["ExternalDataSource", "HttpDataSource"]
