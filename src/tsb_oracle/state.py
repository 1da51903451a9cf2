"""Application state container."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .clients import ExternalDataSource, HttpDataSource
from .router import QueryRouter
from .settings import OracleSettings
from .storage import JsonFileStorage, Storage


@dataclass
class AppState:
    """Container for application-wide state and dependencies.

    Passed explicitly to avoid global state and enable testing.
    """

    settings: OracleSettings
    logger: logging.Logger
    storage: Storage
    source: ExternalDataSource | None = None

    def router(self) -> QueryRouter:
        return QueryRouter(self.source, self.storage, self.settings.oracle_method)


def build_state(settings: OracleSettings, logger: logging.Logger) -> AppState:
    """Wire storage and the data source client from settings.

    The source stays unset without ``source_url``; price-table commands still
    work in that case.
    """
    source: ExternalDataSource | None = None
    if settings.source_url:
        api_key = settings.source_api_key
        source = HttpDataSource(
            settings.source_url,
            api_key=api_key.get_secret_value() if api_key else None,
            request_timeout=settings.request_timeout,
        )
    return AppState(
        settings=settings,
        logger=logger,
        storage=JsonFileStorage(settings.state_path),
        source=source,
    )
