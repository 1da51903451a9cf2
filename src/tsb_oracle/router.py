"""Query router: maps each request variant to exactly one handler."""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel

from . import prices
from .clients.base import ExternalDataSource
from .constants import ORACLE_CONTACTS_METHOD
from .domain.responses import PriceUpdateResponse, Response
from .logger import get_logger
from .messages import (
    ExecuteMsg,
    FetchFromOracle,
    GetAllBalances,
    GetAllTokens,
    GetBalancesByOwner,
    GetPendingBitcoinSync,
    GetPrices,
    GetSyncStatus,
    GetToken,
    GetTokenBalance,
    GetTokenOperation,
    GetTokenOperations,
    GetTokensByCreator,
    GetTokensForSync,
    GetTokenSummary,
    GetUserPortfolio,
    GetUtxos,
    InstantiateMsg,
    QueryMsg,
    UpdatePrices,
    decode_execute,
    decode_query,
)
from .processors import (
    build_sync_status,
    build_token_summary,
    build_user_portfolio,
    fetch_from_oracle,
)
from .storage import Storage

logger = get_logger(__name__)

Handler = Callable[[Any], BaseModel]


class QueryRouter:
    """Dispatches decoded requests to pass-through lookups, the price store,
    the oracle fetch or an aggregation view.
    """

    def __init__(
        self,
        source: ExternalDataSource | None,
        storage: Storage,
        oracle_method: str = ORACLE_CONTACTS_METHOD,
    ):
        """Initialize the router.

        Args:
            source: Data source client; price-table requests work without one
            storage: Persisted admin identity and price record
            oracle_method: Custom query method listing oracle contacts
        """
        self.source = source
        self.storage = storage
        self.oracle_method = oracle_method

        self._query_handlers: dict[type[BaseModel], Handler] = {
            GetPrices: lambda _: prices.get_prices(storage),
            FetchFromOracle: lambda _: fetch_from_oracle(self._src, self.oracle_method),
            GetAllTokens: lambda _: self._src.get_all_tokens(),
            GetToken: lambda m: self._src.get_token(m.token_id),
            GetTokensByCreator: lambda m: self._src.get_tokens_by_creator(m.creator),
            GetAllBalances: lambda _: self._src.get_all_balances(),
            GetTokenBalance: lambda m: self._src.get_token_balance(m.token_id, m.owner),
            GetBalancesByOwner: lambda m: self._src.get_balances_by_owner(m.owner),
            GetTokenOperations: lambda m: self._src.get_token_operations(m.token_id),
            GetTokenOperation: lambda m: self._src.get_token_operation(m.operation_id),
            GetPendingBitcoinSync: lambda _: self._src.get_pending_bitcoin_sync(),
            GetTokensForSync: lambda _: self._src.get_tokens_for_sync(),
            GetUtxos: lambda m: self._src.get_utxos(m.address),
            GetTokenSummary: lambda m: build_token_summary(self._src, m.token_id),
            GetUserPortfolio: lambda m: build_user_portfolio(self._src, m.owner),
            GetSyncStatus: lambda _: build_sync_status(self._src),
        }

    @property
    def _src(self) -> ExternalDataSource:
        if self.source is None:
            raise ValueError("source_url must be configured to reach the data source")
        return self.source

    def instantiate(self, msg: InstantiateMsg) -> Response:
        return prices.initialize(self.storage, msg.admin)

    def execute(self, sender: str, msg: ExecuteMsg) -> PriceUpdateResponse:
        if not isinstance(msg, UpdatePrices):
            raise TypeError(f"Unsupported execute message {type(msg).__name__}")
        logger.debug("Dispatching %s from %s", msg.tag, sender)
        return prices.update_prices(self.storage, sender, msg.to_record())

    def query(self, msg: QueryMsg) -> BaseModel:
        handler = self._query_handlers.get(type(msg))
        if handler is None:
            raise TypeError(f"Unsupported query message {type(msg).__name__}")
        logger.debug("Dispatching %s", msg.tag)
        return handler(msg)

    def query_json(self, payload: Any) -> dict[str, Any]:
        """Decode, dispatch and serialize a JSON-compatible query payload."""
        result = self.query(decode_query(payload))
        return result.model_dump(mode="json", by_alias=True)

    def execute_json(self, sender: str, payload: Any) -> dict[str, Any]:
        """Decode, dispatch and serialize a JSON-compatible execute payload."""
        result = self.execute(sender, decode_execute(payload))
        return result.model_dump(mode="json", by_alias=True)
