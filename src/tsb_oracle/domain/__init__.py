"""Domain models for the oracle."""

from __future__ import annotations

from .prices import (
    MAX_PRICE,
    PriceRecord,
    format_decimal,
    parse_decimal_literal,
)
from .records import (
    Balance,
    BalanceResponse,
    BalancesResponse,
    Contact,
    ContactsResponse,
    Operation,
    OperationResponse,
    OperationsResponse,
    Token,
    TokenIdsResponse,
    TokenResponse,
    TokensResponse,
    Utxo,
    UtxosResponse,
)
from .views import SyncStatus, TokenSummary, UserPortfolio

__all__ = [
    "MAX_PRICE",
    "PriceRecord",
    "format_decimal",
    "parse_decimal_literal",
    "Balance",
    "BalanceResponse",
    "BalancesResponse",
    "Contact",
    "ContactsResponse",
    "Operation",
    "OperationResponse",
    "OperationsResponse",
    "Token",
    "TokenIdsResponse",
    "TokenResponse",
    "TokensResponse",
    "Utxo",
    "UtxosResponse",
    "SyncStatus",
    "TokenSummary",
    "UserPortfolio",
]
