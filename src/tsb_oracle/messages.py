"""Request variants and their JSON wire decoding.

Requests are externally tagged objects, e.g. ``{"get_token": {"token_id":
"t1"}}``. Tags and argument names are matched case-insensitively after
CamelCase is folded to snake_case, so ``{"GetToken": {"tokenId": "t1"}}``
decodes the same way. Arg-less requests may also be given as a bare tag
string.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from .domain import PriceRecord
from .errors import UnknownRequest

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_name(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name.strip()).lower()


class Request(BaseModel):
    tag: ClassVar[str]

    model_config = ConfigDict(extra="forbid", frozen=True)


# --- instantiate ---


class InstantiateMsg(Request):
    tag = "instantiate"

    admin: str


# --- execute ---


class UpdatePrices(PriceRecord):
    """Admin-only replacement of the whole price record."""

    tag: ClassVar[str] = "update_prices"

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_record(self) -> PriceRecord:
        return PriceRecord(
            btc=self.btc, eth=self.eth, usdc=self.usdc, usdt=self.usdt, dai=self.dai
        )


# --- price queries ---


class GetPrices(Request):
    tag = "get_prices"


class FetchFromOracle(Request):
    tag = "fetch_from_oracle"


# --- pass-through queries ---


class GetAllTokens(Request):
    tag = "get_all_tokens"


class GetToken(Request):
    tag = "get_token"

    token_id: str


class GetTokensByCreator(Request):
    tag = "get_tokens_by_creator"

    creator: str


class GetAllBalances(Request):
    tag = "get_all_balances"


class GetTokenBalance(Request):
    tag = "get_token_balance"

    token_id: str
    owner: str


class GetBalancesByOwner(Request):
    tag = "get_balances_by_owner"

    owner: str


class GetTokenOperations(Request):
    tag = "get_token_operations"

    token_id: str


class GetTokenOperation(Request):
    tag = "get_token_operation"

    operation_id: str


class GetPendingBitcoinSync(Request):
    tag = "get_pending_bitcoin_sync"


class GetTokensForSync(Request):
    tag = "get_tokens_for_sync"


class GetUtxos(Request):
    tag = "get_utxos"

    address: str | None = None


# --- aggregated queries ---


class GetTokenSummary(Request):
    tag = "get_token_summary"

    token_id: str


class GetUserPortfolio(Request):
    tag = "get_user_portfolio"

    owner: str


class GetSyncStatus(Request):
    tag = "get_sync_status"


QueryMsg = (
    GetPrices
    | FetchFromOracle
    | GetAllTokens
    | GetToken
    | GetTokensByCreator
    | GetAllBalances
    | GetTokenBalance
    | GetBalancesByOwner
    | GetTokenOperations
    | GetTokenOperation
    | GetPendingBitcoinSync
    | GetTokensForSync
    | GetUtxos
    | GetTokenSummary
    | GetUserPortfolio
    | GetSyncStatus
)

ExecuteMsg = UpdatePrices

QUERY_MESSAGES: dict[str, type[BaseModel]] = {
    cls.tag: cls
    for cls in (
        GetPrices,
        FetchFromOracle,
        GetAllTokens,
        GetToken,
        GetTokensByCreator,
        GetAllBalances,
        GetTokenBalance,
        GetBalancesByOwner,
        GetTokenOperations,
        GetTokenOperation,
        GetPendingBitcoinSync,
        GetTokensForSync,
        GetUtxos,
        GetTokenSummary,
        GetUserPortfolio,
        GetSyncStatus,
    )
}

EXECUTE_MESSAGES: dict[str, type[BaseModel]] = {UpdatePrices.tag: UpdatePrices}


def _decode(payload: Any, registry: Mapping[str, type[BaseModel]]) -> Any:
    if isinstance(payload, str):
        tag, args = payload, None
    elif isinstance(payload, Mapping) and len(payload) == 1:
        ((tag, args),) = payload.items()
    else:
        raise UnknownRequest("Request must be an object with exactly one key")

    if not isinstance(tag, str):
        raise UnknownRequest("Request tag must be a string")
    model = registry.get(normalize_name(tag))
    if model is None:
        raise UnknownRequest(f"Unknown request variant '{tag}'")

    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        raise UnknownRequest(f"Arguments of '{tag}' must be an object")

    normalized = {normalize_name(str(k)): v for k, v in args.items()}
    try:
        return model.model_validate(normalized)
    except ValidationError as exc:
        raise UnknownRequest(f"Invalid arguments for '{tag}': {exc}") from exc


def decode_query(payload: Any) -> QueryMsg:
    """Decode a JSON-compatible query payload.

    Raises:
        UnknownRequest: Unknown tag or arguments that do not validate
    """
    return _decode(payload, QUERY_MESSAGES)


def decode_execute(payload: Any) -> ExecuteMsg:
    """Decode a JSON-compatible execute payload.

    Raises:
        UnknownRequest: Unknown tag or arguments that do not validate
    """
    return _decode(payload, EXECUTE_MESSAGES)
