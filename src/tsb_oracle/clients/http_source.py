"""HTTP client for the token-state data source.

Each lookup is POSTed to ``<base_url>/query`` as the chain's custom query
envelope::

    {"method": "get_token", "args": {"token_id": "t1"}}

and the JSON body is validated against the lookup's response shape.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..constants import DEFAULT_REQUEST_TIMEOUT, ORACLE_CONTACTS_METHOD
from ..domain import (
    BalanceResponse,
    BalancesResponse,
    ContactsResponse,
    OperationResponse,
    OperationsResponse,
    TokenIdsResponse,
    TokenResponse,
    TokensResponse,
    UtxosResponse,
)
from ..errors import UpstreamQueryFailed
from ..logger import TRACE, get_logger
from .base import ExternalDataSource

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class HttpDataSource(ExternalDataSource):
    """Data source reached over HTTP.

    One request per lookup, no retries: a failed call fails the whole request
    that issued it.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Root URL of the data source API
            api_key: Optional bearer token sent on every request
            request_timeout: HTTP request timeout in seconds
            session: Pre-configured session (tests inject a mock here)
        """
        self._query_url = f"{base_url.rstrip('/')}/query"
        self._request_timeout = request_timeout
        self._session = session or requests.Session()
        if api_key:
            self._session.headers["Authorization"] = f"Bearer {api_key}"

    def _query(
        self, method: str, args: dict[str, Any], response_model: type[ResponseT]
    ) -> ResponseT:
        payload = {"method": method, "args": args}
        logger.debug("Query payload = %s", json.dumps(payload))

        try:
            resp = self._session.post(
                self._query_url, json=payload, timeout=self._request_timeout
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise UpstreamQueryFailed(method, str(exc)) from exc

        try:
            body = resp.json()
        except ValueError as exc:
            raise UpstreamQueryFailed(method, "response is not valid JSON") from exc

        logger.log(TRACE, "Query %s returned %s", method, body)

        if isinstance(body, dict) and "error" in body:
            raise UpstreamQueryFailed(method, str(body["error"]))

        try:
            return response_model.model_validate(body)
        except ValidationError as exc:
            raise UpstreamQueryFailed(
                method, f"unexpected response shape: {exc}"
            ) from exc

    def get_all_tokens(self) -> TokensResponse:
        return self._query("get_all_tokens", {}, TokensResponse)

    def get_token(self, token_id: str) -> TokenResponse:
        return self._query("get_token", {"token_id": token_id}, TokenResponse)

    def get_tokens_by_creator(self, creator: str) -> TokensResponse:
        return self._query(
            "get_tokens_by_creator", {"creator": creator}, TokensResponse
        )

    def get_all_balances(self) -> BalancesResponse:
        return self._query("get_all_balances", {}, BalancesResponse)

    def get_token_balance(self, token_id: str, owner: str) -> BalanceResponse:
        return self._query(
            "get_token_balance",
            {"token_id": token_id, "owner": owner},
            BalanceResponse,
        )

    def get_balances_by_owner(self, owner: str) -> BalancesResponse:
        return self._query("get_balances_by_owner", {"owner": owner}, BalancesResponse)

    def get_token_operations(self, token_id: str) -> OperationsResponse:
        return self._query(
            "get_token_operations", {"token_id": token_id}, OperationsResponse
        )

    def get_token_operation(self, operation_id: str) -> OperationResponse:
        return self._query(
            "get_token_operation", {"operation_id": operation_id}, OperationResponse
        )

    def get_pending_bitcoin_sync(self) -> OperationsResponse:
        return self._query("get_pending_bitcoin_sync", {}, OperationsResponse)

    def get_tokens_for_sync(self) -> TokenIdsResponse:
        return self._query("get_tokens_for_sync", {}, TokenIdsResponse)

    def get_utxos(self, address: str | None = None) -> UtxosResponse:
        return self._query("get_utxos", {"address": address}, UtxosResponse)

    def get_all_contacts(
        self, method: str = ORACLE_CONTACTS_METHOD
    ) -> ContactsResponse:
        return self._query(method, {}, ContactsResponse)
