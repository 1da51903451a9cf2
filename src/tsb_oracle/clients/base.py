from __future__ import annotations

from abc import ABC, abstractmethod

from ..constants import ORACLE_CONTACTS_METHOD
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


class ExternalDataSource(ABC):
    """Primitive lookups offered by the token-state data source.

    Every method is a single blocking call that either returns the source's
    native response shape or raises ``UpstreamQueryFailed``.
    """

    @abstractmethod
    def get_all_tokens(self) -> TokensResponse: ...

    @abstractmethod
    def get_token(self, token_id: str) -> TokenResponse: ...

    @abstractmethod
    def get_tokens_by_creator(self, creator: str) -> TokensResponse: ...

    @abstractmethod
    def get_all_balances(self) -> BalancesResponse: ...

    @abstractmethod
    def get_token_balance(self, token_id: str, owner: str) -> BalanceResponse: ...

    @abstractmethod
    def get_balances_by_owner(self, owner: str) -> BalancesResponse: ...

    @abstractmethod
    def get_token_operations(self, token_id: str) -> OperationsResponse: ...

    @abstractmethod
    def get_token_operation(self, operation_id: str) -> OperationResponse: ...

    @abstractmethod
    def get_pending_bitcoin_sync(self) -> OperationsResponse: ...

    @abstractmethod
    def get_tokens_for_sync(self) -> TokenIdsResponse: ...

    @abstractmethod
    def get_utxos(self, address: str | None = None) -> UtxosResponse: ...

    @abstractmethod
    def get_all_contacts(
        self, method: str = ORACLE_CONTACTS_METHOD
    ) -> ContactsResponse:
        """Contact records registered under the given oracle method."""
        ...
