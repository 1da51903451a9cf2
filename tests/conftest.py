from __future__ import annotations

import pytest

from tsb_oracle.clients.base import ExternalDataSource
from tsb_oracle.constants import ORACLE_CONTACTS_METHOD
from tsb_oracle.domain import (
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
from tsb_oracle.errors import UpstreamQueryFailed
from tsb_oracle.storage import MemoryStorage

ADMIN = "torram1admin"


def make_token(token_id: str, *, synced: bool = False, amount: str = "1000") -> Token:
    return Token(
        token_id=token_id,
        amount=amount,
        type_code=1,
        metadata="{}",
        creator="torram1creator",
        creation_time="2024-01-01T00:00:00Z",
        bitcoin_tx_id=f"btc-{token_id}",
        synced_with_bitcoin=synced,
    )


def make_balance(token_id: str, owner: str, amount: str) -> Balance:
    return Balance(token_id=token_id, owner=owner, amount=amount)


def make_operation(operation_id: str, token_id: str) -> Operation:
    return Operation.model_validate(
        {
            "operation_id": operation_id,
            "token_id": token_id,
            "type": 2,
            "from": "torram1a",
            "to": "torram1b",
            "amount": "5",
            "timestamp": "2024-01-02T00:00:00Z",
            "bitcoin_tx_id": "",
            "torram_tx_id": f"tx-{operation_id}",
        }
    )


class FakeDataSource(ExternalDataSource):
    """In-memory data source recording every lookup it serves."""

    def __init__(
        self,
        *,
        tokens: list[Token] | None = None,
        balances: list[Balance] | None = None,
        operations: list[Operation] | None = None,
        pending: list[Operation] | None = None,
        tokens_for_sync: list[str] | None = None,
        utxos: dict[str | None, list[Utxo]] | None = None,
        contacts: list[Contact] | None = None,
        fail_on: set[str] | None = None,
    ):
        self.tokens = tokens or []
        self.balances = balances or []
        self.operations = operations or []
        self.pending = pending or []
        self.tokens_for_sync = tokens_for_sync or []
        self.utxos = utxos or {}
        self.contacts = contacts or []
        self.fail_on = fail_on or set()
        self.calls: list[tuple] = []

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise UpstreamQueryFailed(name, "simulated failure")

    def get_all_tokens(self) -> TokensResponse:
        self._record("get_all_tokens")
        return TokensResponse(tokens=self.tokens)

    def get_token(self, token_id: str) -> TokenResponse:
        self._record("get_token", token_id)
        token = next((t for t in self.tokens if t.token_id == token_id), None)
        return TokenResponse(token=token)

    def get_tokens_by_creator(self, creator: str) -> TokensResponse:
        self._record("get_tokens_by_creator", creator)
        return TokensResponse(tokens=[t for t in self.tokens if t.creator == creator])

    def get_all_balances(self) -> BalancesResponse:
        self._record("get_all_balances")
        return BalancesResponse(balances=self.balances)

    def get_token_balance(self, token_id: str, owner: str) -> BalanceResponse:
        self._record("get_token_balance", token_id, owner)
        balance = next(
            (
                b
                for b in self.balances
                if b.token_id == token_id and b.owner == owner
            ),
            None,
        )
        return BalanceResponse(balance=balance)

    def get_balances_by_owner(self, owner: str) -> BalancesResponse:
        self._record("get_balances_by_owner", owner)
        return BalancesResponse(balances=[b for b in self.balances if b.owner == owner])

    def get_token_operations(self, token_id: str) -> OperationsResponse:
        self._record("get_token_operations", token_id)
        return OperationsResponse(
            operations=[op for op in self.operations if op.token_id == token_id]
        )

    def get_token_operation(self, operation_id: str) -> OperationResponse:
        self._record("get_token_operation", operation_id)
        operation = next(
            (op for op in self.operations if op.operation_id == operation_id), None
        )
        return OperationResponse(operation=operation)

    def get_pending_bitcoin_sync(self) -> OperationsResponse:
        self._record("get_pending_bitcoin_sync")
        return OperationsResponse(operations=self.pending)

    def get_tokens_for_sync(self) -> TokenIdsResponse:
        self._record("get_tokens_for_sync")
        return TokenIdsResponse(token_ids=self.tokens_for_sync)

    def get_utxos(self, address: str | None = None) -> UtxosResponse:
        self._record("get_utxos", address)
        return UtxosResponse(utxos=self.utxos.get(address, []))

    def get_all_contacts(
        self, method: str = ORACLE_CONTACTS_METHOD
    ) -> ContactsResponse:
        self._record("get_all_contacts", method)
        return ContactsResponse(contacts=self.contacts)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def initialized_storage(storage):
    from tsb_oracle.prices import initialize

    initialize(storage, ADMIN)
    return storage


@pytest.fixture
def source():
    return FakeDataSource()
