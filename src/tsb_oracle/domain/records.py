"""Records read from the token-state data source.

Amounts stay opaque strings: the source encodes them as decimal strings and
nothing here does arithmetic on them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SourceModel(BaseModel):
    """Base for shapes owned by the data source; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Token(SourceModel):
    token_id: str
    amount: str
    type_code: int
    metadata: str
    creator: str
    creation_time: str
    bitcoin_tx_id: str
    synced_with_bitcoin: bool


class Balance(SourceModel):
    token_id: str
    owner: str
    amount: str


class Operation(SourceModel):
    """A transfer, mint or sync event recorded against a token."""

    operation_id: str
    token_id: str
    type: int
    from_: str = Field(alias="from")
    to: str
    amount: str
    timestamp: str
    bitcoin_tx_id: str
    torram_tx_id: str


class Utxo(SourceModel):
    tx_id: str
    vout: int
    amount: str
    used: bool


class Contact(SourceModel):
    address: str
    contact: str


# Response wrappers, one per primitive lookup shape


class TokensResponse(SourceModel):
    tokens: list[Token] = Field(default_factory=list)


class TokenResponse(SourceModel):
    token: Token | None = None


class BalancesResponse(SourceModel):
    balances: list[Balance] = Field(default_factory=list)


class BalanceResponse(SourceModel):
    balance: Balance | None = None


class OperationsResponse(SourceModel):
    operations: list[Operation] = Field(default_factory=list)


class OperationResponse(SourceModel):
    operation: Operation | None = None


class TokenIdsResponse(SourceModel):
    token_ids: list[str] = Field(default_factory=list)


class UtxosResponse(SourceModel):
    utxos: list[Utxo] = Field(default_factory=list)


class ContactsResponse(SourceModel):
    contacts: list[Contact] = Field(default_factory=list)
