"""Derived views built per request from several primitive lookups."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .records import Balance, Token


class TokenSummary(BaseModel):
    token: Token | None = None
    total_supply: str
    holder_count: int
    operations_count: int
    pending_sync: bool


class UserPortfolio(BaseModel):
    owner: str
    balances: list[Balance] = Field(default_factory=list)
    total_tokens: int
    # No price conversion yet; always "0"
    total_value: str = "0"


class SyncStatus(BaseModel):
    total_tokens: int
    synced_tokens: int
    pending_operations: int
    tokens_for_sync: list[str] = Field(default_factory=list)
