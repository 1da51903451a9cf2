"""Acknowledgements returned by state-changing operations."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer

from .prices import PriceRecord, format_decimal


class Event(BaseModel):
    """Structured record emitted for downstream consumers such as event logs."""

    type: str
    attributes: dict[str, str] = Field(default_factory=dict)


class Response(BaseModel):
    attributes: dict[str, str] = Field(default_factory=dict)
    events: list[Event] = Field(default_factory=list)


class PriceUpdateResponse(Response):
    """Ack for an accepted price update, carrying the stored record."""

    record: PriceRecord
    average: Decimal

    @field_serializer("average")
    def serialize_average(self, v: Decimal) -> str:
        return format_decimal(v)
