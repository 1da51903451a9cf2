"""Fixed-point price values and the five-asset price record."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from ..constants import PRICE_CONTEXT_PRECISION, PRICE_DECIMAL_PLACES

# Largest value of an unsigned 128-bit integer scaled by 10**18
MAX_PRICE = Decimal("340282366920938463463.374607431768211455")

_DECIMAL_LITERAL = re.compile(r"^([0-9]+)(?:\.([0-9]+))?$")


def parse_decimal_literal(text: str) -> Decimal:
    """Parse a plain fixed-point literal such as ``"50000"`` or ``"1.00"``.

    Signs, exponents, ``NaN``/``Infinity`` and more than 18 fractional digits
    are rejected with ``ValueError``.
    """
    match = _DECIMAL_LITERAL.match(text)
    if match is None:
        raise ValueError("invalid decimal literal")
    fractional = match.group(2) or ""
    if len(fractional) > PRICE_DECIMAL_PLACES:
        raise ValueError(
            f"cannot parse more than {PRICE_DECIMAL_PLACES} fractional digits"
        )
    value = Decimal(text)
    if value > MAX_PRICE:
        raise ValueError("value exceeds the fixed-point range")
    return value


def check_fixed_point(value: Decimal) -> Decimal:
    """Ensure ``value`` fits the unsigned 18-digit fixed-point type."""
    if not value.is_finite():
        raise ValueError("value must be finite")
    if value < 0:
        raise ValueError("value must be non-negative")
    if value > MAX_PRICE:
        raise ValueError("value exceeds the fixed-point range")
    with localcontext() as ctx:
        ctx.prec = PRICE_CONTEXT_PRECISION
        exponent = value.normalize().as_tuple().exponent
    if isinstance(exponent, int) and exponent < -PRICE_DECIMAL_PLACES:
        raise ValueError(
            f"value has more than {PRICE_DECIMAL_PLACES} fractional digits"
        )
    return value


def format_decimal(value: Decimal) -> str:
    """Render without exponent and without trailing zeros (``"1"``, ``"1.5"``)."""
    if value.is_zero():
        return "0"
    with localcontext() as ctx:
        ctx.prec = PRICE_CONTEXT_PRECISION
        normalized = value.normalize()
    return format(normalized, "f")


def to_price_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValueError("booleans are not prices")
    if isinstance(value, Decimal):
        return check_fixed_point(value)
    if isinstance(value, int):
        return check_fixed_point(Decimal(value))
    if isinstance(value, str):
        return parse_decimal_literal(value.strip())
    if isinstance(value, float):
        try:
            return check_fixed_point(Decimal(repr(value)))
        except InvalidOperation as exc:
            raise ValueError(str(exc)) from exc
    raise ValueError(f"unsupported price type {type(value).__name__}")


class PriceRecord(BaseModel):
    """Latest quotations for BTC, ETH, USDC, USDT and DAI.

    Replaced wholesale on every update; never partially populated.
    """

    btc: Decimal
    eth: Decimal
    usdc: Decimal
    usdt: Decimal
    dai: Decimal

    model_config = ConfigDict(frozen=True)

    @field_validator("btc", "eth", "usdc", "usdt", "dai", mode="before")
    @classmethod
    def validate_fixed_point(cls, v: Any) -> Decimal:
        return to_price_decimal(v)

    @field_serializer("btc", "eth", "usdc", "usdt", "dai")
    def serialize_fixed_point(self, v: Decimal) -> str:
        return format_decimal(v)

    @classmethod
    def zero(cls) -> PriceRecord:
        return cls(
            btc=Decimal(0),
            eth=Decimal(0),
            usdc=Decimal(0),
            usdt=Decimal(0),
            dai=Decimal(0),
        )
