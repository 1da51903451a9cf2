"""Extraction of price fields from an oracle contact string.

The contact text is a comma separated list of ``KEY: value`` pairs, e.g.::

    "BTC: 50000, ETH: 3000, USDC: 1.00, USDT: 1.00, DAI: 1.00"

Field order is not fixed and whitespace around segments is ignored.
"""

from __future__ import annotations

from decimal import Decimal

from ..constants import PRICE_FIELDS
from ..domain import PriceRecord, parse_decimal_literal
from ..errors import FieldMalformed, FieldNotFound, FieldUnparseable


def extract_price(text: str, key: str) -> Decimal:
    """Parse the value of ``key`` out of ``text``.

    The first segment whose left-trimmed text starts with ``"<key>:"`` wins.
    Everything after its first colon, trimmed, must be a fixed-point literal.

    Raises:
        FieldNotFound: No segment starts with ``"<key>:"``
        FieldMalformed: The matching segment has an empty value
        FieldUnparseable: The value is not a valid decimal literal
    """
    prefix = f"{key}:"
    segment = next(
        (entry for entry in text.split(",") if entry.lstrip().startswith(prefix)),
        None,
    )
    if segment is None:
        raise FieldNotFound(key)

    _, _, raw_value = segment.partition(":")
    value = raw_value.strip()
    if not value:
        raise FieldMalformed(key)

    try:
        return parse_decimal_literal(value)
    except ValueError as exc:
        raise FieldUnparseable(key, value, str(exc)) from exc


def parse_price_record(text: str) -> PriceRecord:
    """Parse all five price fields; the first failing field aborts."""
    values = {key.lower(): extract_price(text, key) for key in PRICE_FIELDS}
    return PriceRecord(**values)
