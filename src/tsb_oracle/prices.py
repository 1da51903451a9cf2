"""Price store and the admin-gated update authority.

State lives in two slots of the injected ``Storage``: the admin identity and
the current price record. Requests run one at a time, so the update path
takes no lock.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from .constants import (
    ADMIN_KEY,
    ORACLE_PRICES_EVENT,
    PRICE_CONTEXT_PRECISION,
    PRICE_QUANTUM,
    PRICES_KEY,
)
from .domain import PriceRecord, format_decimal
from .domain.responses import Event, PriceUpdateResponse, Response
from .errors import InvalidAddress, Unauthorized
from .logger import get_logger
from .storage import Storage

logger = get_logger(__name__)


def initialize(storage: Storage, admin: str) -> Response:
    """Store the admin identity and an all-zero price record.

    Must run once before any other operation; a second call overwrites both
    slots. The identity is stored exactly as given; blank or
    whitespace-padded values are rejected rather than trimmed.
    """
    if not admin or admin != admin.strip():
        raise InvalidAddress(
            f"Admin address must be non-empty without surrounding whitespace: {admin!r}"
        )

    storage.save_many(
        {
            ADMIN_KEY: admin,
            PRICES_KEY: PriceRecord.zero().model_dump(mode="json"),
        }
    )
    logger.info("Initialized price store with admin %s", admin)

    return Response(attributes={"method": "instantiate", "admin": admin})


def load_admin(storage: Storage) -> str:
    return str(storage.load(ADMIN_KEY))


def get_prices(storage: Storage) -> PriceRecord:
    """Return the stored price record.

    Raises:
        NotInitialized: If initialize() has not run
    """
    return PriceRecord.model_validate(storage.load(PRICES_KEY))


def average_price(prices: PriceRecord) -> Decimal:
    """Mean of the three stablecoin quotes.

    Computed at high working precision and quantized to 18 fractional digits
    with round-half-to-even.
    """
    with localcontext() as ctx:
        ctx.prec = PRICE_CONTEXT_PRECISION
        total = prices.usdc + prices.usdt + prices.dai
        return (total / Decimal(3)).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_EVEN)


def update_prices(
    storage: Storage, sender: str, record: PriceRecord
) -> PriceUpdateResponse:
    """Replace the stored record if ``sender`` is the admin.

    Args:
        storage: Persisted state
        sender: Identity of the caller
        record: Complete replacement record; only type-checked

    Returns:
        Ack with the stored record, the stablecoin average and an
        ``oracle_prices`` event

    Raises:
        Unauthorized: If sender is not the stored admin; nothing is written
        NotInitialized: If initialize() has not run
    """
    admin = load_admin(storage)
    if sender != admin:
        logger.warning("Rejected price update from non-admin %s", sender)
        raise Unauthorized(sender)

    storage.save(PRICES_KEY, record.model_dump(mode="json"))

    avg = average_price(record)
    event = Event(
        type=ORACLE_PRICES_EVENT,
        attributes={
            "usdc": format_decimal(record.usdc),
            "usdt": format_decimal(record.usdt),
            "dai": format_decimal(record.dai),
            "average": format_decimal(avg),
        },
    )
    logger.info(
        "Prices updated by %s: usdc=%s usdt=%s dai=%s average=%s",
        sender,
        event.attributes["usdc"],
        event.attributes["usdt"],
        event.attributes["dai"],
        event.attributes["average"],
    )

    return PriceUpdateResponse(
        attributes={"action": "update_prices", "sender": sender},
        events=[event],
        record=record,
        average=avg,
    )
