"""Oracle and storage constants."""

from decimal import Decimal

# Order matters: fetch_from_oracle reports the first failing field
PRICE_FIELDS: tuple[str, ...] = ("BTC", "ETH", "USDC", "USDT", "DAI")
STABLECOIN_FIELDS: tuple[str, ...] = ("USDC", "USDT", "DAI")

# Fixed-point price type: unsigned, 18 fractional digits
PRICE_DECIMAL_PLACES = 18
PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
# Working precision for intermediate sums/divisions (uint128 atomics fit in 39 digits)
PRICE_CONTEXT_PRECISION = 80

# Custom query method the chain answers with the oracle contact list
ORACLE_CONTACTS_METHOD = "get_all_contacts"

# Persisted state slots
ADMIN_KEY = "admin"
PRICES_KEY = "prices"

ORACLE_PRICES_EVENT = "oracle_prices"

DEFAULT_STATE_PATH = "tsb-oracle-state.json"
DEFAULT_REQUEST_TIMEOUT = 15.0
