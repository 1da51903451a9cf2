from __future__ import annotations

from .oracle_fetch import fetch_from_oracle
from .oracle_parser import extract_price, parse_price_record
from .sync_status import build_sync_status
from .token_summary import build_token_summary, count_holders
from .user_portfolio import build_user_portfolio

__all__ = [
    "fetch_from_oracle",
    "extract_price",
    "parse_price_record",
    "build_sync_status",
    "build_token_summary",
    "count_holders",
    "build_user_portfolio",
]
