from __future__ import annotations

from ..clients.base import ExternalDataSource
from ..domain import Balance, TokenSummary
from ..logger import get_logger

logger = get_logger(__name__)


def count_holders(balances: list[Balance], token_id: str) -> int:
    """Count balances of ``token_id`` whose amount is not the literal ``"0"``."""
    return sum(1 for b in balances if b.token_id == token_id and b.amount != "0")


def build_token_summary(source: ExternalDataSource, token_id: str) -> TokenSummary:
    """Summarize a token from four lookups.

    Queries the token, its operations, all balances and the pending Bitcoin
    sync operations. A token the source does not know yields ``token=None``
    and an empty ``total_supply``; the counts are still computed. Any failed
    lookup propagates.

    The lookups are independent calls, so the summary is only approximately
    consistent if the source changes between them.
    """
    token = source.get_token(token_id).token
    operations = source.get_token_operations(token_id).operations
    balances = source.get_all_balances().balances
    pending = source.get_pending_bitcoin_sync().operations

    if token is None:
        logger.debug("Token %s not found; building partial summary", token_id)

    return TokenSummary(
        token=token,
        total_supply=token.amount if token is not None else "",
        holder_count=count_holders(balances, token_id),
        operations_count=len(operations),
        pending_sync=any(op.token_id == token_id for op in pending),
    )
