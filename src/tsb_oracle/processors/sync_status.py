from __future__ import annotations

from ..clients.base import ExternalDataSource
from ..domain import SyncStatus


def build_sync_status(source: ExternalDataSource) -> SyncStatus:
    """Report Bitcoin sync progress across all tokens.

    ``tokens_for_sync`` keeps the order the source returned.
    """
    tokens = source.get_all_tokens().tokens
    pending = source.get_pending_bitcoin_sync().operations
    for_sync = source.get_tokens_for_sync().token_ids

    return SyncStatus(
        total_tokens=len(tokens),
        synced_tokens=sum(1 for t in tokens if t.synced_with_bitcoin),
        pending_operations=len(pending),
        tokens_for_sync=list(for_sync),
    )
