from __future__ import annotations

from ..clients.base import ExternalDataSource
from ..domain import UserPortfolio


def build_user_portfolio(source: ExternalDataSource, owner: str) -> UserPortfolio:
    """List an owner's balances.

    ``total_value`` is always ``"0"``: balances are not converted through the
    price table.
    """
    balances = source.get_balances_by_owner(owner).balances
    return UserPortfolio(
        owner=owner,
        balances=balances,
        total_tokens=len(balances),
        total_value="0",
    )
