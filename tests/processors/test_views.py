"""Tests for the user portfolio and sync status views."""

import pytest
from conftest import FakeDataSource, make_balance, make_operation, make_token

from tsb_oracle.errors import UpstreamQueryFailed
from tsb_oracle.processors import build_sync_status, build_user_portfolio


class TestUserPortfolio:
    def test_lists_owner_balances(self):
        source = FakeDataSource(
            balances=[
                make_balance("t1", "alice", "5"),
                make_balance("t2", "alice", "0"),
                make_balance("t1", "bob", "9"),
            ]
        )

        portfolio = build_user_portfolio(source, "alice")

        assert portfolio.owner == "alice"
        assert portfolio.total_tokens == 2
        assert [b.token_id for b in portfolio.balances] == ["t1", "t2"]

    def test_total_value_is_always_zero(self):
        source = FakeDataSource(balances=[make_balance("t1", "alice", "1000000")])

        assert build_user_portfolio(source, "alice").total_value == "0"

    def test_empty_portfolio(self):
        portfolio = build_user_portfolio(FakeDataSource(), "nobody")

        assert portfolio.balances == []
        assert portfolio.total_tokens == 0
        assert portfolio.total_value == "0"

    def test_lookup_failure_propagates(self):
        source = FakeDataSource(fail_on={"get_balances_by_owner"})

        with pytest.raises(UpstreamQueryFailed):
            build_user_portfolio(source, "alice")


class TestSyncStatus:
    def test_counts_synced_tokens(self):
        source = FakeDataSource(
            tokens=[
                make_token("t1", synced=True),
                make_token("t2", synced=False),
                make_token("t3", synced=True),
            ]
        )

        status = build_sync_status(source)

        assert status.synced_tokens == 2
        assert status.total_tokens == 3

    def test_pending_and_for_sync(self):
        source = FakeDataSource(
            tokens=[make_token("t1")],
            pending=[make_operation("op1", "t1"), make_operation("op2", "t9")],
            tokens_for_sync=["t9", "t1", "t5"],
        )

        status = build_sync_status(source)

        assert status.pending_operations == 2
        # Source order is preserved
        assert status.tokens_for_sync == ["t9", "t1", "t5"]

    def test_empty_source(self):
        status = build_sync_status(FakeDataSource())

        assert status.total_tokens == 0
        assert status.synced_tokens == 0
        assert status.pending_operations == 0
        assert status.tokens_for_sync == []

    @pytest.mark.parametrize(
        "failing",
        ["get_all_tokens", "get_pending_bitcoin_sync", "get_tokens_for_sync"],
    )
    def test_any_lookup_failure_fails_the_status(self, failing):
        source = FakeDataSource(fail_on={failing})

        with pytest.raises(UpstreamQueryFailed):
            build_sync_status(source)
