import pytest
from conftest import FakeDataSource, make_balance, make_operation, make_token

from tsb_oracle.errors import UpstreamQueryFailed
from tsb_oracle.processors.token_summary import build_token_summary, count_holders


def test_holder_count_skips_zero_balances():
    """A literal "0" amount does not count as a holder."""
    source = FakeDataSource(
        tokens=[make_token("t1")],
        balances=[
            make_balance("t1", "a", "5"),
            make_balance("t1", "b", "0"),
        ],
    )

    summary = build_token_summary(source, "t1")

    assert summary.holder_count == 1


def test_holder_count_ignores_other_tokens():
    balances = [
        make_balance("t1", "a", "5"),
        make_balance("t2", "a", "7"),
        make_balance("t1", "c", "0.0"),
    ]

    # Only the literal string "0" is excluded
    assert count_holders(balances, "t1") == 2


def test_full_summary():
    source = FakeDataSource(
        tokens=[make_token("t1", amount="21000000"), make_token("t2")],
        balances=[make_balance("t1", "a", "10"), make_balance("t1", "b", "20")],
        operations=[
            make_operation("op1", "t1"),
            make_operation("op2", "t1"),
            make_operation("op3", "t2"),
        ],
        pending=[make_operation("op2", "t1")],
    )

    summary = build_token_summary(source, "t1")

    assert summary.token is not None
    assert summary.token.token_id == "t1"
    assert summary.total_supply == "21000000"
    assert summary.holder_count == 2
    assert summary.operations_count == 2
    assert summary.pending_sync is True


def test_not_pending_when_other_tokens_pending():
    source = FakeDataSource(
        tokens=[make_token("t1")],
        pending=[make_operation("op9", "t2")],
    )

    assert build_token_summary(source, "t1").pending_sync is False


def test_missing_token_still_builds_summary():
    """An unknown token degrades to token=None instead of failing."""
    source = FakeDataSource(
        balances=[make_balance("ghost", "a", "3")],
        operations=[make_operation("op1", "ghost")],
        pending=[make_operation("op1", "ghost")],
    )

    summary = build_token_summary(source, "ghost")

    assert summary.token is None
    assert summary.total_supply == ""
    assert summary.holder_count == 1
    assert summary.operations_count == 1
    assert summary.pending_sync is True


def test_issues_the_four_lookups_in_order():
    source = FakeDataSource(tokens=[make_token("t1")])

    build_token_summary(source, "t1")

    assert [call[0] for call in source.calls] == [
        "get_token",
        "get_token_operations",
        "get_all_balances",
        "get_pending_bitcoin_sync",
    ]


@pytest.mark.parametrize(
    "failing",
    [
        "get_token",
        "get_token_operations",
        "get_all_balances",
        "get_pending_bitcoin_sync",
    ],
)
def test_any_lookup_failure_fails_the_summary(failing):
    source = FakeDataSource(tokens=[make_token("t1")], fail_on={failing})

    with pytest.raises(UpstreamQueryFailed) as exc:
        build_token_summary(source, "t1")

    assert exc.value.method == failing
