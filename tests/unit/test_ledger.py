"""Unit tests for the expense ledger and participant summaries"""

import pytest
from settleup_gateway.domain.ledger import build_debt_edges, split_equally, summarize_participant
from settleup_gateway.domain.models import DebtEdge, Expense, Transfer
from settleup_gateway.domain.exceptions import InvalidExpenseError


def test_split_equally_even():
    assert split_equally(9000, ["A", "B", "C"]) == {"A": 3000, "B": 3000, "C": 3000}


def test_split_equally_last_absorbs_remainder():
    """$100.00 / 3 -> 33.33, 33.33, 33.34"""
    shares = split_equally(10000, ["A", "B", "C"])

    assert shares == {"A": 3333, "B": 3333, "C": 3334}
    assert sum(shares.values()) == 10000


def test_split_equally_single_member():
    assert split_equally(1999, ["A"]) == {"A": 1999}


def test_split_equally_rejects_empty_members():
    with pytest.raises(InvalidExpenseError):
        split_equally(1000, [])


def test_split_equally_rejects_non_positive_amount():
    with pytest.raises(InvalidExpenseError):
        split_equally(0, ["A", "B"])


def test_split_equally_rejects_duplicate_members():
    """A repeated member would overwrite its own share and lose money"""
    with pytest.raises(InvalidExpenseError):
        split_equally(1000, ["A", "A", "B"])


def test_build_debt_edges_skips_payer_share():
    expenses = [Expense(expense_id="dinner", payer_id="A", shares={"A": 3000, "B": 3000, "C": 3000})]

    assert build_debt_edges(expenses) == [DebtEdge("B", "A", 3000), DebtEdge("C", "A", 3000)]


def test_build_debt_edges_sums_pairs_across_expenses():
    expenses = [
        Expense(expense_id="e1", payer_id="A", shares={"B": 1000}),
        Expense(expense_id="e2", payer_id="B", shares={"A": 400}),
        Expense(expense_id="e3", payer_id="A", shares={"B": 250, "C": 0}),
    ]

    assert build_debt_edges(expenses) == [DebtEdge("B", "A", 1250), DebtEdge("A", "B", 400)]


def test_build_debt_edges_rejects_negative_share():
    with pytest.raises(InvalidExpenseError):
        build_debt_edges([Expense(expense_id="bad", payer_id="A", shares={"B": -5})])


def test_build_debt_edges_no_expenses():
    assert build_debt_edges([]) == []


def test_summarize_participant():
    rows = [
        ("A", "B", 5000, "g1"),
        ("C", "A", 1200, "g1"),
        ("A", "D", 300, "g2"),
        ("C", "D", 999, "g2"),
    ]

    summary = summarize_participant("A", rows)

    assert summary.owes == [Transfer("B", 5000, "g1"), Transfer("D", 300, "g2")]
    assert summary.owed == [Transfer("C", 1200, "g1")]
    assert summary.total_owes_cents == 5300
    assert summary.total_owed_cents == 1200
    assert summary.net_cents == -4100


def test_summarize_participant_without_group_column():
    summary = summarize_participant("B", [("A", "B", 700)])

    assert summary.owed == [Transfer("A", 700)]
    assert summary.net_cents == 700


def test_summarize_participant_with_no_rows():
    summary = summarize_participant("Z", [])

    assert summary.owes == [] and summary.owed == []
    assert summary.net_cents == 0
