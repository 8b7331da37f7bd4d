"""Unit tests for debt aggregation"""

import pytest
from settleup_gateway.domain.aggregation import aggregate, total_outstanding
from settleup_gateway.domain.models import DebtEdge
from settleup_gateway.domain.exceptions import InvalidDebtEdgeError


def edge(from_id: str, to_id: str, amount_cents: int) -> DebtEdge:
    return DebtEdge(from_id, to_id, amount_cents)


def test_aggregate_chain():
    """A owes B 100, B owes C 50"""
    net = aggregate([edge("A", "B", 10000), edge("B", "C", 5000)])

    assert net == {"A": -10000, "B": 5000, "C": 5000}


def test_aggregate_sums_repeated_pairs():
    net = aggregate([edge("A", "B", 1000), edge("A", "B", 250), edge("A", "B", 1)])

    assert net == {"A": -1251, "B": 1251}


def test_aggregate_empty():
    assert aggregate([]) == {}


def test_aggregate_conserves_money(weekend_trip_edges):
    net = aggregate(weekend_trip_edges)

    assert sum(net.values()) == 0


def test_aggregate_order_independent(weekend_trip_edges):
    forward = aggregate(weekend_trip_edges)
    backward = aggregate(list(reversed(weekend_trip_edges)))

    assert forward == backward


def test_aggregate_cycle_nets_to_zero():
    net = aggregate([edge("A", "B", 10000), edge("B", "C", 10000), edge("C", "A", 10000)])

    assert net == {"A": 0, "B": 0, "C": 0}
    assert total_outstanding(net) == 0


def test_total_outstanding_counts_positive_side_only():
    assert total_outstanding({"A": -10000, "B": 6000, "C": 4000}) == 10000


@pytest.mark.parametrize(
    "from_id, to_id, amount_cents",
    [
        ("A", "A", 500),   # self-debt
        ("A", "B", 0),
        ("A", "B", -100),
        ("", "B", 100),
    ],
)
def test_debt_edge_rejects_malformed_values(from_id, to_id, amount_cents):
    with pytest.raises(InvalidDebtEdgeError):
        edge(from_id, to_id, amount_cents)
