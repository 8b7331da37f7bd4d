"""Debt aggregation - fold pairwise debt edges into net positions"""

from typing import Iterable
from settleup_gateway.domain.models import DebtEdge, NetBalance


def aggregate(edges: Iterable[DebtEdge]) -> NetBalance:
    """
    Reduce debt edges to each participant's signed net balance (cents).

    net = (total owed to them) - (total they owe)

    Repeated edges between the same pair simply accumulate. Integer cents make
    the result independent of edge order. No validation is done here.

    Example:
        A owes B 100, B owes C 50 -> {A: -100, B: +50, C: +50}
    """
    net: NetBalance = {}
    for edge in edges:
        net[edge.from_id] = net.get(edge.from_id, 0) - edge.amount_cents
        net[edge.to_id] = net.get(edge.to_id, 0) + edge.amount_cents
    return net


def total_outstanding(net: NetBalance) -> int:
    """Sum of positive positions, i.e. money that has to change hands"""
    return sum(amount for amount in net.values() if amount > 0)
