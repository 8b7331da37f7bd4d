"""Balance simplification - net settlement entry point"""

from typing import Iterable, List
from settleup_gateway.config import settings
from settleup_gateway.domain.models import DebtEdge, SettlementPlan, SettlementResult, SimplificationTrace
from settleup_gateway.domain.aggregation import aggregate
from settleup_gateway.domain.classification import classify
from settleup_gateway.domain.matching import match


def simplify(edges: Iterable[DebtEdge], tolerance_cents: int | None = None) -> SettlementResult:
    """
    Collapse a web of pairwise debts into direct transfers.

    Steps:
    1. Net balance per participant (aggregate)
    2. Split into creditors / debtors, dropping settled participants (classify)
    3. Greedy largest-first matching (match)

    Example:
        A owes B 100, B owes C 50 -> A owes B 50, A owes C 50
    """
    tolerance = settings.settlement_tolerance_cents if tolerance_cents is None else tolerance_cents
    creditors, debtors = classify(aggregate(edges), tolerance)
    return match(debtors, creditors)


def explain(edges: Iterable[DebtEdge], tolerance_cents: int | None = None) -> SimplificationTrace:
    """Run simplification and return every intermediate step for inspection"""
    tolerance = settings.settlement_tolerance_cents if tolerance_cents is None else tolerance_cents
    net_balances = aggregate(edges)
    creditors, debtors = classify(net_balances, tolerance)
    result = match(debtors, creditors)

    return SimplificationTrace(
        net_balances=net_balances,
        creditors=creditors,
        debtors=debtors,
        plan=result.plan,
        anomalies=result.anomalies,
    )


def plan_to_edges(plan: SettlementPlan) -> List[DebtEdge]:
    """Flatten a plan back into debt edges, in plan order"""
    return [
        DebtEdge(from_id=debtor_id, to_id=creditor_id, amount_cents=amount)
        for debtor_id, payees in plan.items()
        for creditor_id, amount in payees.items()
    ]
