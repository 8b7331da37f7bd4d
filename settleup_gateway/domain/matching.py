"""Greedy settlement matcher - pair debtors with creditors largest-first"""

import heapq
import logging
from typing import List
from settleup_gateway.domain.models import (
    Anomaly,
    ClassifiedParticipant,
    SettlementPlan,
    SettlementResult,
)

logger = logging.getLogger(__name__)


def match(
    debtors: List[ClassifiedParticipant],
    creditors: List[ClassifiedParticipant],
) -> SettlementResult:
    """
    Build a transfer plan that settles every classified position.

    Algorithm (greedy, O(n log n) per payment with a heap):
    - Debtors are processed in the order given (classifier order: largest first)
    - Each debtor repeatedly pays the creditor with the largest remaining
      amount (ties: lowest id) until its debt is fully paid
    - payment = min(remaining debt, creditor remaining)
    - Creditors leave the pool once fully paid

    Amounts are exact cents; noise tolerance is applied by the classifier, so
    matching runs down to zero and every leftover cent is reported.

    Example:
        Debtors: A (100)  Creditors: B (50), C (50)
        A pays B 50, then A pays C 50 -> {A: {B: 50, C: 50}}

    Conservation problems never raise. They are reported as anomalies on the
    result and the partial plan is still returned:
    - unbalanced_totals: debtor and creditor sums differ before matching
    - residual_debt: a debtor still owes money after all creditors are paid
    - residual_credit: a creditor is still owed money after all debtors paid

    Not guaranteed to use the minimum possible number of transfers.
    """
    result = SettlementResult()

    total_debt = sum(d.amount_cents for d in debtors)
    total_credit = sum(c.amount_cents for c in creditors)
    if total_debt != total_credit:
        _report(
            result,
            Anomaly(
                kind="unbalanced_totals",
                participant_id=None,
                amount_cents=total_debt - total_credit,
                message=f"Debtors owe {total_debt} cents but creditors are owed {total_credit} cents",
            ),
        )

    # Max-heap on remaining amount, then min on id
    pool = [(-c.amount_cents, c.participant_id) for c in creditors if c.amount_cents > 0]
    heapq.heapify(pool)

    for debtor in debtors:
        remaining_debt = debtor.amount_cents

        while remaining_debt > 0 and pool:
            neg_remaining, creditor_id = heapq.heappop(pool)
            creditor_remaining = -neg_remaining

            payment = min(remaining_debt, creditor_remaining)
            result.plan.setdefault(debtor.participant_id, {})[creditor_id] = payment

            remaining_debt -= payment
            creditor_remaining -= payment

            if creditor_remaining > 0:
                heapq.heappush(pool, (-creditor_remaining, creditor_id))

        if remaining_debt > 0:
            _report(
                result,
                Anomaly(
                    kind="residual_debt",
                    participant_id=debtor.participant_id,
                    amount_cents=remaining_debt,
                    message=f"Debtor {debtor.participant_id} has {remaining_debt} cents left with no creditor",
                ),
            )

    for neg_remaining, creditor_id in sorted(pool):
        _report(
            result,
            Anomaly(
                kind="residual_credit",
                participant_id=creditor_id,
                amount_cents=-neg_remaining,
                message=f"Creditor {creditor_id} is still owed {-neg_remaining} cents",
            ),
        )

    return result


def _report(result: SettlementResult, anomaly: Anomaly) -> None:
    result.anomalies.append(anomaly)
    logger.warning(
        anomaly.message,
        extra={
            "step": "settlement_match",
            "anomaly_kind": anomaly.kind,
            "participant_id": anomaly.participant_id,
            "amount_cents": anomaly.amount_cents,
        },
    )


def plan_total_cents(plan: SettlementPlan) -> int:
    """Total money moved by a plan"""
    return sum(amount for payees in plan.values() for amount in payees.values())
