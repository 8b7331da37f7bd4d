"""POST /v1/simplify - stateless debt simplification"""

import time
from typing import List
from fastapi import APIRouter, Depends

from settleup_gateway.api.v1.schemas import (
    SimplifyRequest,
    SimplifyResponse,
    ExplainResponse,
    ParticipantAmountSchema,
    transfers_from_plan,
    anomalies_to_schema,
)
from settleup_gateway.api.dependencies import get_request_id
from settleup_gateway.domain.models import DebtEdge, SettlementResult
from settleup_gateway.domain.simplification import simplify, explain
from settleup_gateway.domain.matching import plan_total_cents
from settleup_gateway.infrastructure.observability.metrics import record_simplification
from settleup_gateway.infrastructure.observability.logging import log_simplification
from settleup_gateway.utils.money import to_cents, from_cents

router = APIRouter()


def _to_edges(request_body: SimplifyRequest) -> List[DebtEdge]:
    return [
        DebtEdge(from_id=e.from_id, to_id=e.to_id, amount_cents=to_cents(e.amount))
        for e in request_body.edges
    ]


def _participant_count(edges: List[DebtEdge]) -> int:
    return len({e.from_id for e in edges} | {e.to_id for e in edges})


@router.post("/simplify", response_model=SimplifyResponse)
def simplify_debts(request_body: SimplifyRequest, request_id: str = Depends(get_request_id)):
    """
    Collapse pairwise debts into the fewest direct transfers greedy matching finds.

    Example:
        A owes B 100, B owes C 50 -> A pays B 50, A pays C 50
    """
    start_time = time.time()
    edges = _to_edges(request_body)

    result = simplify(edges)

    duration_ms = (time.time() - start_time) * 1000
    _observe("adhoc", request_id, edges, result, duration_ms)

    return SimplifyResponse(
        transfers=transfers_from_plan(result.plan),
        total_amount=from_cents(plan_total_cents(result.plan)),
        anomalies=anomalies_to_schema(result.anomalies),
    )


@router.post("/simplify/explain", response_model=ExplainResponse)
def explain_simplification(request_body: SimplifyRequest, request_id: str = Depends(get_request_id)):
    """Return net balances, creditor/debtor split and the plan for debugging"""
    start_time = time.time()
    edges = _to_edges(request_body)

    trace = explain(edges)

    duration_ms = (time.time() - start_time) * 1000
    _observe("explain", request_id, edges, SettlementResult(plan=trace.plan, anomalies=trace.anomalies), duration_ms)

    return ExplainResponse(
        net_balances={pid: from_cents(amount) for pid, amount in trace.net_balances.items()},
        creditors=[
            ParticipantAmountSchema(participant_id=c.participant_id, amount=from_cents(c.amount_cents))
            for c in trace.creditors
        ],
        debtors=[
            ParticipantAmountSchema(participant_id=d.participant_id, amount=from_cents(d.amount_cents))
            for d in trace.debtors
        ],
        transfers=transfers_from_plan(trace.plan),
        anomalies=anomalies_to_schema(trace.anomalies),
    )


def _observe(source: str, request_id: str, edges: List[DebtEdge], result: SettlementResult, duration_ms: float) -> None:
    record_simplification(source, result)
    log_simplification(
        request_id=request_id,
        source=source,
        edge_count=len(edges),
        participant_count=_participant_count(edges),
        transfer_count=sum(len(payees) for payees in result.plan.values()),
        anomaly_count=len(result.anomalies),
        duration_ms=duration_ms,
    )
