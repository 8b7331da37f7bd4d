"""Group settlement endpoints - recalculate and fetch stored plans"""

import time
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from settleup_gateway.api.v1.schemas import (
    GroupSettlementRequest,
    GroupSettlementResponse,
    ExpenseSchema,
    TransferSchema,
    transfers_from_plan,
    anomalies_to_schema,
)
from settleup_gateway.api.dependencies import get_request_id
from settleup_gateway.infrastructure.database.session import get_db
from settleup_gateway.infrastructure.database.repositories import SettlementRepository
from settleup_gateway.domain.models import Expense
from settleup_gateway.domain.ledger import build_debt_edges, split_equally
from settleup_gateway.domain.simplification import simplify
from settleup_gateway.domain.matching import plan_total_cents
from settleup_gateway.domain.exceptions import DomainException, GroupNotFoundError
from settleup_gateway.infrastructure.observability.metrics import record_simplification
from settleup_gateway.infrastructure.observability.logging import log_simplification
from settleup_gateway.utils.money import to_cents, from_cents

router = APIRouter()


def _to_expense(schema: ExpenseSchema) -> Expense:
    if schema.shares is not None:
        shares = {}
        for share in schema.shares:
            shares[share.participant_id] = shares.get(share.participant_id, 0) + to_cents(share.amount)
    else:
        shares = split_equally(to_cents(schema.amount), schema.split_equally_among)
    return Expense(expense_id=schema.expense_id, payer_id=schema.payer_id, shares=shares)


@router.post("/groups/{group_id}/settlements", response_model=GroupSettlementResponse)
def recalculate_group_settlements(
    group_id: str,
    request_body: GroupSettlementRequest,
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    """
    Recalculate a group's settlement plan from its expenses.

    Flow:
    1. Convert expenses to per-pair debt edges
    2. Simplify into direct transfers
    3. Replace the group's stored balances with the new plan
    """
    start_time = time.time()

    try:
        expenses = [_to_expense(e) for e in request_body.expenses]
        edges = build_debt_edges(expenses)
        result = simplify(edges)

        SettlementRepository(db).replace_group_plan(group_id, result)
        db.commit()

    except DomainException as e:
        db.rollback()
        logging.warning(f"Invalid expense data: {e}", extra={"request_id": request_id, "group_id": group_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id, "group_id": group_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_simplification("group", result)
    log_simplification(
        request_id=request_id,
        source="group",
        group_id=group_id,
        edge_count=len(edges),
        participant_count=len({e.from_id for e in edges} | {e.to_id for e in edges}),
        transfer_count=sum(len(payees) for payees in result.plan.values()),
        anomaly_count=len(result.anomalies),
        duration_ms=duration_ms,
    )

    return GroupSettlementResponse(
        group_id=group_id,
        transfers=transfers_from_plan(result.plan),
        total_amount=from_cents(plan_total_cents(result.plan)),
        anomalies=anomalies_to_schema(result.anomalies),
    )


@router.get("/groups/{group_id}/settlements", response_model=GroupSettlementResponse)
def get_group_settlements(group_id: str, db: Session = Depends(get_db)):
    """
    Retrieve the stored settlement plan for a group.

    Returns:
        Transfers largest first; 404 if the group was never recalculated
    """
    repo = SettlementRepository(db)
    try:
        repo.require_run(group_id)
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    rows = repo.get_group_balances(group_id)
    transfers: List[TransferSchema] = [
        TransferSchema(from_id=row.from_id, to_id=row.to_id, amount=from_cents(row.amount_cents))
        for row in rows
    ]

    return GroupSettlementResponse(
        group_id=group_id,
        transfers=transfers,
        total_amount=from_cents(sum(row.amount_cents for row in rows)),
    )
