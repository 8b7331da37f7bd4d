"""GET /v1/participants/{participant_id}/summary - what a participant owes and is owed"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from settleup_gateway.api.v1.schemas import ParticipantSummaryResponse, CounterpartySchema
from settleup_gateway.api.dependencies import get_settlement_repository
from settleup_gateway.infrastructure.database.repositories import SettlementRepository
from settleup_gateway.domain.ledger import summarize_participant
from settleup_gateway.utils.money import from_cents

router = APIRouter()


@router.get("/participants/{participant_id}/summary", response_model=ParticipantSummaryResponse)
def get_participant_summary(
    participant_id: str,
    group_id: Optional[str] = Query(None, description="Limit to one group"),
    repo: SettlementRepository = Depends(get_settlement_repository),
):
    """
    Summarize stored settlements for a participant.

    Returns:
        Counterparties they owe, counterparties owing them, totals and net
        (positive net means they are owed money)
    """
    rows = repo.get_participant_balances(participant_id, group_id=group_id)
    summary = summarize_participant(
        participant_id,
        ((row.from_id, row.to_id, row.amount_cents, row.group_id) for row in rows),
    )

    return ParticipantSummaryResponse(
        participant_id=participant_id,
        group_id=group_id,
        owes=[
            CounterpartySchema(counterparty_id=t.counterparty_id, amount=from_cents(t.amount_cents), group_id=t.group_id)
            for t in summary.owes
        ],
        owed=[
            CounterpartySchema(counterparty_id=t.counterparty_id, amount=from_cents(t.amount_cents), group_id=t.group_id)
            for t in summary.owed
        ],
        total_owes=from_cents(summary.total_owes_cents),
        total_owed=from_cents(summary.total_owed_cents),
        net_balance=from_cents(summary.net_cents),
    )
