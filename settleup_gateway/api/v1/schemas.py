"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, model_validator

from settleup_gateway.domain.models import Anomaly, SettlementPlan
from settleup_gateway.utils.money import from_cents


class DebtEdgeSchema(BaseModel):
    """A single 'from_id owes to_id amount' entry"""

    from_id: str = Field(..., min_length=1, description="Participant who owes")
    to_id: str = Field(..., min_length=1, description="Participant who is owed")
    amount: Decimal = Field(..., gt=0, decimal_places=2, description="Amount owed")

    @model_validator(mode="after")
    def check_not_self_debt(self) -> "DebtEdgeSchema":
        if self.from_id == self.to_id:
            raise ValueError("A participant cannot owe themselves")
        return self


class SimplifyRequest(BaseModel):
    """Request body for POST /v1/simplify"""

    edges: List[DebtEdgeSchema]


class TransferSchema(BaseModel):
    """One direct transfer in a settlement plan"""

    from_id: str
    to_id: str
    amount: Decimal


class AnomalySchema(BaseModel):
    """Conservation diagnostic reported during matching"""

    kind: str
    participant_id: Optional[str] = None
    amount: Decimal
    message: str


class SimplifyResponse(BaseModel):
    """Response for POST /v1/simplify"""

    transfers: List[TransferSchema]
    total_amount: Decimal
    anomalies: List[AnomalySchema] = []


class ParticipantAmountSchema(BaseModel):
    """Creditor or debtor with its outstanding amount"""

    participant_id: str
    amount: Decimal


class ExplainResponse(BaseModel):
    """Response for POST /v1/simplify/explain"""

    net_balances: Dict[str, Decimal]
    creditors: List[ParticipantAmountSchema]
    debtors: List[ParticipantAmountSchema]
    transfers: List[TransferSchema]
    anomalies: List[AnomalySchema] = []


class ShareSchema(BaseModel):
    """A participant's share of one expense"""

    participant_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, decimal_places=2)


class ExpenseSchema(BaseModel):
    """
    Expense paid by one participant.

    Either explicit shares, or an amount split equally among a member list.
    """

    expense_id: str = Field(..., min_length=1)
    payer_id: str = Field(..., min_length=1)
    shares: Optional[List[ShareSchema]] = None
    amount: Optional[Decimal] = Field(None, gt=0, decimal_places=2)
    split_equally_among: Optional[List[str]] = None

    @model_validator(mode="after")
    def check_split(self) -> "ExpenseSchema":
        if self.shares is not None and self.split_equally_among is not None:
            raise ValueError("Provide either shares or split_equally_among, not both")
        if self.shares is None:
            if not self.split_equally_among:
                raise ValueError("Provide shares or a non-empty split_equally_among list")
            if self.amount is None:
                raise ValueError("amount is required for an equal split")
            if len(set(self.split_equally_among)) != len(self.split_equally_among):
                raise ValueError("split_equally_among must not list a participant twice")
        return self


class GroupSettlementRequest(BaseModel):
    """Request body for POST /v1/groups/{group_id}/settlements"""

    expenses: List[ExpenseSchema]


class GroupSettlementResponse(BaseModel):
    """Response for group settlement endpoints"""

    group_id: str
    transfers: List[TransferSchema]
    total_amount: Decimal
    anomalies: List[AnomalySchema] = []


class CounterpartySchema(BaseModel):
    """Amount owed to or by one counterparty"""

    counterparty_id: str
    amount: Decimal
    group_id: Optional[str] = None


class ParticipantSummaryResponse(BaseModel):
    """Response for GET /v1/participants/{participant_id}/summary"""

    participant_id: str
    group_id: Optional[str] = None
    owes: List[CounterpartySchema]
    owed: List[CounterpartySchema]
    total_owes: Decimal
    total_owed: Decimal
    net_balance: Decimal


def transfers_from_plan(plan: SettlementPlan) -> List[TransferSchema]:
    return [
        TransferSchema(from_id=debtor_id, to_id=creditor_id, amount=from_cents(amount))
        for debtor_id, payees in plan.items()
        for creditor_id, amount in payees.items()
    ]


def anomalies_to_schema(anomalies: List[Anomaly]) -> List[AnomalySchema]:
    return [
        AnomalySchema(
            kind=a.kind,
            participant_id=a.participant_id,
            amount=from_cents(a.amount_cents),
            message=a.message,
        )
        for a in anomalies
    ]
