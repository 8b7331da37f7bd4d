"""Domain models - pure Python dataclasses representing settlement entities"""

from dataclasses import dataclass, field
from typing import Dict, List
from settleup_gateway.domain.exceptions import InvalidDebtEdgeError

# Signed net position per participant, in cents
NetBalance = Dict[str, int]

# debtor_id -> creditor_id -> cents
SettlementPlan = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class DebtEdge:
    """Directed debt: from_id owes to_id amount_cents"""

    from_id: str
    to_id: str
    amount_cents: int

    def __post_init__(self) -> None:
        if not self.from_id or not self.to_id:
            raise InvalidDebtEdgeError("Debt edge needs both participant ids")
        if self.from_id == self.to_id:
            raise InvalidDebtEdgeError(f"{self.from_id} cannot owe themselves")
        if self.amount_cents <= 0:
            raise InvalidDebtEdgeError(f"Debt from {self.from_id} to {self.to_id} must be positive, got {self.amount_cents} cents")


@dataclass(frozen=True)
class ClassifiedParticipant:
    """Participant with a non-settled position; amount is always positive"""

    participant_id: str
    amount_cents: int


@dataclass(frozen=True)
class Anomaly:
    """Recoverable conservation diagnostic raised during matching"""

    kind: str  # "unbalanced_totals" | "residual_debt" | "residual_credit"
    participant_id: str | None
    amount_cents: int
    message: str


@dataclass
class SettlementResult:
    """Output of matching: the transfer plan plus any diagnostics"""

    plan: SettlementPlan = field(default_factory=dict)
    anomalies: List[Anomaly] = field(default_factory=list)

    @property
    def is_balanced(self) -> bool:
        return not self.anomalies


@dataclass
class SimplificationTrace:
    """Every intermediate structure of one simplification run"""

    net_balances: NetBalance
    creditors: List[ClassifiedParticipant]
    debtors: List[ClassifiedParticipant]
    plan: SettlementPlan
    anomalies: List[Anomaly]


@dataclass
class Expense:
    """Expense record from the ledger: who paid and each member's share"""

    expense_id: str
    payer_id: str
    shares: Dict[str, int]  # participant_id -> share in cents


@dataclass(frozen=True)
class Transfer:
    """One side of a stored settlement, seen from a single participant"""

    counterparty_id: str
    amount_cents: int
    group_id: str | None = None


@dataclass
class ParticipantSummary:
    """What a participant owes and is owed across stored settlements"""

    participant_id: str
    owes: List[Transfer]
    owed: List[Transfer]
    total_owes_cents: int
    total_owed_cents: int
    net_cents: int
