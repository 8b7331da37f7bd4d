"""Expense ledger - turn expenses into debt edges and summarize stored plans"""

from typing import Dict, Iterable, List, Sequence, Tuple
from settleup_gateway.domain.models import DebtEdge, Expense, ParticipantSummary, Transfer
from settleup_gateway.domain.exceptions import InvalidExpenseError


def split_equally(amount_cents: int, participant_ids: Sequence[str]) -> Dict[str, int]:
    """
    Split an expense equally among participants.

    Last participant absorbs the rounding remainder so shares sum exactly.

    Example:
        $100.00 among [A, B, C] -> {A: 3333, B: 3333, C: 3334}
    """
    if not participant_ids:
        raise InvalidExpenseError("Cannot split an expense among zero participants")
    if amount_cents <= 0:
        raise InvalidExpenseError(f"Expense amount must be positive, got {amount_cents} cents")
    if len(set(participant_ids)) != len(participant_ids):
        raise InvalidExpenseError("Each participant can appear only once in an equal split")

    count = len(participant_ids)
    base_amount = amount_cents // count
    remainder = amount_cents % count

    shares: Dict[str, int] = {}
    for i, participant_id in enumerate(participant_ids):
        shares[participant_id] = base_amount + (remainder if i == count - 1 else 0)
    return shares


def build_debt_edges(expenses: Iterable[Expense]) -> List[DebtEdge]:
    """
    Collapse expenses into one debt edge per (ower, payer) pair.

    Every share held by someone other than the payer means that participant
    owes the payer the share. The payer's own share is skipped. Shares for the
    same ordered pair are summed across expenses; pairs keep first-seen order.
    """
    owed: Dict[Tuple[str, str], int] = {}

    for expense in expenses:
        for participant_id, share_cents in expense.shares.items():
            if share_cents < 0:
                raise InvalidExpenseError(
                    f"Expense {expense.expense_id} has a negative share for {participant_id}"
                )
            if participant_id == expense.payer_id or share_cents == 0:
                continue
            key = (participant_id, expense.payer_id)
            owed[key] = owed.get(key, 0) + share_cents

    return [DebtEdge(from_id=ower, to_id=payer, amount_cents=amount) for (ower, payer), amount in owed.items()]


def summarize_participant(
    participant_id: str,
    balances: Iterable[tuple],
) -> ParticipantSummary:
    """
    Summarize settlement rows from one participant's point of view.

    balances: (from_id, to_id, amount_cents[, group_id]) rows; rows that do not
    involve the participant are ignored.

    net_cents > 0 means the participant is owed money overall.
    """
    owes: List[Transfer] = []
    owed: List[Transfer] = []

    for row in balances:
        from_id, to_id, amount_cents = row[0], row[1], row[2]
        group_id = row[3] if len(row) > 3 else None
        if from_id == participant_id:
            owes.append(Transfer(counterparty_id=to_id, amount_cents=amount_cents, group_id=group_id))
        elif to_id == participant_id:
            owed.append(Transfer(counterparty_id=from_id, amount_cents=amount_cents, group_id=group_id))

    total_owes = sum(t.amount_cents for t in owes)
    total_owed = sum(t.amount_cents for t in owed)

    return ParticipantSummary(
        participant_id=participant_id,
        owes=owes,
        owed=owed,
        total_owes_cents=total_owes,
        total_owed_cents=total_owed,
        net_cents=total_owed - total_owes,
    )
