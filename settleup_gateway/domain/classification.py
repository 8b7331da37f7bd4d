"""Split net balances into creditors and debtors"""

from typing import List, Tuple
from settleup_gateway.domain.models import ClassifiedParticipant, NetBalance


def _by_amount_desc(participant: ClassifiedParticipant) -> tuple[int, str]:
    return (-participant.amount_cents, participant.participant_id)


def classify(
    net: NetBalance,
    tolerance_cents: int = 1,
) -> Tuple[List[ClassifiedParticipant], List[ClassifiedParticipant]]:
    """
    Classify participants by the sign of their net balance.

    - net > tolerance:  creditor (is owed money)
    - net < -tolerance: debtor (owes money), stored as a positive amount
    - otherwise settled and left out of both lists

    Both lists are ordered largest amount first, ties by participant id
    ascending, so identical input always yields identical order.

    Returns: (creditors, debtors)
    """
    creditors: List[ClassifiedParticipant] = []
    debtors: List[ClassifiedParticipant] = []

    for participant_id, amount in net.items():
        if amount > tolerance_cents:
            creditors.append(ClassifiedParticipant(participant_id, amount))
        elif amount < -tolerance_cents:
            debtors.append(ClassifiedParticipant(participant_id, -amount))

    creditors.sort(key=_by_amount_desc)
    debtors.sort(key=_by_amount_desc)

    return creditors, debtors
