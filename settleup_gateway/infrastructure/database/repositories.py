"""Data access layer for stored settlement plans"""

from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from settleup_gateway.infrastructure.database.models import SettlementBalance, SettlementRun
from settleup_gateway.domain.models import SettlementResult
from settleup_gateway.domain.exceptions import GroupNotFoundError


class SettlementRepository:
    """Repository for per-group settlement balances"""

    def __init__(self, db: Session):
        self.db = db

    def replace_group_plan(self, group_id: str, result: SettlementResult) -> List[SettlementBalance]:
        """
        Replace every stored balance of a group with the plan's entries.

        Zero-amount entries are dropped. Caller owns the transaction (commit/rollback).
        """
        self.db.query(SettlementBalance).filter(SettlementBalance.group_id == group_id).delete(
            synchronize_session=False
        )

        rows = [
            SettlementBalance(group_id=group_id, from_id=debtor_id, to_id=creditor_id, amount_cents=amount)
            for debtor_id, payees in result.plan.items()
            for creditor_id, amount in payees.items()
            if amount > 0
        ]
        self.db.add_all(rows)

        run = self.db.get(SettlementRun, group_id)
        if run is None:
            run = SettlementRun(group_id=group_id)
            self.db.add(run)
        run.transfer_count = len(rows)
        run.anomaly_count = len(result.anomalies)

        self.db.flush()
        return rows

    def get_run(self, group_id: str) -> Optional[SettlementRun]:
        """Fetch the recalculation marker for a group"""
        return self.db.get(SettlementRun, group_id)

    def require_run(self, group_id: str) -> SettlementRun:
        """
        Fetch the recalculation marker, failing if the group was never settled.

        Raises:
            GroupNotFoundError: no plan has ever been stored for the group
        """
        run = self.get_run(group_id)
        if run is None:
            raise GroupNotFoundError(f"No settlements stored for group {group_id}")
        return run

    def get_group_balances(self, group_id: str) -> List[SettlementBalance]:
        """Fetch a group's stored transfers, largest first"""
        return (
            self.db.query(SettlementBalance)
            .filter(SettlementBalance.group_id == group_id)
            .order_by(SettlementBalance.amount_cents.desc(), SettlementBalance.id)
            .all()
        )

    def get_participant_balances(self, participant_id: str, group_id: str | None = None) -> List[SettlementBalance]:
        """Fetch stored transfers where the participant pays or receives"""
        query = self.db.query(SettlementBalance).filter(
            or_(SettlementBalance.from_id == participant_id, SettlementBalance.to_id == participant_id)
        )
        if group_id is not None:
            query = query.filter(SettlementBalance.group_id == group_id)
        return query.order_by(SettlementBalance.group_id, SettlementBalance.id).all()
