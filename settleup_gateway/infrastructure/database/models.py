"""SQLAlchemy ORM models for the settlement balance store"""

from sqlalchemy import Column, Integer, BigInteger, Text, DateTime, UniqueConstraint, Index
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class SettlementBalance(Base):
    """One simplified transfer: from_id owes to_id within a group"""

    __tablename__ = "settlement_balance"
    __table_args__ = (
        UniqueConstraint("group_id", "from_id", "to_id", name="uq_settlement_balance_pair"),
        Index("ix_settlement_balance_from_id", "from_id"),
        Index("ix_settlement_balance_to_id", "to_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_id = Column(Text, nullable=False, index=True)
    from_id = Column(Text, nullable=False)
    to_id = Column(Text, nullable=False)
    amount_cents = Column(BigInteger, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class SettlementRun(Base):
    """Marker that a group's plan has been recalculated at least once"""

    __tablename__ = "settlement_run"

    group_id = Column(Text, primary_key=True)
    transfer_count = Column(Integer, nullable=False, default=0)
    anomaly_count = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
