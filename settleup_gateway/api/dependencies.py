"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from settleup_gateway.infrastructure.database.session import get_db
from settleup_gateway.infrastructure.database.repositories import SettlementRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settlement_repository(db: Session = Depends(get_db)) -> SettlementRepository:
    """Provide settlement repository bound to the request session"""
    return SettlementRepository(db)
