"""Pytest fixtures for testing"""

import pytest
from typing import Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from settleup_gateway.api.main import create_app
from settleup_gateway.infrastructure.database.models import Base
from settleup_gateway.infrastructure.database.session import get_db
from settleup_gateway.domain.models import DebtEdge


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def weekend_trip_edges() -> List[DebtEdge]:
    """Four friends after a weekend trip: hotel, fuel, groceries and a dinner"""
    return [
        DebtEdge("bob", "alice", 15000),    # hotel paid by alice
        DebtEdge("carol", "alice", 15000),
        DebtEdge("dave", "alice", 15000),
        DebtEdge("alice", "bob", 2500),     # fuel paid by bob
        DebtEdge("carol", "bob", 2500),
        DebtEdge("dave", "bob", 2500),
        DebtEdge("alice", "carol", 4025),   # groceries paid by carol
        DebtEdge("bob", "carol", 4025),
        DebtEdge("dave", "carol", 4025),
        DebtEdge("alice", "dave", 3333),    # dinner paid by dave
        DebtEdge("bob", "dave", 3333),
        DebtEdge("carol", "dave", 3334),
    ]
