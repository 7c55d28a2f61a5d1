import itertools
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.dependencies import get_db
from app.main import app
from app.models import Base
from app.schemas import user_schemas
from app.services import user_service, tournament_service

_user_counter = itertools.count(1)

@pytest.fixture
def engine():
    # A single in-memory SQLite connection shared by every session in the test
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()

@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def make_user(db):
    def _make_user(first_name: str = "Test", last_name: str = "Player"):
        n = next(_user_counter)
        return user_service.create_user(db, user_schemas.UserCreate(
            first_name=first_name,
            last_name=last_name,
            email=f"player{n}@example.com",
        ))
    return _make_user

@pytest.fixture
def make_tournament(db):
    def _make_tournament(name: str = "Cup"):
        return tournament_service.create_tournament(db, name, datetime(2026, 6, 1, 10, 0))
    return _make_tournament

@pytest.fixture
def enrolled_tournament(db, make_user, make_tournament):
    """Tournament with ``count`` freshly created users enrolled in creation order."""
    def _enrolled_tournament(count: int, name: str = "Cup"):
        tournament = make_tournament(name)
        users = [make_user() for _ in range(count)]
        for user in users:
            tournament_service.add_participant(db, tournament.id, user.id)
        return tournament, users
    return _enrolled_tournament

@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides = {}
