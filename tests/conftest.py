"""
Test configuration and fixtures for ensgraph tests.
"""
import pytest
from unittest.mock import AsyncMock, Mock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ensgraph.main import app
from ensgraph.db.models import Base
from ensgraph.db.database import get_db
from ensgraph.dependencies import get_ens_client
from ensgraph.domain.events import event_publisher
from ensgraph.infrastructure.ens_client import EnsResolutionClient


@pytest.fixture(autouse=True)
def clean_event_publisher():
    """Start every test without subscribers."""
    event_publisher.clear_subscribers()
    yield
    event_publisher.clear_subscribers()


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Create a database session for repository tests."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def mock_ens():
    """AsyncENS stand-in: every name resolves to nothing until told otherwise."""
    ens = Mock()
    ens.address = AsyncMock(return_value=None)
    ens.get_text = AsyncMock(return_value="")
    return ens


@pytest.fixture
def ens_client(mock_ens):
    """Resolution client over the mocked provider, normalizing by lowercasing."""
    return EnsResolutionClient(mock_ens, normalizer=lambda name: name.lower())


@pytest.fixture
def client(session_factory, ens_client):
    """Create test client wired to the in-memory store and mocked provider."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_ens_client] = lambda: ens_client
    yield TestClient(app)
    app.dependency_overrides.clear()
