# backend/tests/unit/conftest.py
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bakery_catalog.main import app
from bakery_catalog.db import Base, get_db
from bakery_catalog import models
from bakery_catalog.services.directory_client import DirectoryClient, get_directory_client

# One in-memory DB shared across threads (TestClient) via StaticPool
engine = create_engine(
    "sqlite+pysqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enforce FKs in SQLite (off by default otherwise)
@event.listens_for(engine, "connect")
def _set_sqlite_pragma(dbapi_connection, _):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

@pytest.fixture
def db_session():
    # Services commit and roll back themselves, so every test gets fresh tables
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def directory():
    """Directory client double; by default the directory has no clients."""
    mock_directory = Mock(spec=DirectoryClient)
    mock_directory.list_clients.return_value = []
    mock_directory.get_client.return_value = None
    return mock_directory

@pytest.fixture(autouse=True)
def _override_dependencies(db_session, directory):
    def _get_db():
        yield db_session
    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_directory_client] = lambda: directory
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def bakery(db_session):
    bakery = models.Bakery(name="Central Bakery", address="1 Main St")
    db_session.add(bakery)
    db_session.commit()
    db_session.refresh(bakery)
    return bakery

@pytest.fixture
def other_bakery(db_session):
    bakery = models.Bakery(name="Harbour Bakery")
    db_session.add(bakery)
    db_session.commit()
    db_session.refresh(bakery)
    return bakery
