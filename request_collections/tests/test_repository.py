"""
Unit tests for the generic repository and record cloning.
"""

import warnings

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from request_collections.database import Base, utcnow
from request_collections.exceptions import ResourceNotFoundError
from request_collections.models import GrpcRequest, HttpRequest, Workspace
from request_collections.services.repository import (
    Repository,
    UpdateSource,
    clone_record,
    generate_id,
)


# Test database setup
TEST_DATABASE_URL = "sqlite:///./test_repository.db"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)


@event.listens_for(test_engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def repo():
    """Create a repository over a fresh database for each test."""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield Repository(session)
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def test_generate_id_uses_prefix():
    new_id = generate_id("rq")
    assert new_id.startswith("rq_")
    assert len(new_id) == len("rq_") + 10


def test_generate_id_is_unique():
    assert len({generate_id("rq") for _ in range(100)}) == 100


def test_upsert_keeps_explicit_id(repo):
    ws = repo.upsert(Workspace(id="wk_fixed", name="Fixed"), UpdateSource.IMPORT)
    assert ws.id == "wk_fixed"
    assert repo.find_one(Workspace, "id", "wk_fixed").name == "Fixed"


def test_find_one_missing_raises(repo):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        repo.find_one(Workspace, "id", "wk_missing")
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Workspace with id wk_missing not found"


def test_find_many_with_limit(repo):
    ws = repo.upsert(Workspace(name="W"), UpdateSource.WINDOW)
    for _ in range(3):
        repo.upsert(HttpRequest(workspace_id=ws.id), UpdateSource.WINDOW)

    assert len(repo.find_many(HttpRequest, "workspace_id", ws.id)) == 3
    assert len(repo.find_many(HttpRequest, "workspace_id", ws.id, limit=2)) == 2


def test_delete_returns_record(repo):
    ws = repo.upsert(Workspace(name="W"), UpdateSource.WINDOW)
    ws_id = ws.id

    deleted = repo.delete(ws, UpdateSource.SYNC)

    assert deleted is ws
    assert repo.find_many(Workspace, "id", ws_id) == []


def test_clone_record_copies_columns(repo):
    ws = repo.upsert(Workspace(name="W"), UpdateSource.WINDOW)
    source = repo.upsert(
        GrpcRequest(
            workspace_id=ws.id,
            name="Say hello",
            service="helloworld.Greeter",
            method="SayHello",
            sort_priority=7.0,
            metadata_=[{"name": "x-id", "value": "1", "enabled": True}],
        ),
        UpdateSource.WINDOW,
    )

    clone = clone_record(source)

    assert clone is not source
    assert clone.id == source.id
    assert clone.name == "Say hello"
    assert clone.service == "helloworld.Greeter"
    assert clone.sort_priority == 7.0
    assert clone.metadata_ == source.metadata_
    assert clone.metadata_ is not source.metadata_


def test_clone_record_is_not_in_session(repo):
    ws = repo.upsert(Workspace(name="W"), UpdateSource.WINDOW)
    clone = clone_record(ws)
    assert clone not in repo.db


def test_upsert_sets_naive_utc_updated_at(repo):
    before = utcnow()
    with warnings.catch_warnings():
        warnings.filterwarnings("error", message=".*utcnow.*", category=DeprecationWarning)
        ws = repo.upsert(Workspace(name="W"), UpdateSource.WINDOW)

    assert ws.updated_at.tzinfo is None
    assert ws.updated_at >= before
    assert ws.created_at.tzinfo is None
