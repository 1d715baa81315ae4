"""
Shared pytest fixtures: in-memory SQLite store, repository, backup directory,
fixed clock and an API client wired to them.
"""

import os
import sys

# Test settings must be in place before project modules read them
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BANK_PASSWORD_ITERATIONS", "1000")
os.environ.setdefault("BANK_INIT_SCHEMA", "0")

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime

import pytest

from backup_writer import BackupWriter
from database import make_engine
from repository import Repository
from schema_sql import SchemaConfig

FIXED_MOMENT = datetime(2024, 3, 7, 14, 5, 9)


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", echo=False)
    yield engine
    engine.dispose()


@pytest.fixture
def repo(engine):
    """Repository over the stock schema, initialised with seed data."""
    repository = Repository(engine)
    repository.init_schema()
    return repository


@pytest.fixture
def empty_repo(engine):
    """Repository over a store with no tables at all."""
    return Repository(engine, schema=SchemaConfig())


@pytest.fixture
def backup_dir(tmp_path):
    return tmp_path / "backup"


@pytest.fixture
def clock():
    return lambda: FIXED_MOMENT


@pytest.fixture
def writer(backup_dir, clock):
    return BackupWriter(backup_dir, clock=clock)


@pytest.fixture
def client(repo, writer):
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from dependencies import get_backup_writer, get_repository
    from main import app

    app.dependency_overrides[get_repository] = lambda: repo
    app.dependency_overrides[get_backup_writer] = lambda: writer
    yield TestClient(app)
    app.dependency_overrides.clear()
