"""Shared fixtures for server tests."""

import pytest
from fastapi.testclient import TestClient

import server.project_db as project_db
from server.app import app
from server.db import init_all


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the project store at a fresh sqlite file."""
    path = tmp_path / "mapper.db"
    monkeypatch.setattr(project_db, "MAPPER_DB_PATH", path)
    init_all()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client
