"""
tests/conftest.py -- Shared fixtures for the alumni API tests.

Settings are read from the environment when alumni.core.config is first
imported, so the required variables are set here before any alumni import.
No database is needed: the lifespan is replaced with a no-op and every
repository dependency is overridden with the in-memory fakes in fakes.py.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Generator
from contextlib import asynccontextmanager

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-the-alumni-suite-0123456789")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "5432")
os.environ.setdefault("DB_NAME", "alumni_test")
os.environ.setdefault("DB_USER", "alumni")
os.environ.setdefault("DB_PASS", "alumni")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="alumni-uploads-")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from alumni.api.v1 import deps
from alumni.main import app
from alumni.repositories.resource_repo import ACHIEVEMENTS, INTERNSHIPS, JOBS, PROJECTS
from fakes import (
    FakeDatabase,
    FakeECardRepository,
    FakeEducationRepository,
    FakeResourceRepository,
    FakeSkillsRepository,
    FakeUserRepository,
)


@asynccontextmanager
async def _no_db_lifespan(app):
    yield


@pytest.fixture
def db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def client(db: FakeDatabase) -> Generator[TestClient, None, None]:
    """TestClient on the real app with every repository backed by `db`."""
    app.dependency_overrides.update({
        deps.get_user_repo: lambda: FakeUserRepository(db),
        deps.get_education_repo: lambda: FakeEducationRepository(db),
        deps.get_skills_repo: lambda: FakeSkillsRepository(db),
        deps.get_ecard_repo: lambda: FakeECardRepository(db),
        deps.get_internship_repo: lambda: FakeResourceRepository(db, INTERNSHIPS),
        deps.get_project_repo: lambda: FakeResourceRepository(db, PROJECTS),
        deps.get_job_repo: lambda: FakeResourceRepository(db, JOBS),
        deps.get_achievement_repo: lambda: FakeResourceRepository(db, ACHIEVEMENTS),
    })
    original_lifespan = app.router.lifespan_context
    app.router.lifespan_context = _no_db_lifespan

    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client

    app.router.lifespan_context = original_lifespan
    app.dependency_overrides.clear()
