"""
tests/test_storage_and_seed.py -- Upload naming and the development seed.
"""

from __future__ import annotations

import re

import pytest

from alumni.db.seed import fake_account, seed_admin, seed_alumni
from alumni.repositories.resource_repo import INTERNSHIPS, JOBS, PROJECTS
from alumni.services.storage_service import stored_name
from fakes import FakeDatabase, FakeResourceRepository, FakeUserRepository


def test_stored_name_is_timestamp_prefixed() -> None:
    assert stored_name("photo.png", now=1700000000.5) == "1700000000500-photo.png"


def test_stored_name_drops_directories_and_unsafe_chars() -> None:
    name = stored_name("../../etc/my pass?wd.txt", now=1.0)
    assert name == "1000-my_pass_wd.txt"
    assert "/" not in name


def test_stored_name_without_usable_name() -> None:
    assert stored_name("", now=1.0) == "1000-upload"
    assert stored_name("...", now=1.0) == "1000-upload"


def test_fake_account_shape() -> None:
    account = fake_account(7, "hashed")
    assert account["hashed_password"] == "hashed"
    assert account["role"] == "alumni"
    assert re.fullmatch(r"B\d{2}-0007", account["registration_number"])
    assert account["email"].startswith("alumnus7.")
    assert account["email"] == account["email"].lower()
    assert 2010 <= account["graduation_year"] <= 2024


@pytest.mark.asyncio
async def test_seed_can_run_twice() -> None:
    db = FakeDatabase()
    users = FakeUserRepository(db)
    repos = [FakeResourceRepository(db, table) for table in (INTERNSHIPS, PROJECTS, JOBS)]

    assert await seed_admin(users, "hashed") is True
    assert await seed_alumni(users, *repos, "hashed", count=5) == 5
    snapshot = len(db.users), len(db.resources["projects"])

    assert await seed_admin(users, "hashed") is False
    assert await seed_alumni(users, *repos, "hashed", count=5) == 0
    assert (len(db.users), len(db.resources["projects"])) == snapshot == (6, 5)
