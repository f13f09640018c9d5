"""
tests/test_admin_service.py -- The account verification queue.
"""

from __future__ import annotations

import pytest

from alumni.core.exceptions import AccountAlreadyVerifiedException, NotFoundException
from alumni.schemas.auth_schema import Principal
from alumni.services.admin_service import AdminService
from fakes import FakeDatabase, FakeUserRepository

ADMIN = Principal(id=999, email="admin@x.com", registration_number="ADMIN-1", role="admin")


@pytest.fixture
def db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def svc(db: FakeDatabase) -> AdminService:
    return AdminService(FakeUserRepository(db))


@pytest.mark.asyncio
async def test_pending_lists_only_unverified(db, svc) -> None:
    db.add_user("a@x.com", "pw123456", "A", verified=False)
    db.add_user("b@x.com", "pw123456", "B", verified=True)
    pending = await svc.list_pending()
    assert [u["registration_number"] for u in pending] == ["A"]


@pytest.mark.asyncio
async def test_verify_is_idempotent(db, svc) -> None:
    user = db.add_user("a@x.com", "pw123456", "A", verified=False)
    first = await svc.verify_account(ADMIN, user["id"])
    second = await svc.verify_account(ADMIN, user["id"])
    assert first["is_verified"] is True
    assert second["is_verified"] is True
    assert db.users[user["id"]]["is_verified"] is True


@pytest.mark.asyncio
async def test_verify_unknown_account(svc) -> None:
    with pytest.raises(NotFoundException):
        await svc.verify_account(ADMIN, 12345)


@pytest.mark.asyncio
async def test_reject_removes_pending_account(db, svc) -> None:
    user = db.add_user("a@x.com", "pw123456", "A", verified=False)
    await svc.reject_account(ADMIN, user["id"])
    assert user["id"] not in db.users


@pytest.mark.asyncio
async def test_reject_refuses_verified_account(db, svc) -> None:
    user = db.add_user("a@x.com", "pw123456", "A", verified=True)
    with pytest.raises(AccountAlreadyVerifiedException):
        await svc.reject_account(ADMIN, user["id"])
    assert user["id"] in db.users


@pytest.mark.asyncio
async def test_reject_unknown_account(svc) -> None:
    with pytest.raises(NotFoundException):
        await svc.reject_account(ADMIN, 12345)
