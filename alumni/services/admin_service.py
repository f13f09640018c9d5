import logging

from alumni.core.exceptions import AccountAlreadyVerifiedException, NotFoundException
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import Principal

logger = logging.getLogger(__name__)


class AdminService:
    """Verification queue. Callers are expected to have passed the admin gate."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def list_pending(self) -> list[dict]:
        return await self.user_repo.list_unverified()

    async def verify_account(self, admin: Principal, account_id: int) -> dict:
        account = await self.user_repo.set_verified(account_id)
        if account is None:
            raise NotFoundException("account")
        logger.info("Account %s verified by admin %s", account_id, admin.id)
        return account

    async def reject_account(self, admin: Principal, account_id: int) -> None:
        account = await self.user_repo.get_by_id(account_id)
        if account is None:
            raise NotFoundException("account")
        if account.get("is_verified"):
            raise AccountAlreadyVerifiedException()
        if not await self.user_repo.delete_unverified(account_id):
            # verified by someone else in the meantime
            raise AccountAlreadyVerifiedException()
        logger.info("Pending account %s rejected by admin %s", account_id, admin.id)
