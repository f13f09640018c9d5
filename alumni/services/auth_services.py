import logging
from datetime import timedelta

from alumni.core.config import settings
from alumni.core.exceptions import (
    AccountUnverifiedException,
    InvalidCredentialsException,
    UserAlreadyExistsException,
)
from alumni.core.security import (
    burn_password_check,
    create_access_token,
    hash_password,
    verify_password,
)
from alumni.db.models.user_model import AccountRole
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import UserCreate

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register_user(self, user_in: UserCreate) -> dict:
        existing_email = await self.user_repo.get_by_email(user_in.email)
        if existing_email:
            raise UserAlreadyExistsException("email")
        existing_registration = await self.user_repo.get_by_registration_number(user_in.registration_number)
        if existing_registration:
            raise UserAlreadyExistsException("registration number")

        user_data = {
            "name": user_in.name,
            "email": user_in.email,
            "hashed_password": hash_password(user_in.password),
            "registration_number": user_in.registration_number,
            "graduation_year": user_in.graduation_year,
            "department": user_in.department,
            "whatsapp_number": user_in.whatsapp_number,
            "role": user_in.role.value,
            "is_verified": False,
        }
        created = await self.user_repo.create(user_in=user_data)
        logger.info("Registered account %s (pending verification)", created["id"])
        return created

    async def authenticate(self, email: str, password: str) -> dict:
        """Return the account for a correct email/password on a verified account.

        The password is checked before the verification flag, so only a caller
        who already knows the password can learn that an account is pending.
        """
        user = await self.user_repo.get_by_email(email)
        if not user:
            burn_password_check(password)
            logger.info("Login rejected for %s: InvalidCredentials", email)
            raise InvalidCredentialsException()
        if not verify_password(password, user.get("hashed_password")):
            logger.info("Login rejected for %s: InvalidCredentials", email)
            raise InvalidCredentialsException()
        if not user.get("is_verified", False):
            logger.info("Login rejected for %s: AccountUnverified", email)
            raise AccountUnverifiedException()
        return user

    def create_token_for_user(self, user: dict) -> str:
        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        role = user.get("role") or AccountRole.ALUMNI
        claims = {
            "sub": str(user["id"]),
            "id": user["id"],
            "email": user["email"],
            "registration_number": user["registration_number"],
            "role": AccountRole(role).value,
        }
        return create_access_token(claims, expires_delta=access_token_expires)
