import hashlib
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from alumni.core.config import settings
from alumni.core.exceptions import TokenExpiredException, TokenInvalidException

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

REQUIRED_CLAIMS = ("id", "email", "registration_number", "role")


def _prehash(password: str) -> str:
    # bcrypt only reads the first 72 bytes; the sha256 hex digest is always 64.
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def hash_password(password: str) -> str:
    return pwd_context.hash(_prehash(password))


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Check a presented password against a stored bcrypt hash.

    Rows written before hashing was adopted hold something that is not a
    bcrypt hash at all. Those never match: the stored value is not compared
    to the presented password, the account simply has to reset its password.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(_prehash(plain_password), hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored credential is not a recognised hash; rejecting login")
        return False


# Used to spend the same bcrypt work on unknown emails as on real ones.
_DUMMY_HASH = hash_password("alumni-timing-dummy")


def burn_password_check(plain_password: str) -> None:
    verify_password(plain_password, _DUMMY_HASH)


def create_access_token(claims: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = dict(claims)
    now = datetime.now(timezone.utc)
    if expires_delta is not None:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire, "iat": now})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry and return the claims.

    Raises TokenExpiredException once the token is past its expiry and
    TokenInvalidException for anything else (bad signature, garbage input,
    missing identity claims).
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpiredException()
    except JWTError:
        raise TokenInvalidException()

    if any(payload.get(claim) is None for claim in REQUIRED_CLAIMS):
        raise TokenInvalidException()
    return payload
