# alumni/middleware/auth_middleware.py
import logging

from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from alumni.core.exceptions import (
    NotAuthenticatedException,
    TokenExpiredException,
    TokenInvalidException,
)
from alumni.core.security import decode_access_token
from alumni.schemas.auth_schema import Principal

logger = logging.getLogger(__name__)


def bearer_token(request: Request) -> str | None:
    auth = request.headers.get("Authorization")
    if auth and auth.lower().startswith("bearer "):
        token = auth.split(" ", 1)[1].strip()
        return token or None
    return None


class AuthMiddleware(BaseHTTPMiddleware):
    """Decode the bearer token once per request.

    Sets request.state.principal on success. On failure the principal stays
    None and request.state.auth_error holds the exception class the
    authentication dependency should raise. The store is never touched here.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.principal = None
        request.state.auth_error = NotAuthenticatedException
        token = bearer_token(request)
        if token:
            try:
                request.state.principal = Principal(**decode_access_token(token))
                request.state.auth_error = None
            except TokenExpiredException:
                logger.info("Expired token on %s %s", request.method, request.url.path)
                request.state.auth_error = TokenExpiredException
            except (TokenInvalidException, ValidationError):
                logger.info("Invalid token on %s %s", request.method, request.url.path)
                request.state.auth_error = TokenInvalidException
        response = await call_next(request)
        return response
