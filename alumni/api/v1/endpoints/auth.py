import logging

from asyncpg import InterfaceError, PostgresError
from fastapi import APIRouter, Depends, status

from alumni.api.v1.deps import get_user_repo
from alumni.core.exceptions import StoreFailureException
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import LoginOut, MessageOut, UserCreate, UserLogin
from alumni.services.auth_services import AuthService

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
async def signup(user_in: UserCreate, user_repo: UserRepository = Depends(get_user_repo)):
    auth_svc = AuthService(user_repo)
    try:
        await auth_svc.register_user(user_in)
    except (PostgresError, InterfaceError) as e:
        logging.error(f"Store failure during signup: {e}")
        raise StoreFailureException()
    return MessageOut(message="Account created successfully! Please wait for admin approval.")


@router.post("/login", response_model=LoginOut)
async def login(credentials: UserLogin, user_repo: UserRepository = Depends(get_user_repo)):
    auth_svc = AuthService(user_repo)
    try:
        user = await auth_svc.authenticate(credentials.email, credentials.password)
    except (PostgresError, InterfaceError) as e:
        logging.error(f"Store failure during login: {e}")
        raise StoreFailureException()
    token = auth_svc.create_token_for_user(user)
    return LoginOut(token=token, role=user.get("role") or "alumni")
