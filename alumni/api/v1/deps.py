from asyncpg import Connection
from fastapi import Depends, Request

from alumni.core.exceptions import AdminRequiredException, NotAuthenticatedException
from alumni.db.session import get_db_connection
from alumni.repositories.ecard_repo import ECardRepository
from alumni.repositories.profile_repo import EducationRepository, SkillsRepository
from alumni.repositories.resource_repo import (
    ACHIEVEMENTS,
    INTERNSHIPS,
    JOBS,
    PROJECTS,
    ResourceRepository,
)
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import Principal
from alumni.services.mail_service import MailService


async def get_current_principal(request: Request) -> Principal:
    principal = getattr(request.state, "principal", None)
    if principal is None:
        error = getattr(request.state, "auth_error", None) or NotAuthenticatedException
        raise error()
    return principal


async def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    if not principal.is_admin:
        raise AdminRequiredException()
    return principal


# ------------------ Repositories ------------------ #

def get_user_repo(conn: Connection = Depends(get_db_connection)) -> UserRepository:
    return UserRepository(conn)

def get_education_repo(conn: Connection = Depends(get_db_connection)) -> EducationRepository:
    return EducationRepository(conn)

def get_skills_repo(conn: Connection = Depends(get_db_connection)) -> SkillsRepository:
    return SkillsRepository(conn)

def get_ecard_repo(conn: Connection = Depends(get_db_connection)) -> ECardRepository:
    return ECardRepository(conn)

def get_internship_repo(conn: Connection = Depends(get_db_connection)) -> ResourceRepository:
    return ResourceRepository(conn, INTERNSHIPS)

def get_project_repo(conn: Connection = Depends(get_db_connection)) -> ResourceRepository:
    return ResourceRepository(conn, PROJECTS)

def get_job_repo(conn: Connection = Depends(get_db_connection)) -> ResourceRepository:
    return ResourceRepository(conn, JOBS)

def get_achievement_repo(conn: Connection = Depends(get_db_connection)) -> ResourceRepository:
    return ResourceRepository(conn, ACHIEVEMENTS)


def get_mail_service() -> MailService:
    return MailService()
