from typing import Optional

from alumni.core.exceptions import NotFoundException
from alumni.repositories.profile_repo import EducationRepository, SkillsRepository
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import Principal
from alumni.services.ownership import get_owned_row


class ProfileService:
    def __init__(
        self,
        user_repo: UserRepository,
        education_repo: Optional[EducationRepository] = None,
        skills_repo: Optional[SkillsRepository] = None,
    ):
        self.user_repo = user_repo
        self.education_repo = education_repo
        self.skills_repo = skills_repo

    # ------------------ Account profile ------------------ #

    async def get_own_profile(self, principal: Principal) -> dict:
        user = await self.user_repo.get_by_id(principal.id)
        if user is None:
            raise NotFoundException("user")
        return user

    async def update_profile(self, principal: Principal, fields: dict) -> dict:
        updated = await self.user_repo.update_profile(principal.id, fields)
        if updated is None:
            raise NotFoundException("user")
        return updated

    async def get_public_profile(self, registration_number: str) -> dict:
        user = await self.user_repo.get_verified_by_registration_number(registration_number)
        if user is None:
            raise NotFoundException("user")
        return user

    async def search(self, name_query: str, limit: int = 10) -> list[dict]:
        return await self.user_repo.search_verified(name_query, limit=limit)

    # ------------------ Education ------------------ #

    async def get_education(self, principal: Principal) -> dict:
        return await self.education_repo.get_by_owner(principal.registration_number) or {}

    async def get_public_education(self, registration_number: str) -> dict:
        return await self.education_repo.get_public(registration_number) or {}

    async def save_education(self, principal: Principal, data: dict) -> dict:
        return await self.education_repo.upsert(principal.registration_number, data)

    # ------------------ Skills ------------------ #

    async def get_skills(self, principal: Principal) -> dict:
        return await self.skills_repo.get_by_owner(principal.registration_number) or {"skills": []}

    async def get_public_skills(self, registration_number: str) -> list[str]:
        row = await self.skills_repo.get_public(registration_number)
        return row["skills"] if row else []

    async def save_skills(self, principal: Principal, skills: list[str]) -> dict:
        cleaned = [s.strip() for s in skills if s and s.strip()]
        return await self.skills_repo.upsert(principal.registration_number, cleaned)

    async def delete_skills(self, principal: Principal, skills_id: int) -> None:
        await get_owned_row(self.skills_repo, principal, skills_id, "skill")
        if not await self.skills_repo.delete(skills_id, principal.registration_number):
            raise NotFoundException("skill")
