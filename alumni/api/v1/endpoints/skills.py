from typing import List

from fastapi import APIRouter, Depends

from alumni.api.v1.deps import get_current_principal, get_skills_repo, get_user_repo
from alumni.repositories.profile_repo import SkillsRepository
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import MessageOut, Principal
from alumni.schemas.profile_schema import SkillsIn, SkillsOut
from alumni.services.profile_service import ProfileService

router = APIRouter(prefix="/api/skills", tags=["skills"])


def get_skills_service(
    user_repo: UserRepository = Depends(get_user_repo),
    skills_repo: SkillsRepository = Depends(get_skills_repo),
) -> ProfileService:
    return ProfileService(user_repo, skills_repo=skills_repo)


@router.get("", response_model=SkillsOut)
async def read_own_skills(
    principal: Principal = Depends(get_current_principal),
    profile_svc: ProfileService = Depends(get_skills_service),
):
    return await profile_svc.get_skills(principal)


@router.post("", response_model=SkillsOut)
async def save_own_skills(
    body: SkillsIn,
    principal: Principal = Depends(get_current_principal),
    profile_svc: ProfileService = Depends(get_skills_service),
):
    return await profile_svc.save_skills(principal, body.skills)


@router.delete("/{skills_id}", response_model=MessageOut)
async def delete_skills(
    skills_id: int,
    principal: Principal = Depends(get_current_principal),
    profile_svc: ProfileService = Depends(get_skills_service),
):
    await profile_svc.delete_skills(principal, skills_id)
    return MessageOut(message="Skills deleted successfully")


@router.get("/{registration_number}", response_model=List[str])
async def read_public_skills(
    registration_number: str,
    profile_svc: ProfileService = Depends(get_skills_service),
):
    return await profile_svc.get_public_skills(registration_number)
