from fastapi import APIRouter, Depends

from alumni.api.v1.deps import get_current_principal, get_education_repo, get_user_repo
from alumni.repositories.profile_repo import EducationRepository
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import Principal
from alumni.schemas.profile_schema import EducationIn, EducationOut
from alumni.services.profile_service import ProfileService

router = APIRouter(prefix="/api/education", tags=["education"])


def get_education_service(
    user_repo: UserRepository = Depends(get_user_repo),
    education_repo: EducationRepository = Depends(get_education_repo),
) -> ProfileService:
    return ProfileService(user_repo, education_repo=education_repo)


@router.get("", response_model=EducationOut)
async def read_own_education(
    principal: Principal = Depends(get_current_principal),
    profile_svc: ProfileService = Depends(get_education_service),
):
    return await profile_svc.get_education(principal)


@router.post("", response_model=EducationOut)
async def save_own_education(
    body: EducationIn,
    principal: Principal = Depends(get_current_principal),
    profile_svc: ProfileService = Depends(get_education_service),
):
    return await profile_svc.save_education(principal, body.model_dump())


@router.get("/{registration_number}", response_model=EducationOut)
async def read_public_education(
    registration_number: str,
    profile_svc: ProfileService = Depends(get_education_service),
):
    return await profile_svc.get_public_education(registration_number)
