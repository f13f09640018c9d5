from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from alumni.api.v1.deps import get_current_principal, get_user_repo
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import Principal
from alumni.schemas.user_schema import ProfileOut, PublicProfileOut, SearchResultOut
from alumni.services.profile_service import ProfileService
from alumni.services.storage_service import save_upload

router = APIRouter(prefix="/api", tags=["profile"])


def get_profile_service(user_repo: UserRepository = Depends(get_user_repo)) -> ProfileService:
    return ProfileService(user_repo)


@router.get("/search", response_model=List[SearchResultOut])
async def search_alumni(
    q: str = Query("", max_length=100),
    profile_svc: ProfileService = Depends(get_profile_service),
):
    rows = await profile_svc.search(q)
    return [SearchResultOut.from_row(row) for row in rows]


@router.get("/profile", response_model=ProfileOut)
async def read_own_profile(
    principal: Principal = Depends(get_current_principal),
    profile_svc: ProfileService = Depends(get_profile_service),
):
    user = await profile_svc.get_own_profile(principal)
    return ProfileOut.from_row(user)


@router.post("/profile", response_model=ProfileOut)
async def update_own_profile(
    principal: Principal = Depends(get_current_principal),
    name: Optional[str] = Form(None),
    whatsapp: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    is_employed: bool = Form(False),
    looking_for_job: bool = Form(False),
    profile_picture: Optional[UploadFile] = File(None),
    certificates: Optional[UploadFile] = File(None),
    profile_svc: ProfileService = Depends(get_profile_service),
):
    fields = {
        "is_employed": is_employed,
        "looking_for_job": looking_for_job,
    }
    if name:
        fields["name"] = name
    if whatsapp is not None:
        fields["whatsapp_number"] = whatsapp or None
    if bio is not None:
        fields["bio"] = bio or None

    picture_name = await save_upload(profile_picture)
    if picture_name:
        fields["profile_picture"] = picture_name
    certificate_name = await save_upload(certificates)
    if certificate_name:
        fields["certificates"] = certificate_name

    user = await profile_svc.update_profile(principal, fields)
    return ProfileOut.from_row(user)


@router.get("/profile/{registration_number}", response_model=PublicProfileOut)
async def read_public_profile(
    registration_number: str,
    profile_svc: ProfileService = Depends(get_profile_service),
):
    user = await profile_svc.get_public_profile(registration_number)
    return PublicProfileOut.from_row(user)
