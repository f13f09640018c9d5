from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import BaseModel

from alumni.api.v1.deps import (
    get_achievement_repo,
    get_current_principal,
    get_internship_repo,
    get_job_repo,
    get_project_repo,
)
from alumni.repositories.resource_repo import ResourceRepository
from alumni.schemas.auth_schema import MessageOut, Principal
from alumni.schemas.resource_schema import (
    AchievementOut,
    InternshipIn,
    InternshipOut,
    JobIn,
    JobOut,
    ProjectIn,
    ProjectOut,
)
from alumni.services.resource_service import OwnedResourceService
from alumni.services.storage_service import save_upload


def build_resource_router(
    prefix: str,
    tag: str,
    get_repo: Callable[..., ResourceRepository],
    schema_in: Type[BaseModel],
    schema_out: Type[BaseModel],
) -> APIRouter:
    """Own list, create, update, delete and public list for one JSON resource kind."""
    router = APIRouter(prefix=prefix, tags=[tag])

    def get_service(repo: ResourceRepository = Depends(get_repo)) -> OwnedResourceService:
        return OwnedResourceService(repo)

    @router.get("", response_model=List[schema_out])
    async def list_own(
        principal: Principal = Depends(get_current_principal),
        svc: OwnedResourceService = Depends(get_service),
    ):
        return await svc.list_own(principal)

    @router.post("", response_model=schema_out, status_code=status.HTTP_201_CREATED)
    async def create(
        body: schema_in,
        principal: Principal = Depends(get_current_principal),
        svc: OwnedResourceService = Depends(get_service),
    ):
        return await svc.create(principal, body.model_dump())

    @router.put("/{resource_id}", response_model=schema_out)
    async def update(
        resource_id: int,
        body: schema_in,
        principal: Principal = Depends(get_current_principal),
        svc: OwnedResourceService = Depends(get_service),
    ):
        return await svc.update(principal, resource_id, body.model_dump())

    @router.delete("/{resource_id}", response_model=MessageOut)
    async def delete(
        resource_id: int,
        principal: Principal = Depends(get_current_principal),
        svc: OwnedResourceService = Depends(get_service),
    ):
        await svc.delete(principal, resource_id)
        return MessageOut(message=f"{svc.label.capitalize()} deleted successfully")

    @router.get("/{registration_number}", response_model=List[schema_out])
    async def list_public(
        registration_number: str,
        svc: OwnedResourceService = Depends(get_service),
    ):
        return await svc.list_public(registration_number)

    return router


internships_router = build_resource_router("/api/internships", "internships", get_internship_repo, InternshipIn, InternshipOut)
projects_router = build_resource_router("/api/projects", "projects", get_project_repo, ProjectIn, ProjectOut)
jobs_router = build_resource_router("/api/jobs", "jobs", get_job_repo, JobIn, JobOut)


# ------------------ Achievements (multipart, optional file) ------------------ #

achievements_router = APIRouter(prefix="/api/achievements", tags=["achievements"])


def get_achievement_service(repo: ResourceRepository = Depends(get_achievement_repo)) -> OwnedResourceService:
    return OwnedResourceService(repo)


@achievements_router.get("", response_model=List[AchievementOut])
async def list_own_achievements(
    principal: Principal = Depends(get_current_principal),
    svc: OwnedResourceService = Depends(get_achievement_service),
):
    return await svc.list_own(principal)


@achievements_router.post("", response_model=AchievementOut, status_code=status.HTTP_201_CREATED)
async def create_achievement(
    principal: Principal = Depends(get_current_principal),
    title: str = Form(..., min_length=1, max_length=200),
    details: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    svc: OwnedResourceService = Depends(get_achievement_service),
):
    file_path = await save_upload(file)
    return await svc.create(principal, {"title": title, "details": details, "file_path": file_path})


@achievements_router.put("/{resource_id}", response_model=AchievementOut)
async def update_achievement(
    resource_id: int,
    principal: Principal = Depends(get_current_principal),
    title: str = Form(..., min_length=1, max_length=200),
    details: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    svc: OwnedResourceService = Depends(get_achievement_service),
):
    data = {"title": title, "details": details}
    await svc.get_for_update(principal, resource_id)
    file_path = await save_upload(file)
    if file_path:
        data["file_path"] = file_path
    return await svc.update(principal, resource_id, data)


@achievements_router.delete("/{resource_id}", response_model=MessageOut)
async def delete_achievement(
    resource_id: int,
    principal: Principal = Depends(get_current_principal),
    svc: OwnedResourceService = Depends(get_achievement_service),
):
    await svc.delete(principal, resource_id)
    return MessageOut(message="Achievement deleted successfully")


@achievements_router.get("/{registration_number}", response_model=List[AchievementOut])
async def list_public_achievements(
    registration_number: str,
    svc: OwnedResourceService = Depends(get_achievement_service),
):
    return await svc.list_public(registration_number)
