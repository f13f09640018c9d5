from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from alumni.api.v1.deps import get_current_principal, get_ecard_repo
from alumni.repositories.ecard_repo import ECardRepository
from alumni.schemas.auth_schema import Principal
from alumni.schemas.ecard_schema import ECardRequestOut, ECardStatusOut
from alumni.services.ecard_service import ECardService
from alumni.services.storage_service import save_upload

router = APIRouter(prefix="/api/ecard", tags=["ecard"])

DOWNLOAD_NAME = "Alumni_ECard.png"


def get_ecard_service(ecard_repo: ECardRepository = Depends(get_ecard_repo)) -> ECardService:
    return ECardService(ecard_repo)


@router.get("/status", response_model=ECardStatusOut)
async def ecard_status(
    principal: Principal = Depends(get_current_principal),
    ecard_svc: ECardService = Depends(get_ecard_service),
):
    return await ecard_svc.status(principal)


@router.post("/request", response_model=ECardRequestOut)
async def request_ecard(
    principal: Principal = Depends(get_current_principal),
    cardImage: Optional[UploadFile] = File(None),
    ecard_svc: ECardService = Depends(get_ecard_service),
):
    card_image = await save_upload(cardImage)
    card, created = await ecard_svc.request_card(principal, card_image)
    message = "E-Card request submitted successfully" if created else "E-Card request updated successfully"
    return ECardRequestOut(message=message, status=card["status"], expiry_date=card["expiry_date"])


@router.get("/view")
async def view_ecard(
    principal: Principal = Depends(get_current_principal),
    ecard_svc: ECardService = Depends(get_ecard_service),
):
    path = await ecard_svc.approved_image_path(principal)
    return FileResponse(path, media_type="image/png")


@router.get("/download")
async def download_ecard(
    principal: Principal = Depends(get_current_principal),
    ecard_svc: ECardService = Depends(get_ecard_service),
):
    path = await ecard_svc.approved_image_path(principal)
    return FileResponse(path, media_type="image/png", filename=DOWNLOAD_NAME)
