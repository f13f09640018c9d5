from typing import List, Optional

from fastapi import APIRouter, Depends

from alumni.api.v1.deps import get_ecard_repo, get_user_repo, require_admin
from alumni.repositories.ecard_repo import ECardRepository
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import MessageOut, Principal
from alumni.schemas.ecard_schema import ECardOut, ECardRejectIn
from alumni.schemas.user_schema import AccountOut
from alumni.services.admin_service import AdminService
from alumni.services.ecard_service import ECardService

router = APIRouter(prefix="/api/admin", tags=["admin"])


def get_admin_service(user_repo: UserRepository = Depends(get_user_repo)) -> AdminService:
    return AdminService(user_repo)

def get_ecard_service(ecard_repo: ECardRepository = Depends(get_ecard_repo)) -> ECardService:
    return ECardService(ecard_repo)


@router.get("/pending", response_model=List[AccountOut])
async def list_pending(
    admin: Principal = Depends(require_admin),
    admin_svc: AdminService = Depends(get_admin_service),
):
    return await admin_svc.list_pending()


@router.post("/verify/{account_id}", response_model=AccountOut)
async def verify_account(
    account_id: int,
    admin: Principal = Depends(require_admin),
    admin_svc: AdminService = Depends(get_admin_service),
):
    return await admin_svc.verify_account(admin, account_id)


@router.delete("/reject/{account_id}", response_model=MessageOut)
async def reject_account(
    account_id: int,
    admin: Principal = Depends(require_admin),
    admin_svc: AdminService = Depends(get_admin_service),
):
    await admin_svc.reject_account(admin, account_id)
    return MessageOut(message="Account rejected and removed.")


# ------------------ E-Cards ------------------ #

@router.get("/ecards/pending", response_model=List[ECardOut])
async def list_pending_ecards(
    admin: Principal = Depends(require_admin),
    ecard_svc: ECardService = Depends(get_ecard_service),
):
    return await ecard_svc.list_pending()


@router.post("/ecards/{card_id}/approve", response_model=ECardOut)
async def approve_ecard(
    card_id: int,
    admin: Principal = Depends(require_admin),
    ecard_svc: ECardService = Depends(get_ecard_service),
):
    return await ecard_svc.approve(card_id)


@router.post("/ecards/{card_id}/reject", response_model=ECardOut)
async def reject_ecard(
    card_id: int,
    body: Optional[ECardRejectIn] = None,
    admin: Principal = Depends(require_admin),
    ecard_svc: ECardService = Depends(get_ecard_service),
):
    return await ecard_svc.reject(card_id, body.reason if body else None)
