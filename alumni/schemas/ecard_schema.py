from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from alumni.db.models.ecard_model import ECardStatus


class ECardStatusOut(BaseModel):
    exists: bool
    status: Optional[ECardStatus] = None


class ECardRequestOut(BaseModel):
    success: bool = True
    message: str
    status: ECardStatus
    expiry_date: date


class ECardOut(BaseModel):
    id: int
    user_id: int
    registration_number: str
    status: ECardStatus
    card_image: Optional[str] = None
    request_date: Optional[datetime] = None
    approved_date: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    expiry_date: date

    model_config = {
        "from_attributes": True
    }


class ECardRejectIn(BaseModel):
    reason: Optional[str] = None
