from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from alumni.db.models.user_model import AccountRole


def upload_url(filename: Optional[str]) -> Optional[str]:
    return f"/uploads/{filename}" if filename else None


class AccountOut(BaseModel):
    """Account as seen by the admin verification queue."""
    id: int
    name: str
    email: str
    registration_number: str
    graduation_year: Optional[int] = None
    department: Optional[str] = None
    whatsapp_number: Optional[str] = None
    is_verified: bool
    role: AccountRole
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class PublicProfileOut(BaseModel):
    name: str
    whatsapp_number: Optional[str] = None
    profile_picture: Optional[str] = None
    certificates: Optional[str] = None
    bio: Optional[str] = None
    is_employed: bool = False
    looking_for_job: bool = False
    graduation_year: Optional[int] = None
    department: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "PublicProfileOut":
        return cls(**{
            **{k: row.get(k) for k in cls.model_fields if k in row},
            "profile_picture": upload_url(row.get("profile_picture")),
            "certificates": upload_url(row.get("certificates")),
            "is_employed": bool(row.get("is_employed")),
            "looking_for_job": bool(row.get("looking_for_job")),
        })


class ProfileOut(PublicProfileOut):
    registration_number: str
    email: str


class SearchResultOut(BaseModel):
    id: int
    name: str
    registration_number: str
    department: Optional[str] = None
    profile_picture: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "SearchResultOut":
        return cls(**{**row, "profile_picture": upload_url(row.get("profile_picture"))})
