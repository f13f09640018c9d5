from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from alumni.db.models.user_model import AccountRole


def normalize_email(value: str) -> str:
    return value.strip().lower()


class Principal(BaseModel):
    """Identity decoded from a verified bearer token."""
    id: int
    email: str
    registration_number: str
    role: AccountRole

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.ADMIN


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)


class LoginOut(BaseModel):
    success: bool = True
    token: str
    role: AccountRole


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=255)
    registration_number: str = Field(..., min_length=1, max_length=50)
    graduation_year: Optional[int] = Field(None, ge=1900, le=2100)
    department: Optional[str] = None
    whatsapp_number: Optional[str] = None
    role: AccountRole = AccountRole.ALUMNI

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)


class MessageOut(BaseModel):
    success: bool = True
    message: str
