import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Index, Integer, String, Text, func

from alumni.db.base import Base


class AccountRole(str, enum.Enum):
    ALUMNI = "alumni"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), unique=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    registration_number = Column(String(50), unique=True, nullable=False)
    graduation_year = Column(Integer, nullable=True)
    department = Column(String(100), nullable=True)
    whatsapp_number = Column(String(20), nullable=True)
    profile_picture = Column(String(255), nullable=True)
    certificates = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    is_employed = Column(Boolean, nullable=False, default=False, server_default="false")
    looking_for_job = Column(Boolean, nullable=False, default=False, server_default="false")
    is_verified = Column(Boolean, nullable=False, default=False, server_default="false")
    role = Column(
        Enum(AccountRole, name="accountrole", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AccountRole.ALUMNI,
        server_default=AccountRole.ALUMNI.value,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # emails are compared case-insensitively
    __table_args__ = (
        Index("users_email_lower_key", func.lower(email), unique=True),
    )
