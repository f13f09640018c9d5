import enum

from sqlalchemy import (Column, Date, DateTime, Enum, ForeignKey, Integer, String, Text,
                        UniqueConstraint, func)

from alumni.db.base import Base


class ECardStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ECard(Base):
    __tablename__ = "e_cards"
    __table_args__ = (
        UniqueConstraint("user_id", "registration_number", name="uq_e_cards_owner"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    registration_number = Column(String(50), nullable=False)
    status = Column(
        Enum(ECardStatus, name="ecardstatus", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ECardStatus.PENDING,
        server_default=ECardStatus.PENDING.value,
    )
    card_image = Column(String(255), nullable=True)
    request_date = Column(DateTime(timezone=True), server_default=func.now())
    approved_date = Column(DateTime(timezone=True), nullable=True)
    rejection_reason = Column(Text, nullable=True)
    expiry_date = Column(Date, nullable=False)
