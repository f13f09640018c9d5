import logging
from datetime import date
from pathlib import Path
from typing import Optional

from alumni.core.config import settings
from alumni.core.exceptions import NotFoundException
from alumni.db.models.ecard_model import ECardStatus
from alumni.repositories.ecard_repo import ECardRepository
from alumni.schemas.auth_schema import Principal

logger = logging.getLogger(__name__)


def card_expiry(issued: date, years: int) -> date:
    try:
        return issued.replace(year=issued.year + years)
    except ValueError:
        # 29 February in a non-leap target year
        return issued.replace(year=issued.year + years, day=28)


class ECardService:
    def __init__(self, ecard_repo: ECardRepository, upload_dir: Optional[str] = None):
        self.ecard_repo = ecard_repo
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)

    async def status(self, principal: Principal) -> dict:
        card = await self.ecard_repo.get_by_owner(principal.id, principal.registration_number)
        if card is None:
            return {"exists": False}
        return {"exists": True, "status": card["status"]}

    async def request_card(
        self,
        principal: Principal,
        card_image: Optional[str],
        today: Optional[date] = None,
    ) -> tuple[dict, bool]:
        expiry = card_expiry(today or date.today(), settings.ECARD_VALIDITY_YEARS)
        card, created = await self.ecard_repo.upsert_request(
            principal.id, principal.registration_number, card_image, expiry
        )
        logger.info("E-Card request %s for %s", "created" if created else "reset", principal.registration_number)
        return card, created

    async def approved_image_path(self, principal: Principal) -> Path:
        card = await self.ecard_repo.get_by_owner(principal.id, principal.registration_number)
        if card is None or card["status"] != ECardStatus.APPROVED.value or not card.get("card_image"):
            raise NotFoundException("approved e-card")
        path = self.upload_dir / card["card_image"]
        if not path.is_file():
            logger.error("Approved e-card %s points at missing file %s", card["id"], path)
            raise NotFoundException("e-card file")
        return path

    # ------------------ Admin ------------------ #

    async def list_pending(self) -> list[dict]:
        return await self.ecard_repo.list_by_status(ECardStatus.PENDING.value)

    async def approve(self, card_id: int) -> dict:
        card = await self.ecard_repo.approve(card_id)
        if card is None:
            raise NotFoundException("e-card")
        return card

    async def reject(self, card_id: int, reason: Optional[str]) -> dict:
        card = await self.ecard_repo.reject(card_id, reason)
        if card is None:
            raise NotFoundException("e-card")
        return card
