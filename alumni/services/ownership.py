# alumni/services/ownership.py

import enum
import logging
from typing import Any, Protocol

from alumni.core.exceptions import ForbiddenException, NotFoundException
from alumni.schemas.auth_schema import Principal

logger = logging.getLogger(__name__)


class Decision(str, enum.Enum):
    ALLOW = "allow"
    DENY = "deny"


class OwnedRowSource(Protocol):
    async def get_by_id(self, row_id: int) -> dict | None: ...


def authorize_mutation(principal: Principal, resource_registration_number: Any) -> Decision:
    if resource_registration_number is not None and principal.registration_number == resource_registration_number:
        return Decision.ALLOW
    return Decision.DENY


async def get_owned_row(repo: OwnedRowSource, principal: Principal, row_id: int, label: str) -> dict:
    """Load a row the principal is about to change.

    Existence is checked first (NotFound), ownership second (Forbidden), so the
    two failures never blur into each other.
    """
    row = await repo.get_by_id(row_id)
    if row is None:
        raise NotFoundException(label)
    if authorize_mutation(principal, row.get("registration_number")) is Decision.DENY:
        logger.warning(
            "Denied %s %s mutation by %s (owner %s)",
            label, row_id, principal.registration_number, row.get("registration_number"),
        )
        raise ForbiddenException(label)
    return row
