from alumni.core.exceptions import NotFoundException
from alumni.repositories.resource_repo import ResourceRepository
from alumni.schemas.auth_schema import Principal
from alumni.services.ownership import get_owned_row


class OwnedResourceService:
    """CRUD for one resource table, every mutation guarded by the owner check."""

    def __init__(self, repo: ResourceRepository):
        self.repo = repo
        self.label = repo.resource.label

    async def list_own(self, principal: Principal) -> list[dict]:
        return await self.repo.list_by_owner(principal.registration_number)

    async def list_public(self, registration_number: str) -> list[dict]:
        return await self.repo.list_public(registration_number)

    async def create(self, principal: Principal, data: dict) -> dict:
        return await self.repo.create(principal.registration_number, data)

    async def get_for_update(self, principal: Principal, resource_id: int) -> dict:
        return await get_owned_row(self.repo, principal, resource_id, self.label)

    async def update(self, principal: Principal, resource_id: int, data: dict) -> dict:
        await self.get_for_update(principal, resource_id)
        updated = await self.repo.update(resource_id, principal.registration_number, data)
        if updated is None:
            # deleted between the ownership check and the update
            raise NotFoundException(self.label)
        return updated

    async def delete(self, principal: Principal, resource_id: int) -> None:
        await self.get_for_update(principal, resource_id)
        if not await self.repo.delete(resource_id, principal.registration_number):
            raise NotFoundException(self.label)
