from dataclasses import dataclass
from typing import Optional

from asyncpg import Connection


@dataclass(frozen=True)
class ResourceTable:
    """Table layout of a resource owned through users.registration_number.

    Identifiers here are the only ones ever formatted into SQL; every value
    goes through a bound parameter.
    """
    table: str
    label: str
    columns: tuple[str, ...]
    order_by: str = "id DESC"


INTERNSHIPS = ResourceTable(
    table="internships",
    label="internship",
    columns=("title", "company", "duration", "start_date", "end_date", "description", "paid"),
    order_by="start_date DESC NULLS LAST, id DESC",
)
PROJECTS = ResourceTable(
    table="projects",
    label="project",
    columns=("project_title", "project_description", "completion_date", "months_taken"),
    order_by="completion_date DESC NULLS LAST, id DESC",
)
JOBS = ResourceTable(
    table="jobs",
    label="job",
    columns=("job_title", "organization", "joining_date", "job_description"),
    order_by="joining_date DESC NULLS LAST, id DESC",
)
ACHIEVEMENTS = ResourceTable(
    table="achievements",
    label="achievement",
    columns=("title", "details", "file_path"),
)


class ResourceRepository:
    """Repository for the per-account resource tables with asyncpg."""

    def __init__(self, conn: Connection, resource: ResourceTable):
        self.conn = conn
        self.resource = resource

    def _values(self, data: dict) -> tuple[list[str], list]:
        columns = [c for c in self.resource.columns if c in data]
        return columns, [data[c] for c in columns]

    # ------------------ Retrieval Methods ------------------ #

    async def get_by_id(self, resource_id: int) -> Optional[dict]:
        sql = f"SELECT * FROM {self.resource.table} WHERE id = $1;"
        record = await self.conn.fetchrow(sql, resource_id)
        return dict(record) if record else None

    async def list_by_owner(self, registration_number: str) -> list[dict]:
        sql = (
            f"SELECT * FROM {self.resource.table} WHERE registration_number = $1 "
            f"ORDER BY {self.resource.order_by};"
        )
        records = await self.conn.fetch(sql, registration_number)
        return [dict(record) for record in records]

    async def list_public(self, registration_number: str) -> list[dict]:
        sql = (
            f"SELECT r.* FROM {self.resource.table} r "
            f"JOIN users u ON u.registration_number = r.registration_number "
            f"WHERE r.registration_number = $1 AND u.is_verified = TRUE "
            f"ORDER BY {', '.join('r.' + part.strip() for part in self.resource.order_by.split(','))};"
        )
        records = await self.conn.fetch(sql, registration_number)
        return [dict(record) for record in records]

    # ------------------ Mutations ------------------ #

    async def create(self, registration_number: str, data: dict) -> dict:
        columns, values = self._values(data)
        names = ", ".join(["registration_number", *columns])
        placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 2))
        sql = f"INSERT INTO {self.resource.table} ({names}) VALUES ({placeholders}) RETURNING *;"
        record = await self.conn.fetchrow(sql, registration_number, *values)
        return dict(record)

    async def update(self, resource_id: int, registration_number: str, data: dict) -> Optional[dict]:
        columns, values = self._values(data)
        if not columns:
            return await self.get_by_id(resource_id)
        assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(columns, start=1))
        n = len(columns)
        sql = (
            f"UPDATE {self.resource.table} SET {assignments} "
            f"WHERE id = ${n + 1} AND registration_number = ${n + 2} RETURNING *;"
        )
        record = await self.conn.fetchrow(sql, *values, resource_id, registration_number)
        return dict(record) if record else None

    async def delete(self, resource_id: int, registration_number: str) -> bool:
        sql = (
            f"DELETE FROM {self.resource.table} "
            f"WHERE id = $1 AND registration_number = $2 RETURNING id;"
        )
        deleted_id = await self.conn.fetchval(sql, resource_id, registration_number)
        return deleted_id is not None
