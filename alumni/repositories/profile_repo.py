import json
import logging
from typing import Optional

from asyncpg import Connection

logger = logging.getLogger(__name__)

EDUCATION_COLUMNS = (
    "matric_institute", "matric_degree", "matric_year", "matric_percentage",
    "fsc_institute", "fsc_degree", "fsc_year", "fsc_percentage",
)


def parse_skills(raw) -> list[str]:
    if not raw:
        return []
    if isinstance(raw, list):
        return raw
    try:
        skills = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Unreadable skills payload, treating as empty")
        return []
    return skills if isinstance(skills, list) else []


class EducationRepository:

    def __init__(self, conn: Connection):
        self.conn = conn

    async def get_by_owner(self, registration_number: str) -> Optional[dict]:
        sql = "SELECT * FROM edu_info WHERE registration_number = $1;"
        record = await self.conn.fetchrow(sql, registration_number)
        return dict(record) if record else None

    async def get_public(self, registration_number: str) -> Optional[dict]:
        sql = """
            SELECT e.* FROM edu_info e
            JOIN users u ON u.registration_number = e.registration_number
            WHERE e.registration_number = $1 AND u.is_verified = TRUE;
        """
        record = await self.conn.fetchrow(sql, registration_number)
        return dict(record) if record else None

    async def upsert(self, registration_number: str, data: dict) -> dict:
        names = ", ".join(EDUCATION_COLUMNS)
        placeholders = ", ".join(f"${i}" for i in range(2, len(EDUCATION_COLUMNS) + 2))
        updates = ", ".join(f"{c} = EXCLUDED.{c}" for c in EDUCATION_COLUMNS)
        sql = f"""
            INSERT INTO edu_info (registration_number, {names})
            VALUES ($1, {placeholders})
            ON CONFLICT (registration_number) DO UPDATE SET {updates}
            RETURNING *;
        """
        record = await self.conn.fetchrow(
            sql, registration_number, *[data.get(c) for c in EDUCATION_COLUMNS]
        )
        return dict(record)


class SkillsRepository:

    def __init__(self, conn: Connection):
        self.conn = conn

    @staticmethod
    def _row(record) -> Optional[dict]:
        if not record:
            return None
        row = dict(record)
        row["skills"] = parse_skills(row.get("skills"))
        return row

    async def get_by_id(self, skills_id: int) -> Optional[dict]:
        sql = "SELECT * FROM user_skills WHERE id = $1;"
        return self._row(await self.conn.fetchrow(sql, skills_id))

    async def get_by_owner(self, registration_number: str) -> Optional[dict]:
        sql = "SELECT * FROM user_skills WHERE registration_number = $1;"
        return self._row(await self.conn.fetchrow(sql, registration_number))

    async def get_public(self, registration_number: str) -> Optional[dict]:
        sql = """
            SELECT s.* FROM user_skills s
            JOIN users u ON u.registration_number = s.registration_number
            WHERE s.registration_number = $1 AND u.is_verified = TRUE;
        """
        return self._row(await self.conn.fetchrow(sql, registration_number))

    async def upsert(self, registration_number: str, skills: list[str]) -> dict:
        sql = """
            INSERT INTO user_skills (registration_number, skills)
            VALUES ($1, $2)
            ON CONFLICT (registration_number) DO UPDATE SET skills = EXCLUDED.skills
            RETURNING *;
        """
        return self._row(await self.conn.fetchrow(sql, registration_number, json.dumps(skills)))

    async def delete(self, skills_id: int, registration_number: str) -> bool:
        sql = "DELETE FROM user_skills WHERE id = $1 AND registration_number = $2 RETURNING id;"
        deleted_id = await self.conn.fetchval(sql, skills_id, registration_number)
        return deleted_id is not None
