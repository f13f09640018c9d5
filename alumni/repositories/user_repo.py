from typing import Optional

from asyncpg import Connection, UniqueViolationError

from alumni.core.exceptions import UserAlreadyExistsException

PROFILE_COLUMNS = (
    "name", "whatsapp_number", "bio", "is_employed", "looking_for_job",
    "profile_picture", "certificates",
)


class UserRepository:

    def __init__(self, conn: Connection):
        self.conn = conn

    # ------------------ Retrieval Methods ------------------ #

    async def get_by_email(self, email: str) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE lower(email) = lower($1);"
        record = await self.conn.fetchrow(sql, email)
        return dict(record) if record else None

    async def get_by_id(self, user_id: int) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE id = $1;"
        record = await self.conn.fetchrow(sql, user_id)
        return dict(record) if record else None

    async def get_by_registration_number(self, registration_number: str) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE registration_number = $1;"
        record = await self.conn.fetchrow(sql, registration_number)
        return dict(record) if record else None

    async def get_verified_by_registration_number(self, registration_number: str) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE registration_number = $1 AND is_verified = TRUE;"
        record = await self.conn.fetchrow(sql, registration_number)
        return dict(record) if record else None

    async def search_verified(self, name_query: str, limit: int = 10) -> list[dict]:
        sql = """
            SELECT id, name, profile_picture, registration_number, department
            FROM users
            WHERE name ILIKE $1 AND is_verified = TRUE
            ORDER BY name
            LIMIT $2;
        """
        records = await self.conn.fetch(sql, f"%{name_query}%", limit)
        return [dict(record) for record in records]

    async def list_unverified(self) -> list[dict]:
        sql = "SELECT * FROM users WHERE is_verified = FALSE ORDER BY created_at, id;"
        records = await self.conn.fetch(sql)
        return [dict(record) for record in records]

    # ------------------ Creation ------------------ #

    async def create(self, user_in: dict) -> dict:
        sql = """
            INSERT INTO users (name, email, hashed_password, registration_number,
                               graduation_year, department, whatsapp_number, role, is_verified)
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
            RETURNING *;
        """
        try:
            record = await self.conn.fetchrow(
                sql,
                user_in["name"],
                user_in["email"],
                user_in["hashed_password"],
                user_in["registration_number"],
                user_in.get("graduation_year"),
                user_in.get("department"),
                user_in.get("whatsapp_number"),
                user_in.get("role", "alumni"),
                user_in.get("is_verified", False),
            )
        except UniqueViolationError as e:
            constraint = getattr(e, "constraint_name", None) or str(e)
            field = "registration number" if "registration_number" in constraint else "email"
            raise UserAlreadyExistsException(field)
        return dict(record)

    # ------------------ Update / Delete ------------------ #

    async def update_profile(self, user_id: int, fields: dict) -> Optional[dict]:
        columns = [c for c in PROFILE_COLUMNS if c in fields]
        if not columns:
            return await self.get_by_id(user_id)
        assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(columns, start=1))
        sql = f"UPDATE users SET {assignments} WHERE id = ${len(columns) + 1} RETURNING *;"
        record = await self.conn.fetchrow(sql, *[fields[c] for c in columns], user_id)
        return dict(record) if record else None

    async def set_verified(self, user_id: int) -> Optional[dict]:
        sql = "UPDATE users SET is_verified = TRUE WHERE id = $1 RETURNING *;"
        record = await self.conn.fetchrow(sql, user_id)
        return dict(record) if record else None

    async def delete_unverified(self, user_id: int) -> bool:
        sql = "DELETE FROM users WHERE id = $1 AND is_verified = FALSE RETURNING id;"
        deleted_id = await self.conn.fetchval(sql, user_id)
        return deleted_id is not None
