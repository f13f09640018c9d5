from datetime import date
from typing import Optional

from asyncpg import Connection


class ECardRepository:
    """Repository for membership card requests with asyncpg."""

    def __init__(self, conn: Connection):
        self.conn = conn

    # ------------------ Retrieval Methods ------------------ #

    async def get_by_id(self, card_id: int) -> Optional[dict]:
        sql = "SELECT * FROM e_cards WHERE id = $1;"
        record = await self.conn.fetchrow(sql, card_id)
        return dict(record) if record else None

    async def get_by_owner(self, user_id: int, registration_number: str) -> Optional[dict]:
        sql = "SELECT * FROM e_cards WHERE user_id = $1 AND registration_number = $2;"
        record = await self.conn.fetchrow(sql, user_id, registration_number)
        return dict(record) if record else None

    async def list_by_status(self, status: str) -> list[dict]:
        sql = "SELECT * FROM e_cards WHERE status = $1 ORDER BY request_date, id;"
        records = await self.conn.fetch(sql, status)
        return [dict(record) for record in records]

    # ------------------ Mutations ------------------ #

    async def upsert_request(
        self,
        user_id: int,
        registration_number: str,
        card_image: Optional[str],
        expiry_date: date,
    ) -> tuple[dict, bool]:
        """Create the request or reset the existing one to pending in one statement.

        Returns the row and whether it was newly inserted.
        """
        sql = """
            INSERT INTO e_cards (user_id, registration_number, card_image, expiry_date)
            VALUES ($1, $2, $3, $4)
            ON CONFLICT (user_id, registration_number) DO UPDATE
            SET status = 'pending',
                request_date = CURRENT_TIMESTAMP,
                card_image = EXCLUDED.card_image,
                approved_date = NULL,
                rejection_reason = NULL,
                expiry_date = EXCLUDED.expiry_date
            RETURNING *, (xmax = 0) AS inserted;
        """
        record = dict(await self.conn.fetchrow(sql, user_id, registration_number, card_image, expiry_date))
        inserted = bool(record.pop("inserted"))
        return record, inserted

    async def approve(self, card_id: int) -> Optional[dict]:
        sql = """
            UPDATE e_cards
            SET status = 'approved', approved_date = CURRENT_TIMESTAMP, rejection_reason = NULL
            WHERE id = $1
            RETURNING *;
        """
        record = await self.conn.fetchrow(sql, card_id)
        return dict(record) if record else None

    async def reject(self, card_id: int, reason: Optional[str]) -> Optional[dict]:
        sql = """
            UPDATE e_cards
            SET status = 'rejected', approved_date = NULL, rejection_reason = $2
            WHERE id = $1
            RETURNING *;
        """
        record = await self.conn.fetchrow(sql, card_id, reason)
        return dict(record) if record else None
