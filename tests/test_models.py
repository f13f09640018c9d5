"""
tests/test_models.py -- The SQLAlchemy metadata Alembic migrates against.
"""

from __future__ import annotations

from alumni.db.base import Base
from alumni.db.models import ecard_model, resource_models, user_model  # noqa: F401


def test_metadata_covers_every_table() -> None:
    assert set(Base.metadata.tables) == {
        "users", "internships", "projects", "jobs", "achievements",
        "edu_info", "user_skills", "e_cards",
    }


def test_email_uniqueness_is_case_insensitive() -> None:
    users = Base.metadata.tables["users"]
    (index,) = [i for i in users.indexes if i.name == "users_email_lower_key"]
    assert index.unique
    assert "lower" in str(index.expressions[0]).lower()


def test_owned_tables_reference_registration_number() -> None:
    for name in ("internships", "projects", "jobs", "achievements", "edu_info", "user_skills"):
        (fk,) = Base.metadata.tables[name].c.registration_number.foreign_keys
        assert fk.target_fullname == "users.registration_number"
        assert fk.ondelete == "CASCADE"
