# alumni/db/seed.py
import asyncio
import logging
import random

from faker import Faker
from tqdm import tqdm

from alumni.core.config import settings
from alumni.core.security import hash_password
from alumni.db.session import close_db_pool, connect_db_pool
from alumni.repositories.resource_repo import INTERNSHIPS, JOBS, PROJECTS, ResourceRepository
from alumni.repositories.user_repo import UserRepository
from alumni.schemas.auth_schema import normalize_email

logger = logging.getLogger(__name__)

fake = Faker()

NUM_ALUMNI = 50
SEED = 2024
ADMIN_REGISTRATION_NUMBER = "ADMIN-0001"
VERIFIED_SHARE = 0.8
DEPARTMENTS = ["Computer Science", "Electrical Engineering", "Mechanical Engineering",
               "Management Sciences", "Mathematics"]


def fake_account(index: int, hashed_password: str) -> dict:
    year = random.randint(2010, 2024)
    return {
        "name": fake.name(),
        "email": f"alumnus{index}.{fake.user_name()}@example.com".lower(),
        "hashed_password": hashed_password,
        "registration_number": f"B{str(year)[2:]}-{index:04d}",
        "graduation_year": year,
        "department": random.choice(DEPARTMENTS),
        "whatsapp_number": f"03{random.randint(100000000, 999999999)}",
        "role": "alumni",
        "is_verified": random.random() < VERIFIED_SHARE,
    }


async def seed_admin(users: UserRepository, hashed_password: str) -> bool:
    email = normalize_email(settings.SEED_ADMIN_EMAIL)
    if await users.get_by_email(email) is not None:
        return False
    await users.create({
        "name": "Administrator",
        "email": email,
        "hashed_password": hashed_password,
        "registration_number": ADMIN_REGISTRATION_NUMBER,
        "role": "admin",
        "is_verified": True,
    })
    logger.info("Created admin %s", email)
    return True


async def seed_alumni(
    users: UserRepository,
    internships: ResourceRepository,
    projects: ResourceRepository,
    jobs: ResourceRepository,
    hashed_password: str,
    count: int = NUM_ALUMNI,
) -> int:
    """Insert `count` fake alumni with their resources; returns how many were new.

    Each index is seeded on its own, so a rerun regenerates the same accounts
    and skips the ones already stored.
    """
    created = 0
    for index in tqdm(range(1, count + 1), desc="Seeding alumni"):
        fake.seed_instance(SEED + index)
        random.seed(SEED + index)
        account = fake_account(index, hashed_password)
        if (
            await users.get_by_registration_number(account["registration_number"])
            or await users.get_by_email(account["email"])
        ):
            continue

        account = await users.create(account)
        reg = account["registration_number"]
        await internships.create(reg, {
            "title": fake.job(),
            "company": fake.company(),
            "duration": f"{random.randint(1, 6)} months",
            "start_date": fake.date_between(start_date="-10y", end_date="-1y"),
            "description": fake.sentence(nb_words=10),
            "paid": random.random() < 0.5,
        })
        await projects.create(reg, {
            "project_title": fake.catch_phrase(),
            "project_description": fake.paragraph(nb_sentences=2),
            "completion_date": fake.date_between(start_date="-10y", end_date="today"),
            "months_taken": random.randint(1, 12),
        })
        if random.random() < 0.6:
            await jobs.create(reg, {
                "job_title": fake.job(),
                "organization": fake.company(),
                "joining_date": fake.date_between(start_date="-5y", end_date="today"),
            })
        created += 1
    return created


async def seed():
    pool = await connect_db_pool()

    # one hash shared by every seeded account
    hashed_password = hash_password(settings.SEED_PASSWORD)

    async with pool.acquire() as conn:
        users = UserRepository(conn)
        await seed_admin(users, hashed_password)
        created = await seed_alumni(
            users,
            ResourceRepository(conn, INTERNSHIPS),
            ResourceRepository(conn, PROJECTS),
            ResourceRepository(conn, JOBS),
            hashed_password,
        )

    logger.info("Seed complete: %s new alumni.", created)
    await close_db_pool()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    asyncio.run(seed())
