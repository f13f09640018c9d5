# alumni/api/v1/routers.py
from fastapi import APIRouter
from alumni.api.v1.endpoints import admin, auth, contact, ecard, education, profile, resources, skills

router = APIRouter()

router.include_router(auth.router)
router.include_router(admin.router)
router.include_router(profile.router)
router.include_router(education.router)
router.include_router(skills.router)
router.include_router(resources.internships_router)
router.include_router(resources.projects_router)
router.include_router(resources.jobs_router)
router.include_router(resources.achievements_router)
router.include_router(ecard.router)
router.include_router(contact.router)
