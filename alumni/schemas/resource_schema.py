from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class InternshipIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    company: Optional[str] = None
    duration: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    paid: bool = False


class InternshipOut(InternshipIn):
    id: int
    registration_number: str


class ProjectIn(BaseModel):
    project_title: str = Field(..., min_length=1, max_length=200)
    project_description: Optional[str] = None
    completion_date: Optional[date] = None
    months_taken: Optional[int] = Field(None, ge=0)


class ProjectOut(ProjectIn):
    id: int
    registration_number: str


class JobIn(BaseModel):
    job_title: str = Field(..., min_length=1, max_length=200)
    organization: Optional[str] = None
    joining_date: Optional[date] = None
    job_description: Optional[str] = None


class JobOut(JobIn):
    id: int
    registration_number: str


class AchievementOut(BaseModel):
    id: int
    registration_number: str
    title: str
    details: Optional[str] = None
    file_path: Optional[str] = None
