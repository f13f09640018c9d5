from typing import Optional

from pydantic import BaseModel


class EducationIn(BaseModel):
    matric_institute: Optional[str] = None
    matric_degree: Optional[str] = None
    matric_year: Optional[int] = None
    matric_percentage: Optional[str] = None
    fsc_institute: Optional[str] = None
    fsc_degree: Optional[str] = None
    fsc_year: Optional[int] = None
    fsc_percentage: Optional[str] = None


class EducationOut(EducationIn):
    id: Optional[int] = None
    registration_number: Optional[str] = None


class SkillsIn(BaseModel):
    skills: list[str]


class SkillsOut(BaseModel):
    id: Optional[int] = None
    skills: list[str] = []
