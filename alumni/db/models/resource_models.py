from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Text

from alumni.db.base import Base


def _owner_column():
    return Column(
        String(50),
        ForeignKey("users.registration_number", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )


class Internship(Base):
    __tablename__ = "internships"

    id = Column(Integer, primary_key=True, index=True)
    registration_number = _owner_column()
    title = Column(String(200), nullable=False)
    company = Column(String(200), nullable=True)
    duration = Column(String(50), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    description = Column(Text, nullable=True)
    paid = Column(Boolean, nullable=False, default=False, server_default="false")


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    registration_number = _owner_column()
    project_title = Column(String(200), nullable=False)
    project_description = Column(Text, nullable=True)
    completion_date = Column(Date, nullable=True)
    months_taken = Column(Integer, nullable=True)


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    registration_number = _owner_column()
    job_title = Column(String(200), nullable=False)
    organization = Column(String(200), nullable=True)
    joining_date = Column(Date, nullable=True)
    job_description = Column(Text, nullable=True)


class Achievement(Base):
    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, index=True)
    registration_number = _owner_column()
    title = Column(String(200), nullable=False)
    details = Column(Text, nullable=True)
    file_path = Column(String(255), nullable=True)


class EducationInfo(Base):
    """One row per account; upserted on registration_number."""
    __tablename__ = "edu_info"

    id = Column(Integer, primary_key=True, index=True)
    registration_number = Column(
        String(50),
        ForeignKey("users.registration_number", ondelete="CASCADE", onupdate="CASCADE"),
        unique=True,
        nullable=False,
    )
    matric_institute = Column(String(200), nullable=True)
    matric_degree = Column(String(100), nullable=True)
    matric_year = Column(Integer, nullable=True)
    matric_percentage = Column(String(10), nullable=True)
    fsc_institute = Column(String(200), nullable=True)
    fsc_degree = Column(String(100), nullable=True)
    fsc_year = Column(Integer, nullable=True)
    fsc_percentage = Column(String(10), nullable=True)


class UserSkills(Base):
    """Skill list stored as a JSON array string, one row per account."""
    __tablename__ = "user_skills"

    id = Column(Integer, primary_key=True, index=True)
    registration_number = Column(
        String(50),
        ForeignKey("users.registration_number", ondelete="CASCADE", onupdate="CASCADE"),
        unique=True,
        nullable=False,
    )
    skills = Column(Text, nullable=False, default="[]", server_default="[]")
