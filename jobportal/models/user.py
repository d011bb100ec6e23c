from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from jobportal.database import Base


class User(Base):
    """Candidate or employer account. Role is fixed at signup."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String(20), unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String(20), nullable=False, index=True)  # candidate | employer

    location = Column(String)
    linkedin = Column(String)
    github = Column(String)
    resume_link = Column(String)
    profile_pic = Column(String)
    skills = Column(Text)
    hobbies = Column(Text)
    availability = Column(String)
    preferred_job_type = Column(String)
    portfolio = Column(String)
    bio = Column(Text)

    # Employer-only attributes captured at signup
    company_name = Column(String)
    industry = Column(String)
    company_size = Column(String)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class UserEducation(Base):
    __tablename__ = "user_education"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String)
    institution = Column(String)
    year = Column(String)


class UserExperience(Base):
    __tablename__ = "user_experience"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String)
    institution = Column(String)
    year = Column(String)


class UserCertification(Base):
    __tablename__ = "user_certifications"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String)
    institution = Column(String)
    year = Column(String)


class UserLanguage(Base):
    __tablename__ = "user_languages"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String, nullable=False)
