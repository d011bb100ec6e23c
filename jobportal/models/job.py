from sqlalchemy import Column, String, Text, Float, Integer, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobportal.database import Base

JOB_STATUS_ACTIVE = "active"
JOB_STATUS_CLOSED = "closed"


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    job_type = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    salary_min = Column(Float)
    salary_max = Column(Float)
    salary_type = Column(String, default="Yearly")
    company = Column(String, nullable=False)
    location = Column(String)
    experience = Column(String)
    work_location = Column(String)
    application_deadline = Column(Date)
    skills = Column(Text)  # JSON array; legacy rows may hold a bare string
    company_size = Column(String)
    benefits = Column(Text)
    category = Column(String)
    requirements = Column(Text)
    apply_url = Column(String)
    posted_by = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    logo = Column(String)
    date_posted = Column(DateTime(timezone=True), server_default=func.now())
    status = Column(String, default=JOB_STATUS_ACTIVE, index=True)
    views = Column(Integer, default=0, nullable=False)

    applications = relationship("JobApplication", back_populates="job", cascade="all, delete-orphan", passive_deletes=True)
    saves = relationship("SavedJob", back_populates="job", cascade="all, delete-orphan", passive_deletes=True)
    reports = relationship("JobReport", back_populates="job", cascade="all, delete-orphan", passive_deletes=True)


class SavedJob(Base):
    __tablename__ = "saved_jobs"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    saved_at = Column(DateTime(timezone=True), server_default=func.now())

    job = relationship("Job", back_populates="saves")

    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_saved_jobs_user_job"),
    )


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String, default="Pending", nullable=False)
    applied_at = Column(DateTime(timezone=True), server_default=func.now())
    cover_letter = Column(Text)
    resume_link = Column(String)
    name = Column(String)
    phone = Column(String)
    email = Column(String)

    job = relationship("Job", back_populates="applications")

    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_job_applications_user_job"),
    )


class JobReport(Base):
    """Append-only; a user may report the same job more than once."""

    __tablename__ = "job_reports"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    reason = Column(String, nullable=False)
    details = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    job = relationship("Job", back_populates="reports")
