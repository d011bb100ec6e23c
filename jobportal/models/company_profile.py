from sqlalchemy import Column, String, Text, Float, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func

from jobportal.database import Base


class CompanyProfile(Base):
    """Public company page. Keyed by the owning employer's user id."""

    __tablename__ = "company_profiles"

    id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    company_name = Column(String, nullable=False)
    logo = Column(String)
    about = Column(Text)
    industry = Column(String)
    headquarters = Column(String)
    company_size = Column(String)
    founded = Column(String)
    website = Column(String)
    rating = Column(Float)
    reviews_count = Column(Integer, default=0)
    jobs = Column(Text, default="[]")  # JSON list
    reviews = Column(Text, default="[]")  # JSON list
    email = Column(String)
    contact_name = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
