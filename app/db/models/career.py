from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base_class import Base

class CareerProfile(Base):
    __tablename__ = "career_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    # --- Professional Identity ---
    industry = Column(String(50), nullable=True)

    # --- Seniority ---
    # Free text as typed by the user ("Mid-Level", "Senior", "Staff")
    experience_level = Column(String, default="Mid-Level")

    updated_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="career_profile")


class EmploymentRecord(Base):
    """
    One past or current job of the user.
    A missing end_date means the job is ongoing.
    """
    __tablename__ = "employment_records"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    company = Column(String(100), nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)

    user = relationship("User", back_populates="employment_history")
