from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class TutorProfile(Base):
    __tablename__ = "tutor_profiles"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    headline = Column(String, default="")
    bio = Column(String, default="")

    # Listas de strings, p. ej. ["Math", "Physics"]
    subjects = Column(JSON, default=list)
    hourly_rate = Column(Float, default=0)
    languages = Column(JSON, default=list)
    experience_years = Column(Integer, default=0)

    is_profile_completed = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="tutor_profile")
