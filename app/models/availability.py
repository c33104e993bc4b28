from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class Availability(Base):
    __tablename__ = "availability"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    tutor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    day = Column(String, nullable=False)  # "Monday"
    start_time = Column(String, nullable=False)  # "09:00"
    end_time = Column(String, nullable=False)  # "11:00"
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    tutor = relationship("User", back_populates="availability")
