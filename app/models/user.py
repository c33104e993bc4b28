from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base
from app.enums.user_role import UserRole


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    is_active = Column(Boolean, default=True)

    contact = Column(String, default="")
    gender = Column(String, default="")
    occupation = Column(String, default="")

    role = Column(Enum(UserRole), default=UserRole.STUDENT, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    tutor_profile = relationship(
        "TutorProfile", back_populates="user", uselist=False
    )
    availability = relationship("Availability", back_populates="tutor")
    recordings = relationship("Recording", back_populates="tutor")
