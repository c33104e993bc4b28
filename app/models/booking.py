from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    Boolean,
    DateTime,
    ForeignKey,
    Enum,
)
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base
from app.enums.booking_status import BookingStatus, TutorStatus, PaymentStatus


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tutor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Fecha y hora se guardan tal cual llegan ("2024-01-01", "10:00")
    subject = Column(String, nullable=True)
    date = Column(String, nullable=True)
    time = Column(String, nullable=True)

    status = Column(
        Enum(BookingStatus), default=BookingStatus.SCHEDULED, nullable=False
    )
    tutor_status = Column(
        Enum(TutorStatus), default=TutorStatus.SCHEDULED, nullable=False
    )
    student_notified = Column(Boolean, default=False, nullable=False)

    amount = Column(Float, nullable=False)
    payment_status = Column(
        Enum(PaymentStatus), default=PaymentStatus.PAID, nullable=False
    )

    # Solo para compras de grabaciones
    recording_id = Column(Integer, ForeignKey("recordings.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    student = relationship("app.models.user.User", foreign_keys=[student_id])
    tutor = relationship("app.models.user.User", foreign_keys=[tutor_id])
    recording = relationship("app.models.recording.Recording")
