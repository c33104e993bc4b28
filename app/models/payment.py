from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class Payment(Base):
    __tablename__ = "payments"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    tutor_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    recording_id = Column(Integer, ForeignKey("recordings.id", ondelete="SET NULL"), nullable=True)
    amount = Column(Float, nullable=False)
    email = Column(String, nullable=True)  # solo histórico

    # Pagos simulados: siempre "FAKE"
    order_id = Column(String, default="FAKE")
    payment_id = Column(String, default="FAKE")
    signature = Column(String, default="FAKE")

    date = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    tutor = relationship("app.models.user.User", foreign_keys=[tutor_id])
    student = relationship("app.models.user.User", foreign_keys=[student_id])
    recording = relationship("app.models.recording.Recording")
