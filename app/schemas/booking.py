from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from app.enums.booking_status import BookingStatus, TutorStatus, PaymentStatus
from app.schemas.user import UserSummary


class BookingCreate(BaseModel):
    # Opcionales a propósito: la validación de campos requeridos la hace
    # el servicio de reservas para devolver un ValidationError uniforme.
    tutor_id: Optional[int] = None
    subject: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    amount: Optional[float] = None
    payment_status: Optional[PaymentStatus] = None


class BookingReschedule(BaseModel):
    date: Optional[str] = None
    time: Optional[str] = None


class BookingInDB(BaseModel):
    id: int
    student_id: int
    tutor_id: int
    subject: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    amount: float
    status: BookingStatus
    tutor_status: TutorStatus
    student_notified: bool
    payment_status: PaymentStatus
    recording_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class Booking(BookingInDB):
    student: Optional[UserSummary] = None
    tutor: Optional[UserSummary] = None


class BookingActionResponse(BaseModel):
    message: str
    booking: Optional[Booking] = None
