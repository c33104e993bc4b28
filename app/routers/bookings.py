from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.config import Settings
from app.crud import availability as availability_crud
from app.crud import booking as crud
from app.dependencies import get_db, get_settings
from app.models.user import User
from app.schemas.availability import AvailabilitySlot
from app.schemas.booking import (
    Booking,
    BookingActionResponse,
    BookingCreate,
    BookingReschedule,
)
from app.services import booking_lifecycle as lifecycle
from app.services.auth import get_current_user

router = APIRouter()


@router.post("/", response_model=Booking)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    # El alumno siempre reserva para sí mismo
    db_booking = lifecycle.create_booking(
        db,
        student_id=current_user.id,
        tutor_id=booking.tutor_id,
        subject=booking.subject,
        date=booking.date,
        time=booking.time,
        amount=booking.amount,
        payment_status=booking.payment_status,
    )
    return Booking.model_validate(db_booking)


@router.get("/tutor", response_model=List[Booking])
def read_tutor_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    bookings = crud.get_tutor_bookings(db, current_user.id)
    return [Booking.model_validate(b) for b in bookings]


@router.get("/student", response_model=List[Booking])
def read_student_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    bookings = crud.get_student_bookings(db, current_user.id)
    return [Booking.model_validate(b) for b in bookings]


@router.get("/availability/{tutor_id}", response_model=List[AvailabilitySlot])
def read_tutor_availability(tutor_id: int, db: Session = Depends(get_db)):
    return availability_crud.list_slots(db, tutor_id)


@router.patch("/accept/{booking_id}", response_model=BookingActionResponse)
def accept_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    lifecycle.accept_booking(
        db,
        booking_id,
        current_user.id,
        require_tutor_ownership=settings.require_tutor_ownership,
    )
    return BookingActionResponse(message="Booking accepted")


@router.patch("/decline/{booking_id}", response_model=BookingActionResponse)
def decline_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    lifecycle.decline_booking(
        db,
        booking_id,
        current_user.id,
        require_tutor_ownership=settings.require_tutor_ownership,
    )
    return BookingActionResponse(message="Booking declined")


@router.patch("/reschedule/{booking_id}", response_model=BookingActionResponse)
def reschedule_booking(
    booking_id: int,
    data: BookingReschedule,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_booking = lifecycle.reschedule_booking(
        db, booking_id, current_user.id, data.date, data.time
    )
    return BookingActionResponse(
        message="Booking rescheduled", booking=Booking.model_validate(db_booking)
    )


@router.patch("/tutor-reschedule/{booking_id}", response_model=BookingActionResponse)
def tutor_reschedule_booking(
    booking_id: int,
    data: BookingReschedule,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_booking = lifecycle.tutor_reschedule_booking(
        db, booking_id, current_user.id, data.date, data.time
    )
    return BookingActionResponse(
        message="Tutor rescheduled successfully",
        booking=Booking.model_validate(db_booking),
    )


@router.patch("/cancel/{booking_id}", response_model=BookingActionResponse)
def cancel_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_booking = lifecycle.cancel_booking(db, booking_id, current_user.id)
    return BookingActionResponse(
        message="Booking cancelled", booking=Booking.model_validate(db_booking)
    )
