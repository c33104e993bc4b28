from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.exceptions import PersistenceError
from app.models.booking import Booking

logger = logging.getLogger(__name__)


def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    try:
        return db.query(Booking).filter(Booking.id == booking_id).first()
    except SQLAlchemyError as exc:
        logger.exception(f"Error leyendo la reserva {booking_id}")
        raise PersistenceError("Failed to load booking") from exc


def get_recording_booking(
    db: Session, student_id: int, recording_id: int
) -> Optional[Booking]:
    return (
        db.query(Booking)
        .filter(Booking.student_id == student_id, Booking.recording_id == recording_id)
        .first()
    )


def get_tutor_bookings(db: Session, tutor_id: int) -> List[Booking]:
    return (
        db.query(Booking)
        .filter(Booking.tutor_id == tutor_id)
        .order_by(Booking.date.desc(), Booking.time.asc())
        .all()
    )


def get_student_bookings(db: Session, student_id: int) -> List[Booking]:
    return (
        db.query(Booking)
        .filter(Booking.student_id == student_id)
        .order_by(Booking.date.desc(), Booking.time.asc())
        .all()
    )


def get_paid_recording_bookings(db: Session, student_id: int) -> List[Booking]:
    from app.enums.booking_status import PaymentStatus

    return (
        db.query(Booking)
        .filter(
            Booking.student_id == student_id,
            Booking.payment_status == PaymentStatus.PAID,
            Booking.recording_id.isnot(None),
        )
        .all()
    )


def save_booking(db: Session, booking: Booking) -> Booking:
    """
    Persiste una reserva nueva o modificada.

    Si la base de datos falla se hace rollback y se lanza PersistenceError,
    de modo que no queda ningún cambio a medias.
    """
    try:
        db.add(booking)
        db.commit()
        db.refresh(booking)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Error guardando la reserva {booking.id}")
        raise PersistenceError("Failed to save booking") from exc
    return booking
