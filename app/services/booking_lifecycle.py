"""
Ciclo de vida de una reserva.

Una reserva tiene dos ejes independientes: ``status`` (si la sesión sigue en
pie) y ``tutor_status`` (qué respondió el tutor). Cada operación sobreescribe
campos sin mirar el estado actual: aceptar una reserva ya cancelada, por
ejemplo, no se rechaza.
"""
from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.crud import booking as booking_crud
from app.crud import user as user_crud
from app.enums.booking_status import BookingStatus, TutorStatus, PaymentStatus
from app.enums.user_role import UserRole
from app.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.models.booking import Booking
from app.models.recording import Recording

logger = logging.getLogger(__name__)


def _reference_id(reference):
    """Id de una referencia, sea un id crudo o un objeto ya cargado"""
    return getattr(reference, "id", reference)


def _is_same_user(reference, caller_id) -> bool:
    return str(_reference_id(reference)) == str(caller_id)


def _load(db: Session, booking_id: int) -> Booking:
    booking = booking_crud.get_booking(db, booking_id)
    if not booking:
        raise NotFoundError("Booking not found")
    return booking


def _check_tutor(booking: Booking, caller_id: int, action: str) -> None:
    # La relación ``tutor`` puede estar cargada o no; se acepta cualquiera
    reference = booking.tutor if booking.tutor is not None else booking.tutor_id
    if not _is_same_user(reference, caller_id):
        logger.warning(
            f"Usuario {caller_id} intentó {action} la reserva {booking.id} "
            f"del tutor {booking.tutor_id}"
        )
        raise ForbiddenError("Not allowed")


def _check_student(booking: Booking, caller_id: int, action: str) -> None:
    if not _is_same_user(booking.student_id, caller_id):
        logger.warning(
            f"Usuario {caller_id} intentó {action} la reserva {booking.id} "
            f"del alumno {booking.student_id}"
        )
        raise ForbiddenError("Not allowed")


def create_booking(
    db: Session,
    student_id: int,
    tutor_id: Optional[int],
    subject: Optional[str],
    date: Optional[str],
    time: Optional[str],
    amount: Optional[float],
    payment_status: Optional[PaymentStatus] = None,
) -> Booking:
    """
    Crea una solicitud de sesión del alumno ``student_id`` con un tutor.

    Args:
        db: Sesión de base de datos
        student_id: ID del alumno autenticado
        tutor_id: ID del usuario tutor
        subject, date, time: Texto libre, no se interpreta como fecha
        amount: Monto de la sesión, obligatorio (puede ser 0)
        payment_status: Por defecto "paid"

    Returns:
        Booking: La reserva creada, con ``student`` y ``tutor`` disponibles
    """
    if not tutor_id or not subject or not date or not time or amount is None:
        raise ValidationError("Missing required fields")
    if amount < 0:
        raise ValidationError("Amount must not be negative")

    tutor = user_crud.get_user(db, tutor_id)
    if not tutor or tutor.role != UserRole.TUTOR:
        raise NotFoundError("Tutor not found")

    booking = Booking(
        student_id=student_id,
        tutor_id=tutor_id,
        subject=subject,
        date=date,
        time=time,
        amount=amount,
        payment_status=payment_status or PaymentStatus.PAID,
        status=BookingStatus.SCHEDULED,
        tutor_status=TutorStatus.SCHEDULED,
        student_notified=False,
    )
    booking = booking_crud.save_booking(db, booking)
    logger.info(
        f"Reserva {booking.id} creada: alumno {student_id}, tutor {tutor_id}, "
        f"{date} {time}"
    )
    return booking


def accept_booking(
    db: Session, booking_id: int, caller_id: int, require_tutor_ownership: bool = False
) -> Booking:
    booking = _load(db, booking_id)
    if require_tutor_ownership:
        _check_tutor(booking, caller_id, "aceptar")

    booking.tutor_status = TutorStatus.ACCEPTED
    booking.status = BookingStatus.SCHEDULED
    booking.student_notified = False

    booking = booking_crud.save_booking(db, booking)
    logger.info(f"Reserva {booking_id} aceptada por {caller_id}")
    return booking


def decline_booking(
    db: Session, booking_id: int, caller_id: int, require_tutor_ownership: bool = False
) -> Booking:
    booking = _load(db, booking_id)
    if require_tutor_ownership:
        _check_tutor(booking, caller_id, "rechazar")

    # ``status`` no se toca: la sesión sigue "scheduled" aunque el tutor la rechace
    booking.tutor_status = TutorStatus.DECLINED
    booking.student_notified = False

    booking = booking_crud.save_booking(db, booking)
    logger.info(f"Reserva {booking_id} rechazada por {caller_id}")
    return booking


def reschedule_booking(
    db: Session,
    booking_id: int,
    caller_id: int,
    date: Optional[str],
    time: Optional[str],
) -> Booking:
    """Reprogramación pedida por el alumno; vuelve a esperar respuesta del tutor"""
    if not date or not time:
        raise ValidationError("Date & time required")

    booking = _load(db, booking_id)
    _check_student(booking, caller_id, "reprogramar")

    booking.date = date
    booking.time = time
    booking.status = BookingStatus.SCHEDULED
    booking.tutor_status = TutorStatus.SCHEDULED
    booking.student_notified = False

    booking = booking_crud.save_booking(db, booking)
    logger.info(f"Reserva {booking_id} reprogramada por el alumno a {date} {time}")
    return booking


def tutor_reschedule_booking(
    db: Session,
    booking_id: int,
    caller_id: int,
    date: Optional[str],
    time: Optional[str],
) -> Booking:
    """Reprogramación hecha por el tutor; ``tutor_status`` se mantiene"""
    booking = _load(db, booking_id)
    _check_tutor(booking, caller_id, "reprogramar")

    if not date or not time:
        raise ValidationError("Date & time required")

    booking.date = date
    booking.time = time
    booking.status = BookingStatus.SCHEDULED
    booking.student_notified = False

    booking = booking_crud.save_booking(db, booking)
    logger.info(f"Reserva {booking_id} reprogramada por el tutor a {date} {time}")
    return booking


def cancel_booking(db: Session, booking_id: int, caller_id: int) -> Booking:
    booking = _load(db, booking_id)
    _check_student(booking, caller_id, "cancelar")

    booking.status = BookingStatus.CANCELLED
    booking.tutor_status = TutorStatus.DECLINED
    booking.student_notified = False

    booking = booking_crud.save_booking(db, booking)
    logger.info(f"Reserva {booking_id} cancelada por el alumno {caller_id}")
    return booking


def purchase_recording(
    db: Session, student_id: int, recording: Recording, amount: Optional[float] = None
) -> Booking:
    """
    Registra la compra de una grabación como una reserva pagada.

    Hay a lo sumo una reserva por (alumno, grabación): si ya existe se
    actualiza en lugar de crear otra.
    """
    if amount is None:
        amount = recording.price

    booking = booking_crud.get_recording_booking(db, student_id, recording.id)
    if not booking:
        booking = Booking(
            student_id=student_id,
            recording_id=recording.id,
            subject=recording.subject,
            status=BookingStatus.SCHEDULED,
            tutor_status=TutorStatus.SCHEDULED,
            student_notified=False,
        )

    booking.tutor_id = recording.tutor_id
    booking.amount = amount
    booking.payment_status = PaymentStatus.PAID

    booking = booking_crud.save_booking(db, booking)
    logger.info(
        f"Grabación {recording.id} comprada por el alumno {student_id} (reserva {booking.id})"
    )
    return booking


def has_paid_for_recording(db: Session, student_id: int, recording_id: int) -> bool:
    booking = booking_crud.get_recording_booking(db, student_id, recording_id)
    return booking is not None and booking.payment_status == PaymentStatus.PAID
