from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from app.crud import booking as booking_crud
from app.crud import recording as recording_crud
from app.dependencies import get_db
from app.models.user import User
from app.schemas.booking import Booking
from app.schemas.payment import FakePaymentRequest
from app.services import booking_lifecycle as lifecycle
from app.services.auth import get_current_user

router = APIRouter()


@router.post("/pay")
def pay(
    payment: FakePaymentRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Pago simulado para grabaciones y para sesiones con tutor.

    - Grabación: crea o actualiza la reserva pagada que da acceso al archivo.
    - Sesión: solo confirma; la reserva se crea en /api/bookings.
    """
    if payment.recording_id:
        recording = recording_crud.get_recording(db, payment.recording_id)
        if not recording:
            raise HTTPException(status_code=404, detail="Recording not found")

        booking = lifecycle.purchase_recording(
            db, current_user.id, recording, amount=payment.amount
        )
        return {"success": True, "booking": Booking.model_validate(booking)}

    if payment.tutor_id:
        return {"success": True, "message": "Tutor booking payment successful"}

    raise HTTPException(status_code=400, detail="No valid payment type")


@router.get("/paid", response_model=List[Booking])
def read_paid_recordings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    bookings = booking_crud.get_paid_recording_bookings(db, current_user.id)
    return [Booking.model_validate(b) for b in bookings]
