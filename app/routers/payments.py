from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from datetime import datetime
from typing import List
import logging
import time

from app.crud import payment as crud
from app.dependencies import get_db
from app.models.user import User
from app.schemas.payment import FakeOrder, OrderCreate, Payment, PaymentVerify
from app.services.auth import get_current_user

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/create-order", response_model=FakeOrder)
def create_order(order: OrderCreate):
    """Orden simulada; el monto va en la unidad mínima (paisa)"""
    if not order.amount:
        raise HTTPException(status_code=400, detail="Amount required")

    return FakeOrder(
        id=f"order_{int(time.time() * 1000)}",
        amount=order.amount * 100,
        currency="INR",
        status="created",
    )


@router.post("/verify")
def verify_payment(
    payment: PaymentVerify,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_payment = crud.create_payment(
        db,
        tutor_id=payment.tutor_id,
        student_id=current_user.id,
        amount=payment.amount,
        email=payment.email,
        # Un pago de sesión no referencia grabación
        recording_id=None if payment.type == "booking" else payment.recording,
        date=datetime.utcnow(),
        order_id="FAKE",
        payment_id="FAKE",
        signature="FAKE",
    )
    logger.info(
        f"Pago {db_payment.id} registrado: alumno {current_user.id}, tutor {payment.tutor_id}"
    )
    return {"success": True, "payment": Payment.model_validate(db_payment)}


@router.get("/tutor", response_model=List[Payment])
def read_tutor_payments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return crud.get_tutor_payments(db, current_user.id)


@router.get("/student", response_model=List[Payment])
def read_student_payments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return crud.get_student_payments(db, current_user.id)
