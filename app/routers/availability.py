from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from app.crud import availability as crud
from app.dependencies import get_db
from app.enums.user_role import UserRole
from app.models.user import User
from app.schemas.availability import Availability, AvailabilityCreate, AvailabilitySlot
from app.services.auth import get_current_user

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/", response_model=Availability)
def create_availability(
    slot: AvailabilityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if current_user.role != UserRole.TUTOR:
        raise HTTPException(status_code=403, detail="Only tutors can publish availability")
    return crud.create_slot(db, current_user.id, slot)


@router.get("/", response_model=List[Availability])
def read_own_availability(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return crud.list_slots(db, current_user.id)


@router.get("/{tutor_id}", response_model=List[AvailabilitySlot])
def read_tutor_availability(tutor_id: int, db: Session = Depends(get_db)):
    """Horarios públicos de un tutor (para alumnos)"""
    return crud.list_slots(db, tutor_id)


@router.delete("/{slot_id}")
def delete_availability(
    slot_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    slot = crud.get_slot(db, slot_id)
    if not slot:
        raise HTTPException(status_code=404, detail="Slot not found")
    if slot.tutor_id != current_user.id:
        logger.warning(
            f"Usuario {current_user.id} intentó borrar el horario {slot_id} de {slot.tutor_id}"
        )
        raise HTTPException(status_code=403, detail="Not allowed")

    crud.delete_slot(db, slot)
    return {"message": "Deleted"}
