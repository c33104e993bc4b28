from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.availability import Availability
from app.schemas.availability import AvailabilityCreate


def create_slot(db: Session, tutor_id: int, slot: AvailabilityCreate) -> Availability:
    db_slot = Availability(tutor_id=tutor_id, **slot.model_dump())
    db.add(db_slot)
    db.commit()
    db.refresh(db_slot)
    return db_slot


def get_slot(db: Session, slot_id: int) -> Optional[Availability]:
    return db.query(Availability).filter(Availability.id == slot_id).first()


def list_slots(db: Session, tutor_id: int) -> List[Availability]:
    return (
        db.query(Availability)
        .filter(Availability.tutor_id == tutor_id)
        .order_by(Availability.id)
        .all()
    )


def delete_slot(db: Session, slot: Availability) -> None:
    db.delete(slot)
    db.commit()
