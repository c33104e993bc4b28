from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.exceptions import PersistenceError
from app.models.booking import Booking
from app.models.payment import Payment
from app.models.recording import Recording
from app.models.review import Review

logger = logging.getLogger(__name__)


def create_recording(db: Session, **fields) -> Recording:
    db_recording = Recording(**fields)
    try:
        db.add(db_recording)
        db.commit()
        db.refresh(db_recording)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error guardando la grabación")
        raise PersistenceError("Failed to save recording") from exc
    return db_recording


def get_recording(db: Session, recording_id: int) -> Optional[Recording]:
    return db.query(Recording).filter(Recording.id == recording_id).first()


def get_recordings(db: Session, tutor_id: Optional[int] = None) -> List[Recording]:
    query = db.query(Recording)
    if tutor_id:
        query = query.filter(Recording.tutor_id == tutor_id)
    return query.order_by(Recording.id).all()


def delete_recording(db: Session, recording: Recording) -> None:
    """
    Borra la grabación y deja en NULL las reservas, pagos y reseñas que la
    referencian. SQLite no aplica ``ON DELETE SET NULL`` sin
    ``PRAGMA foreign_keys``.
    """
    for model in (Booking, Payment, Review):
        db.query(model).filter(model.recording_id == recording.id).update(
            {model.recording_id: None}, synchronize_session="fetch"
        )
    db.delete(recording)
    db.commit()
