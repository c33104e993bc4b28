from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.review import Review


def create_review(db: Session, **fields) -> Review:
    db_review = Review(**fields)
    db.add(db_review)
    db.commit()
    db.refresh(db_review)
    return db_review


def get_tutor_reviews(db: Session, tutor_id: int) -> List[Review]:
    return (
        db.query(Review)
        .filter(Review.tutor_id == tutor_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )


def get_student_recording_review(
    db: Session, student_id: int, recording_id: int
) -> Optional[Review]:
    return (
        db.query(Review)
        .filter(Review.student_id == student_id, Review.recording_id == recording_id)
        .first()
    )
