from sqlalchemy.orm import Session
from typing import List

from app.models.payment import Payment


def create_payment(db: Session, **fields) -> Payment:
    db_payment = Payment(**fields)
    db.add(db_payment)
    db.commit()
    db.refresh(db_payment)
    return db_payment


def get_tutor_payments(db: Session, tutor_id: int) -> List[Payment]:
    return db.query(Payment).filter(Payment.tutor_id == tutor_id).all()


def get_student_payments(db: Session, student_id: int) -> List[Payment]:
    return (
        db.query(Payment)
        .filter(Payment.student_id == student_id)
        .order_by(Payment.created_at.desc(), Payment.id.desc())
        .all()
    )
