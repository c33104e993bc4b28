from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from app.crud import review as crud
from app.crud import user as user_crud
from app.dependencies import get_db
from app.enums.user_role import UserRole
from app.models.user import User
from app.schemas.review import Review, ReviewCreate, ReviewList
from app.services.auth import get_current_user

router = APIRouter()


@router.post("/", response_model=Review)
def create_review(
    review: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Reseña de un tutor o de una de sus grabaciones.
    """
    if not review.tutor_id or not review.rating or not review.comment:
        raise HTTPException(status_code=400, detail="Missing required fields")

    tutor = user_crud.get_user(db, review.tutor_id)
    if not tutor or tutor.role != UserRole.TUTOR:
        raise HTTPException(status_code=404, detail="Tutor not found")

    db_review = crud.create_review(
        db,
        student_id=current_user.id,
        tutor_id=review.tutor_id,
        rating=review.rating,
        comment=review.comment,
        recording_id=review.recording_id,
    )
    return Review.model_validate(db_review)


@router.get("/tutor/me", response_model=List[Review])
def read_own_reviews(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return [Review.model_validate(r) for r in crud.get_tutor_reviews(db, current_user.id)]


@router.get("/check")
def check_recording_review(
    recording_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """¿El alumno ya reseñó esta grabación?"""
    if not recording_id:
        return {"reviewed": False}

    existing = crud.get_student_recording_review(db, current_user.id, recording_id)
    return {"reviewed": existing is not None}


@router.get("/tutor/{tutor_id}", response_model=ReviewList)
def read_tutor_reviews(tutor_id: int, db: Session = Depends(get_db)):
    reviews = crud.get_tutor_reviews(db, tutor_id)
    return ReviewList(reviews=[Review.model_validate(r) for r in reviews])
