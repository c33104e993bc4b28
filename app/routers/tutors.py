from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from app.crud import tutor_profile as crud
from app.dependencies import get_db
from app.enums.user_role import UserRole
from app.models.user import User
from app.schemas.tutor_profile import TutorListing, TutorProfileInDB, TutorProfileUpdate
from app.services.auth import get_current_user

router = APIRouter()


@router.get("/", response_model=List[TutorListing])
def list_tutors(db: Session = Depends(get_db)):
    """
    Listado de tutores para el panel del alumno, con promedio de reseñas.
    """
    stats = crud.get_rating_stats(db)
    listings = []
    for profile in crud.get_profiles(db):
        avg_rating, reviews_count = stats.get(profile.user_id, (0.0, 0))
        listings.append(
            TutorListing(
                profile_id=profile.id,
                user_id=profile.user_id,
                name=profile.user.name if profile.user else None,
                email=profile.user.email if profile.user else None,
                headline=profile.headline or "",
                subjects=profile.subjects or [],
                hourly_rate=profile.hourly_rate or 0,
                experience_years=profile.experience_years or 0,
                languages=profile.languages or [],
                avg_rating=round(avg_rating, 2),
                reviews_count=reviews_count,
            )
        )
    return listings


@router.get("/profile/me")
def read_own_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    profile = crud.get_profile_by_user(db, current_user.id)
    if not profile:
        return {"profile": None, "is_profile_completed": False}
    return TutorProfileInDB.model_validate(profile)


@router.get("/profile-status")
def read_profile_status(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Si es el primer login del tutor el frontend muestra el formulario de perfil"""
    profile = crud.get_profile_by_user(db, current_user.id)
    return {"completed": bool(profile and profile.is_profile_completed)}


@router.put("/profile/update")
def update_own_profile(
    profile: TutorProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if current_user.role != UserRole.TUTOR:
        raise HTTPException(status_code=403, detail="Only tutors can edit a tutor profile")

    crud.upsert_profile(db, current_user.id, profile)
    return {"message": "Profile updated successfully!"}
