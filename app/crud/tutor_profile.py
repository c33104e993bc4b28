from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Dict, List, Optional, Tuple

from app.models.review import Review
from app.models.tutor_profile import TutorProfile
from app.schemas.tutor_profile import TutorProfileUpdate


def get_profile_by_user(db: Session, user_id: int) -> Optional[TutorProfile]:
    return db.query(TutorProfile).filter(TutorProfile.user_id == user_id).first()


def get_profiles(db: Session) -> List[TutorProfile]:
    return db.query(TutorProfile).order_by(TutorProfile.id).all()


def upsert_profile(
    db: Session, user_id: int, profile_data: TutorProfileUpdate
) -> TutorProfile:
    """Crea el perfil si no existe o sobreescribe todos sus campos"""
    profile = get_profile_by_user(db, user_id)
    if not profile:
        profile = TutorProfile(user_id=user_id)
        db.add(profile)

    for field, value in profile_data.model_dump().items():
        setattr(profile, field, value)
    profile.is_profile_completed = True

    db.commit()
    db.refresh(profile)
    return profile


def get_rating_stats(db: Session) -> Dict[int, Tuple[float, int]]:
    """Promedio de rating y cantidad de reseñas por tutor"""
    rows = (
        db.query(Review.tutor_id, func.avg(Review.rating), func.count(Review.id))
        .group_by(Review.tutor_id)
        .all()
    )
    return {tutor_id: (float(avg or 0), count) for tutor_id, avg, count in rows}
