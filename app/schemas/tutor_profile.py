from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional


class TutorProfileUpdate(BaseModel):
    headline: str = ""
    bio: str = ""
    subjects: List[str] = Field(default_factory=list)
    hourly_rate: float = 0
    languages: List[str] = Field(default_factory=list)
    experience_years: int = 0


class TutorProfileInDB(TutorProfileUpdate):
    id: int
    user_id: int
    is_profile_completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TutorListing(BaseModel):
    """Tarjeta de tutor en el listado para alumnos"""

    profile_id: int
    user_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    headline: str = ""
    subjects: List[str] = Field(default_factory=list)
    hourly_rate: float = 0
    experience_years: int = 0
    languages: List[str] = Field(default_factory=list)
    avg_rating: float = 0
    reviews_count: int = 0
