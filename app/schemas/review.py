from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional

from app.schemas.user import UserSummary


class ReviewCreate(BaseModel):
    tutor_id: Optional[int] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = None
    recording_id: Optional[int] = None


class RecordingName(BaseModel):
    id: int
    original_file_name: str

    class Config:
        from_attributes = True


class Review(BaseModel):
    id: int
    student_id: int
    tutor_id: int
    recording_id: Optional[int] = None
    rating: int
    comment: str
    reply: str = ""
    created_at: datetime
    student: Optional[UserSummary] = None
    recording: Optional[RecordingName] = None

    class Config:
        from_attributes = True


class ReviewList(BaseModel):
    reviews: List[Review]
