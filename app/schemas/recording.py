from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from app.schemas.user import UserSummary


class RecordingInDB(BaseModel):
    id: int
    tutor_id: int
    original_file_name: str
    file_path: str
    description: Optional[str] = None
    subject: str
    price: float
    created_at: datetime

    class Config:
        from_attributes = True


class Recording(RecordingInDB):
    tutor: Optional[UserSummary] = None


class RecordingUploadResponse(BaseModel):
    message: str
    recording: RecordingInDB


class RecordingUrl(BaseModel):
    url: str
