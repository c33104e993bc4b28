from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.context import AppContext
from app.crud import recording as crud
from app.dependencies import get_context, get_db
from app.enums.user_role import UserRole
from app.exceptions import PersistenceError
from app.models.user import User
from app.schemas.recording import (
    Recording,
    RecordingInDB,
    RecordingUploadResponse,
    RecordingUrl,
)
from app.services.auth import get_current_user
from app.services.booking_lifecycle import has_paid_for_recording

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/", response_model=List[Recording])
def read_recordings(tutor_id: Optional[int] = None, db: Session = Depends(get_db)):
    recordings = crud.get_recordings(db, tutor_id=tutor_id)
    return [Recording.model_validate(r) for r in recordings]


@router.post("/upload", response_model=RecordingUploadResponse)
def upload_recording(
    recording: Optional[UploadFile] = File(None),
    subject: Optional[str] = Form(None),
    price: Optional[float] = Form(None),
    description: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    if current_user.role != UserRole.TUTOR:
        raise HTTPException(status_code=403, detail="Only tutors can upload recordings")
    if recording is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    if not subject or not price:
        raise HTTPException(status_code=400, detail="Subject & price required")

    _, public_path = context.storage.save(recording.file, recording.filename)

    try:
        db_recording = crud.create_recording(
            db,
            tutor_id=current_user.id,
            original_file_name=recording.filename,
            file_path=public_path,
            description=description,
            subject=subject,
            price=price,
        )
    except PersistenceError:
        context.storage.delete(public_path)
        raise
    logger.info(f"Grabación {db_recording.id} subida por el tutor {current_user.id}")
    return RecordingUploadResponse(
        message="Uploaded successfully",
        recording=RecordingInDB.model_validate(db_recording),
    )


@router.get("/tutor", response_model=List[RecordingInDB])
def read_own_recordings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return crud.get_recordings(db, tutor_id=current_user.id)


@router.get("/{recording_id}/url", response_model=RecordingUrl)
def read_recording_url(
    recording_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    URL del archivo. La ve el tutor dueño o un alumno que ya la compró.
    """
    db_recording = crud.get_recording(db, recording_id)
    if not db_recording:
        raise HTTPException(status_code=404, detail="Not found")

    if db_recording.tutor_id == current_user.id:
        return RecordingUrl(url=db_recording.file_path)

    if not has_paid_for_recording(db, current_user.id, recording_id):
        raise HTTPException(status_code=403, detail="Please purchase this recording")

    return RecordingUrl(url=db_recording.file_path)


@router.delete("/{recording_id}")
def delete_recording(
    recording_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    db_recording = crud.get_recording(db, recording_id)
    if not db_recording:
        raise HTTPException(status_code=404, detail="Not found")
    if db_recording.tutor_id != current_user.id:
        raise HTTPException(status_code=403, detail="Unauthorized")

    context.storage.delete(db_recording.file_path)
    crud.delete_recording(db, db_recording)
    logger.info(f"Grabación {recording_id} eliminada por el tutor {current_user.id}")
    return {"message": "Deleted"}
