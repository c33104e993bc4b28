from pydantic import BaseModel
from datetime import datetime


class AvailabilityBase(BaseModel):
    day: str
    start_time: str
    end_time: str


class AvailabilityCreate(AvailabilityBase):
    pass


class Availability(AvailabilityBase):
    id: int
    tutor_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class AvailabilitySlot(AvailabilityBase):
    """Vista pública de un horario, sin datos internos"""

    class Config:
        from_attributes = True
