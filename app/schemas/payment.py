from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class OrderCreate(BaseModel):
    amount: Optional[float] = None


class FakeOrder(BaseModel):
    id: str
    amount: float
    currency: str = "INR"
    status: str = "created"


class PaymentVerify(BaseModel):
    tutor_id: int
    amount: float
    recording: Optional[int] = None
    email: Optional[str] = None
    type: Optional[str] = None


class Payment(BaseModel):
    id: int
    tutor_id: int
    student_id: int
    recording_id: Optional[int] = None
    amount: float
    email: Optional[str] = None
    order_id: str
    payment_id: str
    signature: str
    date: datetime
    created_at: datetime

    class Config:
        from_attributes = True


class FakePaymentRequest(BaseModel):
    recording_id: Optional[int] = None
    tutor_id: Optional[int] = None
    amount: Optional[float] = None
