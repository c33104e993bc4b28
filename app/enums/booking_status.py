from enum import Enum


class BookingStatus(str, Enum):
    """Compromiso de la sesión: si sigue en pie o no"""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TutorStatus(str, Enum):
    """Respuesta del tutor, independiente de BookingStatus"""

    SCHEDULED = "scheduled"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
