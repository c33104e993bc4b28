from app.models.user import User
from app.models.tutor_profile import TutorProfile
from app.models.availability import Availability
from app.models.recording import Recording
from app.models.booking import Booking
from app.models.payment import Payment
from app.models.review import Review

# This makes the models directory a Python package and ensures all models are loaded
