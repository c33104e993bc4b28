"""
Configuración compartida para tests pytest
"""
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.context import AppContext
from app.database import Base, Database
from app.dependencies import get_db
from app.enums.user_role import UserRole
from app.main import create_app
from app.services.auth import create_user_token

# Importar todos los modelos para que SQLAlchemy pueda resolver las relaciones
from app.models.user import User
from app.models.booking import Booking
from app.models.recording import Recording


# Base de datos en memoria para tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

database = Database(SQLALCHEMY_DATABASE_URL)


@pytest.fixture
def db():
    """Crear base de datos de test y limpiarla después"""
    Base.metadata.create_all(bind=database.engine)
    db = database.session()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=database.engine)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=SQLALCHEMY_DATABASE_URL,
        secret_key="test-secret",
        uploads_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def app(db, settings):
    """App con get_db apuntando a la sesión del test"""
    context = AppContext(settings, database=database)
    application = create_app(settings=settings, context=context)

    def _get_db():
        try:
            yield db
        finally:
            pass

    application.dependency_overrides[get_db] = _get_db
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers(settings):
    """Headers Authorization para un usuario dado"""

    def _headers(user):
        return {"Authorization": f"Bearer {create_user_token(user, settings)}"}

    return _headers


def _make_user(db, user_id, name, email, role):
    user = User(
        id=user_id,
        name=name,
        email=email,
        hashed_password="hashed",
        is_active=True,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def student(db):
    """Alumno que hace las reservas"""
    return _make_user(db, 1, "Student", "student@example.com", UserRole.STUDENT)


@pytest.fixture
def other_student(db):
    return _make_user(db, 2, "Other Student", "other@example.com", UserRole.STUDENT)


@pytest.fixture
def tutor(db):
    return _make_user(db, 3, "Tutor", "tutor@example.com", UserRole.TUTOR)


@pytest.fixture
def other_tutor(db):
    return _make_user(db, 4, "Other Tutor", "tutor2@example.com", UserRole.TUTOR)


@pytest.fixture
def admin(db):
    return _make_user(db, 5, "Admin", "admin@example.com", UserRole.ADMIN)


@pytest.fixture
def sample_booking(db, student, tutor):
    """Reserva recién creada: scheduled / scheduled / paid"""
    from app.services.booking_lifecycle import create_booking

    return create_booking(
        db,
        student_id=student.id,
        tutor_id=tutor.id,
        subject="Math",
        date="2024-01-01",
        time="10:00",
        amount=500,
    )


@pytest.fixture
def sample_recording(db, tutor):
    recording = Recording(
        id=1,
        tutor_id=tutor.id,
        original_file_name="lesson.mp4",
        file_path="/uploads/recordings/1-lesson.mp4",
        subject="Math",
        price=250,
    )
    db.add(recording)
    db.commit()
    db.refresh(recording)
    return recording
