from sqlalchemy.orm import Session
from app.config import Settings
from app.enums.user_role import UserRole
from app.models.user import User
from app.services.auth import get_password_hash
import logging

logger = logging.getLogger(__name__)


def create_initial_admin(db: Session, settings: Settings):
    """
    Crea el usuario admin configurado (ADMIN_EMAIL / ADMIN_PASSWORD) si todavía
    no existe ningún admin.
    """
    if not settings.admin_email or not settings.admin_password:
        logger.info("ADMIN_EMAIL/ADMIN_PASSWORD no configurados, no se crea admin inicial.")
        return None

    if db.query(User).filter(User.role == UserRole.ADMIN).count() > 0:
        logger.info("Ya existe un admin, no se crea el admin inicial.")
        return None

    admin = User(
        name=settings.admin_name,
        email=settings.admin_email,
        hashed_password=get_password_hash(settings.admin_password),
        role=UserRole.ADMIN,
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Admin creado: {settings.admin_email}")
    return admin
