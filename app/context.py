import logging
from typing import Optional

from app.config import Settings
from app.database import Database
from app.services.storage import RecordingStorage

logger = logging.getLogger(__name__)


class AppContext:
    """
    Estado compartido de la aplicación: configuración, base de datos y
    almacenamiento de grabaciones. Se construye una vez en ``create_app`` y
    los handlers lo reciben a través de dependencias.
    """

    def __init__(self, settings: Settings, database: Optional[Database] = None):
        self.settings = settings
        self.database = database or Database(settings.database_url)
        self.storage = RecordingStorage(
            settings.recordings_dir, max_bytes=settings.max_upload_bytes
        )

    def start(self) -> None:
        from app.init_db import create_initial_admin

        self.storage.ensure_dirs()
        self.database.create_all()

        db = self.database.session()
        try:
            create_initial_admin(db, self.settings)
        finally:
            db.close()
        logger.info("Application context started")

    def close(self) -> None:
        self.database.dispose()
        logger.info("Application context closed")
