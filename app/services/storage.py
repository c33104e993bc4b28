import logging
import os
import re
import time
from typing import BinaryIO, Tuple

from app.exceptions import ValidationError

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads/recordings"
CHUNK_SIZE = 1024 * 1024


def safe_file_name(original_name: str) -> str:
    """Espacios a "_" y se descarta todo lo que no sea letra, número, "." o "-" """
    name = re.sub(r"\s+", "_", original_name or "")
    return re.sub(r"[^\w.-]", "", name)


class RecordingStorage:
    """Guarda los archivos de grabaciones en disco y arma su URL pública."""

    def __init__(self, root: str, max_bytes: int):
        self.root = root
        self.max_bytes = max_bytes

    def ensure_dirs(self) -> None:
        if not os.path.isdir(self.root):
            os.makedirs(self.root, exist_ok=True)
            logger.info(f"Directorio de grabaciones creado: {self.root}")

    def save(self, source: BinaryIO, original_name: str) -> Tuple[str, str]:
        """
        Copia ``source`` al directorio de grabaciones.

        Returns:
            (nombre guardado, ruta pública "/uploads/recordings/<nombre>")
        """
        self.ensure_dirs()
        stored_name = f"{int(time.time() * 1000)}-{safe_file_name(original_name)}"
        destination = os.path.join(self.root, stored_name)

        written = 0
        try:
            with open(destination, "wb") as out:
                while True:
                    chunk = source.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise ValidationError("File too large")
                    out.write(chunk)
        except (ValidationError, OSError):
            # No queda ningún archivo a medias
            if os.path.exists(destination):
                os.remove(destination)
            raise

        logger.info(f"Grabación guardada: {stored_name} ({written} bytes)")
        return stored_name, f"{PUBLIC_PREFIX}/{stored_name}"

    def path_for(self, public_path: str) -> str:
        return os.path.join(self.root, os.path.basename(public_path))

    def delete(self, public_path: str) -> bool:
        location = self.path_for(public_path)
        if os.path.exists(location):
            os.remove(location)
            return True
        return False
