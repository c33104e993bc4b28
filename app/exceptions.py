"""
Errores de dominio.

Cada error lleva un ``kind`` estable y el código HTTP con el que se expone;
``app.main`` los convierte en ``{"detail": ..., "kind": ...}``.
"""


class AppError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Faltan campos obligatorios o tienen valores inválidos"""

    kind = "validation_error"
    status_code = 400


class NotFoundError(AppError):
    kind = "not_found"
    status_code = 404


class ForbiddenError(AppError):
    """El usuario no es dueño del registro sobre el que opera"""

    kind = "forbidden"
    status_code = 403


class PersistenceError(AppError):
    """Fallo de la base de datos; el llamador decide si reintenta"""

    kind = "persistence_error"
    status_code = 500
