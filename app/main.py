from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import uvicorn

from app.config import Settings
from app.context import AppContext
from app.exceptions import AppError
from app.routers import (
    admin,
    auth,
    availability,
    bookings,
    fake_payment,
    payments,
    recordings,
    reviews,
    tutors,
)

logger = logging.getLogger("app")


def create_app(
    settings: Optional[Settings] = None, context: Optional[AppContext] = None
) -> FastAPI:
    settings = settings or Settings.from_env()
    context = context or AppContext(settings)

    # Configure base logging
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context.start()
        try:
            yield
        finally:
            context.close()

    app = FastAPI(
        title="Tutoring API",
        description="API for tutors, availability, session bookings, recordings, payments and reviews",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.context = context

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
    app.include_router(tutors.router, prefix="/api/tutors", tags=["tutors"])
    app.include_router(bookings.router, prefix="/api/bookings", tags=["bookings"])
    app.include_router(recordings.router, prefix="/api/recordings", tags=["recordings"])
    app.include_router(reviews.router, prefix="/api/reviews", tags=["reviews"])
    app.include_router(payments.router, prefix="/api/payments", tags=["payments"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
    app.include_router(
        fake_payment.router, prefix="/api/fake-payment", tags=["fake-payment"]
    )
    app.include_router(
        availability.router, prefix="/api/availability", tags=["availability"]
    )

    # Archivos subidos; el directorio se crea en el arranque
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.uploads_dir, check_dir=False),
        name="uploads",
    )

    @app.get("/")
    def read_root():
        return {"message": "Welcome to Tutoring API"}

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "kind": exc.kind},
        )

    # Global unhandled exception handler -> logs ERROR
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error | path=%s | method=%s | client=%s",
            request.url.path,
            request.method,
            request.client.host if request.client else "unknown",
        )
        return JSONResponse(
            status_code=500, content={"detail": "Internal Server Error"}
        )

    return app


if __name__ == "__main__":
    uvicorn.run("app.main:create_app", factory=True, host="0.0.0.0", port=5000, reload=True)
