import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.http.blogs import router as blogs_router
from app.api.http.health import router as health_router
from app.core.config import Settings, settings as default_settings
from app.core.db import Database
from app.core.errors import StoreError
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def _field_name(loc) -> str:
    # Для невалидного JSON loc содержит смещение в теле запроса
    parts = [str(part) for part in loc if part != "body" and not isinstance(part, int)]
    return ".".join(parts) or "body"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации запроса отдаются как 400"""
    errors = []
    for error in exc.errors():
        field = _field_name(error.get("loc", ()))
        if error.get("type") == "missing":
            message = f"Missing `{field}` in request body"
        else:
            message = error.get("msg", "Invalid value")
        errors.append({"field": field, "message": message})

    detail = errors[0]["message"] if errors else "Invalid request"
    logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "errors": errors}
    )


async def store_exception_handler(request: Request, exc: StoreError):
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


def create_app(
    settings: Optional[Settings] = None,
    database_url: Optional[str] = None
) -> FastAPI:
    """Сборка приложения с явным подключением к базе данных"""
    settings = settings or default_settings
    configure_logging(settings.log_level)

    database = Database(database_url or settings.database_url, echo=settings.database_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.connect()
        try:
            yield
        finally:
            await database.disconnect()

    app = FastAPI(
        title=settings.app_title,
        description="CRUD API для записей блога",
        version=settings.app_version,
        lifespan=lifespan
    )
    app.state.database = database
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(blogs_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": settings.app_title,
            "version": settings.app_version,
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
