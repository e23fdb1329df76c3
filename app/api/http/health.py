from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.core.db import Database, get_database

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(database: Database = Depends(get_database)):
    """Проверка работоспособности сервиса и базы данных"""
    if await database.ping():
        return {"status": "ok", "database": "ok"}

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "degraded", "database": "unavailable"}
    )
