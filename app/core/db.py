import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Базовый класс для моделей
Base = declarative_base()


class Database:
    """Подключение к базе данных: движок и фабрика сессий"""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        """Создание движка и таблиц"""
        if self.is_connected:
            return

        # Импорт регистрирует модели в Base.metadata
        import app.db.models  # noqa: F401

        self.engine = create_async_engine(self.url, future=True, echo=self.echo)
        self.session_factory = async_sessionmaker(
            bind=self.engine, class_=AsyncSession, expire_on_commit=False
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info(f"Connected to database {self.engine.url.render_as_string(hide_password=True)}")

    async def disconnect(self) -> None:
        """Закрытие всех соединений"""
        if not self.is_connected:
            return

        await self.engine.dispose()
        logger.info("Database connection closed")
        self.engine = None
        self.session_factory = None

    async def ping(self) -> bool:
        """Проверка доступности базы данных"""
        if not self.is_connected:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            return False

    async def drop_all(self) -> None:
        """Удаление всех таблиц"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def session(self) -> AsyncIterator[AsyncSession]:
        if not self.is_connected:
            raise RuntimeError("Database is not connected")
        async with self.session_factory() as session:
            yield session


def get_database(request: Request) -> Database:
    return request.app.state.database


# Функция для dependency injection в FastAPI
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    async for session in get_database(request).session():
        yield session
