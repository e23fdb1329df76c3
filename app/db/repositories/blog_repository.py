import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, StoreError
from app.db.models.blog import Blog as BlogModel
from app.domains.blogs.entities import UPDATABLE_FIELDS, Blog
from app.domains.blogs.ports import BlogStore

logger = logging.getLogger(__name__)


class BlogRepository(BlogStore):
    """Репозиторий для работы с записями блога"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _guard(self, action: str):
        """Откат транзакции и перевод ошибок SQLAlchemy в StoreError"""
        try:
            yield
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Store failure during {action}: {e}")
            raise StoreError(f"Failed to {action}") from e

    async def list_all(self) -> List[Blog]:
        """Получение всех записей"""
        async with self._guard("list blogs"):
            result = await self.session.execute(
                select(BlogModel)
                .order_by(BlogModel.created_at)
                .execution_options(populate_existing=True)
            )
            return [self._to_domain(row) for row in result.scalars().all()]

    async def get_by_id(self, blog_id: str) -> Blog:
        """Получение записи по id"""
        async with self._guard("load blog"):
            result = await self.session.execute(
                select(BlogModel)
                .where(BlogModel.id == blog_id)
                .execution_options(populate_existing=True)
            )
            db_blog = result.scalar_one_or_none()
        if db_blog is None:
            raise NotFoundError(blog_id)
        return self._to_domain(db_blog)

    async def create(self, title: str, author: str, content: str = "") -> Blog:
        """Создание новой записи"""
        blog = Blog.create_blog(title=title, author=author, content=content)
        db_blog = BlogModel(
            id=blog.id,
            title=blog.title,
            author=blog.author,
            content=blog.content
        )

        async with self._guard("create blog"):
            self.session.add(db_blog)
            await self.session.commit()
            await self.session.refresh(db_blog)
        return self._to_domain(db_blog)

    async def update_by_id(self, blog_id: str, fields: Dict[str, Any]) -> Blog:
        """Частичное обновление записи"""
        values = {name: fields[name] for name in UPDATABLE_FIELDS if name in fields}

        async with self._guard("update blog"):
            result = await self.session.execute(
                update(BlogModel)
                .where(BlogModel.id == blog_id)
                .values(updated_at=func.now(), **values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await self.session.rollback()
                raise NotFoundError(blog_id)
            await self.session.commit()

        return await self.get_by_id(blog_id)

    async def delete_by_id(self, blog_id: str) -> None:
        """Удаление записи"""
        async with self._guard("delete blog"):
            result = await self.session.execute(
                delete(BlogModel)
                .where(BlogModel.id == blog_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await self.session.rollback()
                raise NotFoundError(blog_id)
            await self.session.commit()

    async def count(self) -> int:
        """Подсчет количества записей"""
        async with self._guard("count blogs"):
            result = await self.session.execute(select(func.count(BlogModel.id)))
            return result.scalar()

    def _to_domain(self, db_blog: BlogModel) -> Blog:
        """Преобразование модели БД в доменную сущность"""
        return Blog(
            id=db_blog.id,
            title=db_blog.title,
            author=db_blog.author,
            content=db_blog.content,
            created_at=db_blog.created_at,
            updated_at=db_blog.updated_at
        )
