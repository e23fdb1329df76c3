import logging
from typing import List

from app.core.errors import NotFoundError, ValidationError
from app.domains.blogs.entities import Blog
from app.domains.blogs.ports import BlogStore
from app.domains.blogs.schemas import BlogCreate, BlogUpdate

logger = logging.getLogger(__name__)


class BlogService:
    """Сервис для работы с записями блога"""

    def __init__(self, store: BlogStore):
        self.store = store

    async def list_blogs(self) -> List[Blog]:
        """Получение всех записей"""
        return await self.store.list_all()

    async def get_blog(self, blog_id: str) -> Blog:
        """Получение записи по id"""
        try:
            return await self.store.get_by_id(blog_id)
        except NotFoundError:
            logger.warning(f"Blog {blog_id} not found")
            raise

    async def create_blog(self, blog_data: BlogCreate) -> Blog:
        """Создание новой записи"""
        blog = await self.store.create(
            title=blog_data.title,
            author=blog_data.author,
            content=blog_data.content
        )
        logger.info(f"Created blog {blog.id}")
        return blog

    async def update_blog(self, blog_id: str, update_data: BlogUpdate) -> Blog:
        """Обновление записи; id в теле должен совпадать с id в пути"""
        if update_data.id is not None and update_data.id != blog_id:
            message = (
                f"Request path id ({blog_id}) and request body id "
                f"({update_data.id}) must match"
            )
            logger.warning(message)
            raise ValidationError(message, fields=["id"])

        changes = update_data.changes()
        try:
            blog = await self.store.update_by_id(blog_id, changes)
        except NotFoundError:
            logger.warning(f"Cannot update missing blog {blog_id}")
            raise

        logger.info(f"Updated blog {blog_id} fields: {sorted(changes)}")
        return blog

    async def delete_blog(self, blog_id: str) -> None:
        """Удаление записи"""
        try:
            await self.store.delete_by_id(blog_id)
        except NotFoundError:
            logger.warning(f"Cannot delete missing blog {blog_id}")
            raise

        logger.info(f"Deleted blog {blog_id}")
