from abc import ABC, abstractmethod
from typing import Any, Dict, List

from app.domains.blogs.entities import Blog


class BlogStore(ABC):
    """Хранилище записей блога.

    Любая реализация обязана выдавать уникальный id при создании и
    обновлять только переданные поля. Отсутствующая запись приводит к
    NotFoundError, сбой хранилища к StoreError.
    """

    @abstractmethod
    async def list_all(self) -> List[Blog]:
        pass

    @abstractmethod
    async def get_by_id(self, blog_id: str) -> Blog:
        pass

    @abstractmethod
    async def create(self, title: str, author: str, content: str = "") -> Blog:
        pass

    @abstractmethod
    async def update_by_id(self, blog_id: str, fields: Dict[str, Any]) -> Blog:
        pass

    @abstractmethod
    async def delete_by_id(self, blog_id: str) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
