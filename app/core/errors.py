from typing import List, Optional


class BlogAPIError(Exception):
    """Базовое исключение приложения"""


class ValidationError(BlogAPIError):
    """Некорректные входные данные клиента"""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.fields = fields or []


class NotFoundError(BlogAPIError):
    """Запись с указанным id не найдена"""

    def __init__(self, blog_id: str):
        super().__init__(f"Blog {blog_id} not found")
        self.blog_id = blog_id


class StoreError(BlogAPIError):
    """Ошибка хранилища данных"""
