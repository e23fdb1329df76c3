import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional


UPDATABLE_FIELDS = ("title", "author", "content")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Blog:
    """Сущность записи блога"""

    def __init__(
        self,
        id: str,
        title: str,
        author: str,
        content: str = "",
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.author = author
        self.content = content
        self.created_at = created_at or _utcnow()
        self.updated_at = updated_at or _utcnow()

    def apply_update(self, fields: Dict[str, Any]) -> None:
        """Частичное обновление: меняются только переданные поля, id неизменен"""
        for name in UPDATABLE_FIELDS:
            if name in fields:
                setattr(self, name, fields[name])
        self.updated_at = _utcnow()

    def serialize(self) -> Dict[str, str]:
        """Проекция для ответа API"""
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "content": self.content,
        }

    @classmethod
    def create_blog(cls, title: str, author: str, content: str = "") -> "Blog":
        """Создание новой записи со свежим id"""
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            author=author,
            content=content
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Blog):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Blog(id={self.id}, title={self.title}, author={self.author})"
