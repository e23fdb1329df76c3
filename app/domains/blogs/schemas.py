from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class BlogBase(BaseModel):
    """Базовая схема записи блога"""
    title: str
    author: str
    content: str = ""

    @field_validator('title', 'author')
    @classmethod
    def validate_not_blank(cls, v, info):
        if not v.strip():
            raise ValueError(f'{info.field_name.capitalize()} cannot be empty')
        return v


class BlogCreate(BlogBase):
    """Схема для создания записи; id назначает хранилище"""
    pass


class BlogUpdate(BaseModel):
    """Схема для частичного обновления записи"""
    id: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    content: Optional[str] = None

    @field_validator('title', 'author')
    @classmethod
    def validate_not_blank(cls, v, info):
        if v is None or not v.strip():
            raise ValueError(f'{info.field_name.capitalize()} cannot be empty')
        return v

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if v is None:
            raise ValueError('Content cannot be null')
        return v

    def changes(self) -> dict:
        """Только поля, явно переданные клиентом, без id"""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class BlogResponse(BaseModel):
    """Проекция записи блога"""
    id: str
    title: str
    author: str
    content: str

    model_config = ConfigDict(from_attributes=True)


class BlogListResponse(BaseModel):
    """Схема для списка записей"""
    blogs: List[BlogResponse]


class ErrorDetail(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    errors: List[ErrorDetail] = []
