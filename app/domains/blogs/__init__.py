from app.domains.blogs.entities import Blog
from app.domains.blogs.ports import BlogStore
from app.domains.blogs.schemas import (
    BlogBase, BlogCreate, BlogUpdate, BlogResponse, BlogListResponse,
    ErrorDetail, ErrorResponse
)
from app.domains.blogs.services import BlogService

__all__ = [
    "Blog", "BlogStore",
    "BlogBase", "BlogCreate", "BlogUpdate", "BlogResponse", "BlogListResponse",
    "ErrorDetail", "ErrorResponse",
    "BlogService"
]
