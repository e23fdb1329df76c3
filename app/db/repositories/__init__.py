from app.db.repositories.blog_repository import BlogRepository

__all__ = [
    "BlogRepository",
]
