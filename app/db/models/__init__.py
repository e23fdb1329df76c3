from app.db.models.blog import Blog

__all__ = [
    "Blog",
]
