from app.api.http.health import router as health_router
from app.api.http.blogs import router as blogs_router

__all__ = [
    "health_router",
    "blogs_router"
]
