from typing import Dict

from faker import Faker

from app.db.repositories.blog_repository import BlogRepository
from app.domains.blogs.entities import Blog

fake = Faker()

SEED_COUNT = 10


def generate_blog_data() -> Dict[str, str]:
    return {
        "title": fake.sentence(nb_words=5),
        "author": fake.name(),
        "content": fake.paragraph(nb_sentences=4),
    }


async def load_blog(app, blog_id: str) -> Blog:
    """Чтение записи напрямую из хранилища в новой сессии"""
    async with app.state.database.session_factory() as db_session:
        return await BlogRepository(db_session).get_by_id(blog_id)


async def count_blogs(app) -> int:
    async with app.state.database.session_factory() as db_session:
        return await BlogRepository(db_session).count()
