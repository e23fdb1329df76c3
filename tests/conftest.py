"""
Общие фикстуры: приложение на отдельной SQLite базе для каждого теста,
HTTP клиент и записи, заранее созданные через Faker.
"""
from typing import List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.db.repositories.blog_repository import BlogRepository
from app.domains.blogs.entities import Blog
from app.main import create_app
from tests.helpers import SEED_COUNT, generate_blog_data


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test-blog.db'}"


@pytest_asyncio.fixture
async def app(database_url):
    application = create_app(Settings(log_level="WARNING"), database_url=database_url)
    async with application.router.lifespan_context(application):
        yield application
        # Аналог удаления тестовой базы после каждого сценария
        await application.state.database.drop_all()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def session(app):
    async with app.state.database.session_factory() as db_session:
        yield db_session


@pytest.fixture
def repository(session) -> BlogRepository:
    return BlogRepository(session)


@pytest_asyncio.fixture
async def seeded(app) -> List[Blog]:
    async with app.state.database.session_factory() as db_session:
        repo = BlogRepository(db_session)
        return [await repo.create(**generate_blog_data()) for _ in range(SEED_COUNT)]
