from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Blog API"
    app_version: str = "1.0.0"

    database_url: str = "sqlite+aiosqlite:///./blog.db"
    database_echo: bool = False

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # В продакшене указать конкретные домены
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
