from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL
from typing import ClassVar

class Settings(BaseSettings):
    PROJECT_NAME: str = "Bookstore Catalog API"
    API_V1_STR: str = "/api/v1"

    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "bookstore_user"
    DB_PASSWORD: str = "your_strong_password"
    DB_NAME: str = "bookstore"

    # Full URL override, takes precedence over the DB_* parts
    DATABASE_URL: str | None = None

    # 25 open connections at most, 20 kept idle, recycled after 5 minutes
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_RECYCLE: int = 300

    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+psycopg",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)

@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
