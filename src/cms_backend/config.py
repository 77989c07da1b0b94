# src/cms_backend/config.py
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",            # auto-load .env (optional; process env wins)
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    APP_NAME: str = "cms-backend"

    # Database (async SQLAlchemy URL)
    DATABASE_URL: str = "sqlite+aiosqlite:///./.cms_backend/cms_backend.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 10             # ignored for SQLite
    DB_MAX_OVERFLOW: int = 20          # ignored for SQLite
    DB_TIMEOUT: int = 30               # seconds
    DB_AUTO_CREATE: bool = True        # create tables on startup

    # Server-assigned timestamps
    TIMEZONE: str = "Asia/Shanghai"

    LOG_LEVEL: str = "INFO"

    # Bearer guard: True accepts any (or no) token, False requires "demo-token-*"
    AUTH_ALLOW_ANY_TOKEN: bool = True

    MENU_TREE_MAX_DEPTH: int = 64

    # Browser admin front end (JSON list in env, e.g. '["http://localhost:8080"]')
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True

    # `cms-backend serve`
    HOST: str = "0.0.0.0"
    PORT: int = 3000

settings = Settings()
