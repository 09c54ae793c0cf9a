# backend/healthapp/config.py
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv
from fastapi import Request

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./healthapp.db"
DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    """
    Process configuration. Built once at startup and handed to create_app();
    request handlers read it from app.state through the get_settings dependency.
    """
    secret_key: str
    database_url: str = DEFAULT_DATABASE_URL
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        secret_key = os.getenv("SECRET_KEY", "").strip()
        if not secret_key:
            raise ConfigError("SECRET_KEY is not set. Add it to the environment or .env file.")

        database_url = (
            os.getenv("ASYNC_DATABASE_URL")
            or os.getenv("DATABASE_URL")
            or DEFAULT_DATABASE_URL
        )

        origins_raw = os.getenv("CORS_ORIGINS", "")
        cors_origins = [o.strip() for o in origins_raw.split(",") if o.strip()] or list(DEFAULT_CORS_ORIGINS)

        try:
            expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
        except ValueError as e:
            raise ConfigError("ACCESS_TOKEN_EXPIRE_MINUTES must be an integer") from e

        return cls(
            secret_key=secret_key,
            database_url=database_url,
            algorithm=os.getenv("ALGORITHM", "HS256"),
            access_token_expire_minutes=expire_minutes,
            cors_origins=cors_origins,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
