# path: config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_OWNER = "0x0A92DD7B30f0f57343AD99a151dBC37a3F3F95F3"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(x.strip() for x in raw.split(",") if x.strip())


def _env_prefix(name: str, default: str) -> str:
    # router paths include "", so the prefix can never be empty
    raw = os.getenv(name, default).strip().strip("/")
    return f"/{raw}" if raw else default


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./contacts.db"
    sql_echo: bool = False
    assets_dir: str = "assets"
    contact_owner: str = DEFAULT_OWNER
    public_base_url: str | None = None
    contacts_prefix: str = "/contacts"
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("http://localhost:3000",))
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            sql_echo=_env_bool("SQL_ECHO"),
            assets_dir=os.getenv("ASSETS_DIR", cls.assets_dir),
            contact_owner=os.getenv("CONTACT_OWNER", DEFAULT_OWNER),
            public_base_url=os.getenv("PUBLIC_BASE_URL") or None,
            contacts_prefix=_env_prefix("CONTACTS_PREFIX", cls.contacts_prefix),
            cors_origins=_env_list("CORS_ORIGINS", "http://localhost:3000"),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
