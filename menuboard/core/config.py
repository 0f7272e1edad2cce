import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Prefer .env.<ENV> if present, else default .env
env_file = f".env.{os.getenv('ENV', 'development')}"
load_dotenv(env_file) if os.path.exists(env_file) else load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./restaurant.db"
    sql_echo: bool = False

    admin_password: str = "changeme"  # 🔐 set ADMIN_PASSWORD in production
    jwt_secret: str = "menuboard-dev-secret"
    jwt_algorithm: str = "HS256"
    jwt_lifetime_seconds: int = 2 * 60 * 60
    session_secret: str = "menuboard-session-secret"

    upload_dir: str = str(PACKAGE_DIR / "static" / "uploads")
    max_upload_bytes: int = 10 * 1024 * 1024  # 10MB

    seed_default_sections: bool = True
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # DigitalOcean Spaces (S3 compatible); local disk is used unless all are set
    do_spaces_key: Optional[str] = None
    do_spaces_secret: Optional[str] = None
    do_spaces_region: str = "nyc3"
    do_spaces_bucket: Optional[str] = None
    do_spaces_endpoint: Optional[str] = None  # e.g. https://nyc3.digitaloceanspaces.com
    do_spaces_cdn_base: Optional[str] = None  # e.g. https://<bucket>.nyc3.cdn.digitaloceanspaces.com
    do_spaces_prefix: str = "prod"

    @property
    def async_database_url(self) -> str:
        """
        Normalizes hosted Postgres URLs (postgres://..., postgresql://...?sslmode=require)
        to the asyncpg driver. SQLite URLs are returned untouched.
        """
        url = self.database_url
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        if url.startswith("postgresql://"):
            url = "postgresql+asyncpg://" + url[len("postgresql://"):]
        if url.startswith("postgresql+asyncpg://"):
            # query params (sslmode etc.) are not understood by asyncpg
            url = url.split("?", 1)[0]
        return url

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")

    @property
    def spaces_enabled(self) -> bool:
        return all([
            self.do_spaces_key,
            self.do_spaces_secret,
            self.do_spaces_bucket,
            self.do_spaces_endpoint,
            self.do_spaces_cdn_base,
        ])


settings = Settings()
