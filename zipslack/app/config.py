"""Application configuration with environment variable support.

All settings can be overridden via environment variables prefixed with ``ZIPSLACK_``,
or via a ``.env`` file in the project root.

Examples::

    ZIPSLACK_PORT=9000 zipslack start
    ZIPSLACK_DATA_DIR=/var/data/zipslack zipslack start
    ZIPSLACK_LOG_LEVEL=DEBUG zipslack start
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root: zipslack/app/config.py -> project root
_BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """zipslack configuration; all values overridable via env vars."""

    model_config = SettingsConfigDict(
        env_prefix="ZIPSLACK_",
        env_file=str(_BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    frontend_port: int = 3000

    # Paths
    data_dir: Path = _BASE_DIR / "data"

    # Logging
    log_level: str = "INFO"

    # Prefix of the X-<app>-alert / X-<app>-error response headers
    app_name: str = "zipslackApp"

    # Create a default workspace and #general channel on an empty database
    seed_defaults: bool = True

    @property
    def db_path(self) -> Path:
        return self.data_dir / "zipslack.db"

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.db_path}"

    @property
    def frontend_url(self) -> str:
        return f"http://localhost:{self.frontend_port}"


# Singleton instance, import this everywhere
settings = Settings()

DATA_DIR = settings.data_dir
DATABASE_URL = settings.database_url
