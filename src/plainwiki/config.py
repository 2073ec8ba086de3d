"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    debug: bool = False
    app_title: str = "PlainWiki"
    host: str = "0.0.0.0"
    port: int = 8080
    idle_timeout: int = 120
    expose_errors: bool = True

    model_config = SettingsConfigDict(
        env_prefix="PLAINWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )


settings = Settings()
