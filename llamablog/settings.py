from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "src/data/blog"
    IMAGES_DIR: str = "src/assets/images"
    POSTS_PREFIX: str = "/posts"
    SITE_API_URL: str = "http://localhost:8000"

    # Show posts scheduled in the future (local preview)
    SHOW_SCHEDULED: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    SITE_API_KEY: str = ""

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def images_path(self) -> Path:
        return Path(self.IMAGES_DIR)

    @property
    def images_url(self) -> str:
        return f"{self.SITE_API_URL.rstrip('/')}/images"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
