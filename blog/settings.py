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

    # Server
    BLOG_HOST: str = "127.0.0.1"
    BLOG_PORT: int = 3311

    # Content
    BLOG_CONTENT_PATH: Path = Path("./content")
    BLOG_POSTS_PER_PAGE: int = 10
    BLOG_ENABLE_DRAFTS: bool = False
    BLOG_SIMILAR_POSTS_LIMIT: int = 3

    # Seconds between background reloads, 0 reloads only on request/SIGHUP
    BLOG_RELOAD_INTERVAL: float = 0

    # Logging
    LOG_LEVEL: str = "INFO"

    # Admin API Key
    BLOG_API_KEY: str = ""

    @property
    def posts_path(self) -> Path:
        return self.BLOG_CONTENT_PATH / "posts"

    @property
    def images_path(self) -> Path:
        return self.BLOG_CONTENT_PATH / "images"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
