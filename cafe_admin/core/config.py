"""
Application configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    # App
    PROJECT_NAME: str = "Cafe Admin"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    APP_NAME: str = "cafe-admin"

    # Database
    DATABASE_URL: str = "sqlite:///./cafe.db"

    # Security
    SECRET_KEY: str = "cafe-admin-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "cafe_session"
    SESSION_MAX_AGE_SECONDS: int = 24 * 60 * 60  # 24 hours

    # Bootstrap admin
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "change-me-now"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # File Upload
    MAX_UPLOAD_SIZE: int = 5242880  # 5MB
    UPLOAD_FOLDER: str = "uploads"
    ALLOWED_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif", "webp"]

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=True
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
