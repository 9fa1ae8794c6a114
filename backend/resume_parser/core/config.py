"""
Application configuration using Pydantic Settings
"""
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


DEV_CORS_ORIGIN = "http://localhost:5173"
PRODUCTION_CORS_ORIGIN = "https://resumecvforge.netlify.app"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Resume Parser"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    PORT: int = 3001

    # File Upload
    MAX_UPLOAD_SIZE_MB: int = 5

    # Parsing
    # Raw text beyond this many characters is ignored; 0 disables the cap
    MAX_PARSE_CHARS: int = Field(default=200_000, ge=0)

    # CORS (comma separated); falls back to the per-environment default
    CORS_ORIGINS: Optional[str] = None
    CORS_ALLOW_CREDENTIALS: bool = True

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def cors_origins_list(self) -> List[str]:
        """CORS origins as a list"""
        if self.CORS_ORIGINS:
            return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
        if self.ENVIRONMENT == "production":
            return [PRODUCTION_CORS_ORIGIN]
        return [DEV_CORS_ORIGIN]

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024


settings = Settings()
