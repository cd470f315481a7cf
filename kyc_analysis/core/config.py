"""Configuration settings for the KYC documents analysis service."""
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    These settings are loaded from environment variables with the following precedence:
    1. Environment variables
    2. .env file
    3. Default values

    Attributes:
        REKOGNITION_REGION: AWS region the Rekognition client is bound to
        FACE_ATTRIBUTES: Comma separated DetectFaces attributes ("DEFAULT" or "ALL")
        SIMILARITY_THRESHOLD: CompareFaces similarity threshold (0-100), service default when unset
        ENVIRONMENT: "development" for colored console logs and /docs, JSON logs otherwise
    """
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="",
    )

    # Core Settings
    PROJECT_NAME: str = "KYC Documents Analysis"
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "production"

    # CORS Settings
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> List[str]:
        """Get list of allowed origins."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # AWS Settings
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    AWS_SESSION_TOKEN: str = ""
    REKOGNITION_REGION: str = "us-east-1"

    # Face analysis settings
    FACE_ATTRIBUTES: str = "DEFAULT"
    SIMILARITY_THRESHOLD: Optional[float] = None

    @property
    def face_attributes(self) -> List[str]:
        """Get list of DetectFaces attributes."""
        return [attr.strip() for attr in self.FACE_ATTRIBUTES.split(",") if attr.strip()]

    # Optional settings with defaults
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

settings = Settings()
