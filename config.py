"""
Global Configuration for the Document Parser service
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME_TYPE = "application/msword"


class Settings(BaseSettings):
    """
    Global Base settings for the Document Parser API
    """
    # App Configuration
    APP_ENV: str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Client Hosts
    CORS_ORIGINS: List[str] = ["*"]

    # Scratch directories
    UPLOAD_DIR: Path = BASE_DIR / "uploads"
    TEMP_DIR: Path = BASE_DIR / "temp"

    # Upload constraints
    MAX_FILE_SIZE: int = 10 * 1024 * 1024        # 10 MB
    ALLOWED_MIME_TYPES: List[str] = [PDF_MIME_TYPE, DOCX_MIME_TYPE, DOC_MIME_TYPE]

    # Number of characters returned as preview
    PREVIEW_LENGTH: int = 200

    class Config:
        env_file = ".env"

settings = Settings()
