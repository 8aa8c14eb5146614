"""
Configuration settings for the Yojana Eligibility Backend
"""
from pathlib import Path
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "yojana_data.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # MongoDB Configuration
    mongodb_url: str = Field(default="mongodb://localhost:27017")
    mongodb_db_name: str = Field(default="yojana_db")

    # Scheme catalog
    catalog_path: Path = Field(default=DEFAULT_CATALOG_PATH)

    # Application Configuration
    app_name: str = Field(default="Yojana Eligibility Backend")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # API Configuration
    cors_origins: str = Field(default="*")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)

    # Security
    password_hash_rounds: int = Field(default=10, ge=4, le=31)

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()
