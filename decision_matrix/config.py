"""Application configuration with validation."""
from typing import List, Literal
from functools import lru_cache
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings. Scoring thresholds and weights are model constants, not settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Decision Matrix Simulator"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"
    CORS_ALLOW_ORIGINS: List[str] = Field(default=["*"])

    # Features
    ENABLE_TEAM_DASHBOARD: bool = Field(
        default=True,
        description="Mount the five-factor team dashboard routes",
    )

    @field_validator("API_V1_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("API_V1_PREFIX must start with '/'")
        if v.endswith("/"):
            raise ValueError("API_V1_PREFIX must not end with '/'")
        return v

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run with debug or open CORS."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if self.CORS_ALLOW_ORIGINS == ["*"]:
                raise ValueError("CORS_ALLOW_ORIGINS must list explicit origins in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
