"""
Application configuration using Pydantic Settings
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="EmployeeService", description="Application name")
    app_env: str = Field(default="development", description="Environment")
    debug: bool = Field(default=False, description="Debug mode")
    api_prefix: str = Field(default="/api", description="Employee API prefix")
    bff_prefix: str = Field(default="/bff", description="BFF prefix")

    # Employee API (BFF upstream)
    employee_api_base_url: str = Field(
        default="http://localhost:5284/",
        description="Base URL the BFF forwards employee requests to",
    )
    employee_api_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for BFF calls to the Employee API",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text", pattern=r"^(text|json)$")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:4200", "http://localhost:3000"]
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            import json
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("employee_api_base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        # httpx joins relative paths onto the base URL's path
        return v if v.endswith("/") else f"{v}/"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


settings = get_settings()
