"""Application configuration with validation."""
from typing import Optional, Literal
from functools import lru_cache
from pydantic import AliasChoices, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Relay and dashboard settings, read from the environment or .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "NegocIA Analysis Relay"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Identity service (Supabase auth)
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[SecretStr] = None
    AUTH_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0, le=120)

    # AI gateway (OpenAI-compatible chat completions)
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_GATEWAY_API_KEY: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("AI_GATEWAY_API_KEY", "LOVABLE_API_KEY"),
        description="Bearer key for the chat-completion gateway",
    )
    AI_MODEL: str = "google/gemini-2.5-flash"
    AI_TIMEOUT_SECONDS: float = Field(default=120.0, gt=0, le=600)

    # Analysis
    SAMPLE_ROWS: int = Field(default=10, ge=1, le=100)
    MAX_UPLOAD_MB: int = Field(default=10, ge=1, le=100)

    # Dashboard
    RELAY_URL: str = "http://localhost:8000/functions/v1/analyze-business-data"
    RELAY_TIMEOUT_SECONDS: float = Field(default=180.0, gt=0, le=900)

    @field_validator("SUPABASE_URL", "AI_GATEWAY_URL")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return v.rstrip("/") if v else v

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Production needs both external collaborators configured."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if not self.SUPABASE_URL or not self.SUPABASE_ANON_KEY:
                raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY required in production")
            if not self.AI_GATEWAY_API_KEY:
                raise ValueError("AI gateway API key required in production")
        return self

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_MB * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    return Settings()
