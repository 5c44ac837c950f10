"""Application configuration management using Pydantic Settings."""

from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from eurostudy.models.merge_resolver import ResolverConfig
from eurostudy.models.metrics import MetricsConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application Environment
    app_env: str = Field(default="development", alias="APP_ENV")

    # Flask Configuration
    secret_key: str = Field(..., alias="SECRET_KEY")
    flask_env: str = Field(default="development", alias="FLASK_ENV")

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Estimate defaults
    default_country: str = Field(default="Austria", alias="DEFAULT_COUNTRY")
    default_currency: str = Field(default="EUR", alias="DEFAULT_CURRENCY")

    # Business thresholds (to be confirmed with the domain owner)
    reality_check_ratio: float = Field(default=1.2, gt=0, alias="REALITY_CHECK_RATIO")
    affordable_threshold: float = Field(
        default=90, ge=0, le=100, alias="AFFORDABLE_THRESHOLD"
    )
    moderate_threshold: float = Field(
        default=60, ge=0, le=100, alias="MODERATE_THRESHOLD"
    )
    feasibility_threshold: float = Field(
        default=85, ge=0, alias="FEASIBILITY_THRESHOLD"
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        """Ensure SECRET_KEY is provided and not a placeholder."""
        if not v or v == "your-secret-key-here-change-in-production":
            raise ValueError("SECRET_KEY must be set to a secure value")
        return v

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v):
        """Validate application environment."""
        allowed_envs = {"development", "testing", "production"}
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v):
        """Validate currency code shape."""
        if len(v) != 3 or not v.isalpha():
            raise ValueError("DEFAULT_CURRENCY must be a 3-letter currency code")
        return v.upper()

    @model_validator(mode="after")
    def validate_tier_thresholds(self):
        if self.moderate_threshold > self.affordable_threshold:
            raise ValueError(
                "MODERATE_THRESHOLD must not exceed AFFORDABLE_THRESHOLD"
            )
        return self

    def resolver_config(self) -> ResolverConfig:
        """Build the merge resolver configuration."""
        return ResolverConfig(reality_check_ratio=self.reality_check_ratio)

    def metrics_config(self) -> MetricsConfig:
        """Build the metrics calculator configuration."""
        return MetricsConfig(
            affordable_threshold=self.affordable_threshold,
            moderate_threshold=self.moderate_threshold,
            feasibility_threshold=self.feasibility_threshold,
        )


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Get application settings instance."""
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()


# Global settings instance - created on first use
_settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_global_settings() -> None:
    """Reset global settings instance (useful for testing)."""
    global _settings
    _settings = None
