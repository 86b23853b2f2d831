"""
Configuration Management for Personal Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Nothing else in the codebase reads environment variables directly.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Ledger and storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    customer_id: str = Field(
        default="JD123",
        min_length=1,
        description="Identifier of the account owner, stamped on audit events"
    )
    data_dir: Path = Field(
        default=Path(".data"),
        description="Directory relative file names are saved to and loaded from"
    )
    default_filename: str = Field(
        default="transactions.json",
        description="File name offered when the user does not type one"
    )
    date_format: str = Field(
        default="%Y-%m-%d",
        description="strptime format for dates typed by the user"
    )

    @field_validator("default_filename")
    @classmethod
    def validate_default_filename(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("default_filename must not be blank")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="ERROR",
        description="Level for the structured audit log on stderr"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Debug mode always logs everything."""
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def ledger(self) -> LedgerSettings:
        return LedgerSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<setting_name>_error" entry for each invalid group.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.ledger
        results["ledger"] = True
    except Exception as e:
        results["ledger"] = False
        results["ledger_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
