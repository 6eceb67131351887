"""Configuration management for the Lending Library.

Settings are read from the environment (prefix ``LENDING_LIBRARY_``) or an
optional ``.env`` file, and validated with pydantic-settings.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LibraryConfig(BaseSettings):
    """Lending library configuration.

    Covers the loan policy used when a caller does not supply a due date,
    and the logging setup used by the demonstration driver.
    """

    model_config = SettingsConfigDict(
        # Use LENDING_LIBRARY_ prefix for all env vars
        env_prefix="LENDING_LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    library_name: str = Field(
        default="lending-library",
        description="Name shown in driver output",
        pattern=r"^[a-z0-9-]+$",
    )

    # === Loan Policy ===

    default_loan_days: int = Field(
        default=14,
        description="Loan period applied when no return date is given",
        ge=1,
        le=365,
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("library_name")
    @classmethod
    def validate_library_name(cls, v: str) -> str:
        """Keep the name short enough for one line of output."""
        if len(v) < 3:
            raise ValueError("Library name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Library name must not exceed 50 characters")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> str:
        """Logging level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: LibraryConfig | None = None


def get_config() -> LibraryConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = LibraryConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
