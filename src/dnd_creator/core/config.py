"""Configuration management for the D&D 5E character rules engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from dnd_creator.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.point_buy_total
    27

Environment Variables:
    DND_CREATOR_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_CREATOR_JSON_LOGS: Emit JSON log lines instead of console output
    DND_CREATOR_RULES_MAX_CHARACTER_LEVEL: Highest level a draft may target (1-3)
    DND_CREATOR_RULES_POINT_BUY_TOTAL: Point-buy budget
    DND_CREATOR_RULES_ENFORCE_ABILITY_SCORE_METHOD: Check scores against their method
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_creator.core.constants import (
    MAX_SUPPORTED_LEVEL,
    MIN_CHARACTER_LEVEL,
    POINT_BUY_TOTAL,
)
from dnd_creator.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Configuration for rules evaluation.

    Attributes:
        ruleset: Identifier of the bundled ruleset.
        max_character_level: Highest level a draft may target.
        point_buy_total: Points available for point-buy ability scores.
        enforce_ability_score_method: When False, ability scores are only
            checked against the absolute 1-30 bounds.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_CREATOR_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ruleset: Literal["5e_srd"] = Field(
        default="5e_srd",
        description="Bundled ruleset identifier",
    )
    max_character_level: int = Field(
        default=MAX_SUPPORTED_LEVEL,
        ge=MIN_CHARACTER_LEVEL,
        description="Highest character level a draft may target",
    )
    point_buy_total: int = Field(
        default=POINT_BUY_TOTAL,
        ge=0,
        le=60,
        description="Point-buy budget",
    )
    enforce_ability_score_method: bool = Field(
        default=True,
        description="Validate scores against the chosen generation method",
    )

    @model_validator(mode="after")
    def validate_level_cap(self) -> "RulesSettings":
        """Ensure the level cap stays within the supported progression data.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If max_character_level exceeds the supported range.
        """
        if self.max_character_level > MAX_SUPPORTED_LEVEL:
            raise ConfigurationError(
                f"max_character_level ({self.max_character_level}) exceeds the "
                f"supported maximum ({MAX_SUPPORTED_LEVEL})",
                config_key="max_character_level",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        rules: Rules evaluation settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_CREATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D 5E Character Rules Engine",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON logs",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If required configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    This is primarily useful for testing or when environment variables
    have changed at runtime.
    """
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
