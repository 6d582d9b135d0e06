"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        RulesEngineError: Base exception for all engine errors.
        ConfigurationError: Configuration-related errors.
        CatalogError: Static catalog faults detected at build time.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
        install_quiet_defaults: Silence engine logs until configured.
"""

from __future__ import annotations

from dnd_creator.core.config import (
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_creator.core.exceptions import (
    CatalogError,
    CatalogInvariantError,
    ConfigurationError,
    DiceRollError,
    DuplicateIdError,
    FormulaError,
    RulesEngineError,
)
from dnd_creator.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
    install_quiet_defaults,
)


__all__ = [
    # Exceptions
    "RulesEngineError",
    "ConfigurationError",
    "CatalogError",
    "CatalogInvariantError",
    "DuplicateIdError",
    "FormulaError",
    "DiceRollError",
    # Configuration
    "Settings",
    "RulesSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "install_quiet_defaults",
    "get_logger",
    "bind_context",
    "clear_context",
]
