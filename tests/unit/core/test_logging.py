"""Tests for structured logging helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import structlog

from dnd_creator.core.logging import (
    APP_NAME,
    add_app_context,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    install_quiet_defaults,
)


if TYPE_CHECKING:
    from collections.abc import Generator

    from dnd_creator.engine import RulesEngine
    from dnd_creator.models import CharacterDraft


@pytest.fixture(autouse=True)
def restore_quiet_logging() -> Generator[None, None, None]:
    """Return structlog to the library defaults after each test."""
    yield
    structlog.reset_defaults()
    install_quiet_defaults()


class TestAddAppContext:
    """Tests for the app context processor."""

    def test_adds_app_name(self) -> None:
        """Test the processor stamps the application name."""
        event = add_app_context(None, "info", {"event": "Catalog built"})

        assert event["app"] == APP_NAME
        assert event["event"] == "Catalog built"


class TestQuietDefaults:
    """Tests for the silent-until-configured default."""

    def test_filters_below_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test debug and info events are dropped before configuration."""
        structlog.reset_defaults()
        assert install_quiet_defaults() is True

        logger = get_logger("tests")
        logger.debug("hidden debug")
        logger.info("hidden info")
        logger.warning("shown warning")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown warning" in out

    def test_keeps_host_configuration(self) -> None:
        """Test an existing structlog configuration is left alone."""
        wrapper = structlog.make_filtering_bound_logger(logging.DEBUG)
        structlog.reset_defaults()
        structlog.configure(wrapper_class=wrapper)

        assert install_quiet_defaults() is False
        assert structlog.get_config()["wrapper_class"] is wrapper

    def test_engine_calls_print_nothing(
        self,
        rules_engine: RulesEngine,
        cleric_draft: CharacterDraft,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test validation and spellcasting stay silent without host setup."""
        structlog.reset_defaults()
        install_quiet_defaults()
        capsys.readouterr()

        rules_engine.validate(cleric_draft)
        rules_engine.spellcasting_info(cleric_draft)

        assert capsys.readouterr().out == ""


class TestConfigureLogging:
    """Tests for logging configuration."""

    def test_configure_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test console configuration emits debug events."""
        configure_logging(level="DEBUG", json_format=False)

        get_logger("tests").debug("console configured", check=True)

        assert "console configured" in capsys.readouterr().out

    def test_configure_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON configuration filters by level and stamps the app name."""
        configure_logging(level="WARNING", json_format=True)

        logger = get_logger("tests")
        logger.info("filtered")
        logger.warning("json configured", check=True)

        out = capsys.readouterr().out
        assert "filtered" not in out
        assert '"event": "json configured"' in out
        assert f'"app": "{APP_NAME}"' in out


class TestContext:
    """Tests for context binding."""

    def test_bind_and_clear(self) -> None:
        """Test bound values appear in and vanish from the context."""
        bind_context(character="Mira")
        assert structlog.contextvars.get_contextvars()["character"] == "Mira"

        clear_context()
        assert "character" not in structlog.contextvars.get_contextvars()
