"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from dnd_creator.core.exceptions import (
    CatalogError,
    CatalogInvariantError,
    ConfigurationError,
    DiceRollError,
    DuplicateIdError,
    FormulaError,
    RulesEngineError,
)


class TestRulesEngineError:
    """Tests for the base RulesEngineError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = RulesEngineError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = RulesEngineError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        exc = RulesEngineError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "RulesEngineError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestConfigurationError:
    """Tests for configuration exceptions."""

    def test_config_key_in_details(self) -> None:
        """Test ConfigurationError records the offending key."""
        exc = ConfigurationError("Bad value", config_key="max_character_level")
        assert exc.details["config_key"] == "max_character_level"
        assert "config_key='max_character_level'" in str(exc)

    def test_inheritance(self) -> None:
        """Test exception inheritance chain."""
        exc = ConfigurationError("Error")
        assert isinstance(exc, RulesEngineError)
        assert isinstance(exc, Exception)


class TestCatalogExceptions:
    """Tests for catalog construction exceptions."""

    def test_catalog_error_context(self) -> None:
        """Test CatalogError records catalog and entity id."""
        exc = CatalogError("Broken", catalog="classes", entity_id="wizard")
        assert exc.details["catalog"] == "classes"
        assert exc.details["entity_id"] == "wizard"

    def test_catalog_error_is_configuration_error(self) -> None:
        """Test that catalog faults are configuration errors."""
        exc = DuplicateIdError("Duplicate", catalog="spells", entity_id="light")
        assert isinstance(exc, CatalogError)
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, RulesEngineError)

    def test_invariant_error_merges_details(self) -> None:
        """Test explicit details are kept alongside entity context."""
        exc = CatalogInvariantError(
            "Wrong saves",
            catalog="classes",
            entity_id="fighter",
            details={"saving_throws": ["strength"]},
        )
        assert exc.details == {
            "saving_throws": ["strength"],
            "catalog": "classes",
            "entity_id": "fighter",
        }

    def test_formula_error_expression(self) -> None:
        """Test FormulaError records the expression."""
        exc = FormulaError(
            "Malformed",
            expression="WIS_MOD +",
            catalog="classes",
            entity_id="cleric",
        )
        assert exc.details["expression"] == "WIS_MOD +"
        assert exc.details["entity_id"] == "cleric"
        assert isinstance(exc, CatalogError)

    def test_can_be_caught_as_base(self) -> None:
        """Test catalog errors are caught by the base handler."""
        with pytest.raises(RulesEngineError):
            raise FormulaError("Bad formula", expression="???")


class TestDiceRollError:
    """Tests for DiceRollError."""

    def test_expression_in_details(self) -> None:
        """Test the expression is recorded and the error is not a catalog fault."""
        exc = DiceRollError("Invalid dice expression", expression="4d")

        assert exc.details == {"expression": "4d"}
        assert isinstance(exc, RulesEngineError)
        assert not isinstance(exc, ConfigurationError)
