"""Custom exception hierarchy for the D&D 5E character rules engine.

Draft problems are never raised: they are reported as structured
validation results. Exceptions are reserved for programmer and
configuration faults, chiefly a static catalog that breaks one of its own
invariants, which is detected once when the catalog is built.

All exceptions inherit from RulesEngineError, enabling unified error
handling at the application boundary while preserving domain-specific
context.

Example:
    >>> from dnd_creator.core.exceptions import DuplicateIdError
    >>> raise DuplicateIdError("Duplicate class id", catalog="classes", entity_id="wizard")
"""

from __future__ import annotations

from typing import Any


class RulesEngineError(Exception):
    """Base exception for all rules engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception.

        Returns:
            String representation suitable for debugging.
        """
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(RulesEngineError):
    """Raised when application configuration is invalid.

    This includes missing required settings, invalid values, or
    incompatible configuration combinations.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Catalog Exceptions
# =============================================================================


class CatalogError(ConfigurationError):
    """Base exception for static catalog faults.

    Raised while building the catalog when the bundled rules data is
    internally inconsistent. These are programmer errors and surface at
    startup rather than during character creation.
    """

    def __init__(
        self,
        message: str,
        *,
        catalog: str | None = None,
        entity_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize catalog error with entity context.

        Args:
            message: Human-readable error description.
            catalog: Name of the catalog table (classes, races, ...).
            entity_id: Identifier of the offending catalog entity.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if catalog:
            combined_details["catalog"] = catalog
        if entity_id:
            combined_details["entity_id"] = entity_id
        super().__init__(message, details=combined_details)


class DuplicateIdError(CatalogError):
    """Raised when two entities in one catalog table share an id."""


class CatalogInvariantError(CatalogError):
    """Raised when a catalog entity breaks a structural rule.

    Examples include a class without exactly two saving throws, a subclass
    pointing at an unknown class, or a subrace whose base race is missing.
    """


class FormulaError(CatalogError):
    """Raised when a prepared-spell formula cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        catalog: str | None = None,
        entity_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize formula error with the offending expression.

        Args:
            message: Human-readable error description.
            expression: The formula text that failed to parse.
            catalog: Name of the catalog table.
            entity_id: Identifier of the entity declaring the formula.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression is not None:
            combined_details["expression"] = expression
        super().__init__(
            message,
            catalog=catalog,
            entity_id=entity_id,
            details=combined_details,
        )


class DiceRollError(RulesEngineError):
    """Raised when a dice expression cannot be rolled.

    Rolling is opt-in (ability scores, starting gold) and never happens
    during validation, so this is a caller fault rather than a draft problem.
    """

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with the offending expression.

        Args:
            message: Human-readable error description.
            expression: The dice expression that failed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression is not None:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


__all__ = [
    "RulesEngineError",
    "ConfigurationError",
    "CatalogError",
    "DuplicateIdError",
    "CatalogInvariantError",
    "FormulaError",
    "DiceRollError",
]
