"""Custom exception hierarchy for the hero builder engine.

The engine is total over well-formed input, so this hierarchy is small:
configuration failures, plus the nesting guard and type lookup around
feature trees. All exceptions inherit from HeroBuilderError, enabling unified error
handling at the application boundary while preserving context.

Example:
    >>> from hero_builder.core.exceptions import FeatureNestingError
    >>> raise FeatureNestingError("Feature contains itself", feature_id="kit-1")
"""

from __future__ import annotations

from typing import Any


class HeroBuilderError(Exception):
    """Base exception for all hero builder errors.

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
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(HeroBuilderError):
    """Raised when settings are missing or invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with the offending key.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Feature Engine Exceptions
# =============================================================================


class FeatureError(HeroBuilderError):
    """Base exception for feature engine errors."""

    def __init__(
        self,
        message: str,
        *,
        feature_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize feature error with the feature identifier.

        Args:
            message: Human-readable error description.
            feature_id: Identifier of the feature being processed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if feature_id is not None:
            combined_details["feature_id"] = feature_id
        super().__init__(message, details=combined_details)


class FeatureNestingError(FeatureError):
    """Raised when a feature tree nests itself or nests too deeply.

    Feature trees are acyclic by convention only; flattening checks it.
    """

    def __init__(
        self,
        message: str,
        *,
        feature_id: str | None = None,
        depth: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize nesting error with depth context.

        Args:
            message: Human-readable error description.
            feature_id: Identifier of the offending feature.
            depth: Nesting depth at which the problem was found.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if depth is not None:
            combined_details["depth"] = depth
        super().__init__(message, feature_id=feature_id, details=combined_details)


class FeatureTypeError(FeatureError):
    """Raised when a value does not name a known feature type."""

    def __init__(
        self,
        message: str,
        *,
        feature_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize feature type error.

        Args:
            message: Human-readable error description.
            feature_type: The unrecognised type value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if feature_type is not None:
            combined_details["feature_type"] = feature_type
        super().__init__(message, details=combined_details)


__all__ = [
    "HeroBuilderError",
    "ConfigurationError",
    "FeatureError",
    "FeatureNestingError",
    "FeatureTypeError",
]
