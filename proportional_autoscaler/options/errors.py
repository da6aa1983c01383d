"""Errors raised while parsing and validating autoscaler options."""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .config import Violation


class OptionsError(ValueError):
    """Base class for option errors."""


class ParseError(OptionsError):
    """Raised when --default-params is not a valid JSON object."""


class ValidationError(OptionsError):
    """Raised once after all invalid parameters have been reported."""

    def __init__(self, message: str, violations: Optional[List["Violation"]] = None):
        super().__init__(message)
        self.violations: List["Violation"] = list(violations or [])
