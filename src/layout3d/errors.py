"""Error handling utilities for layout3d.

Provides the exception classes raised while building layout inputs and
the validation helpers shared by the model and configuration layers.
"""

import math


class Layout3dError(Exception):
    """Base exception for layout3d errors."""

    pass


class LayoutError(Layout3dError):
    """Exception raised when a layout computation is handed inconsistent data."""

    def __init__(self, reason: str) -> None:
        """Initialize layout error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Layout calculation failed: {reason}")


class ValidationError(Layout3dError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


def to_float(value: object, name: str = "value") -> float:
    """Convert a value to a finite float.

    Args:
        value: Value to convert
        name: Name of the value for error messages

    Returns:
        The value as a float

    Raises:
        ValidationError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValidationError(name, value, "finite number")
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(name, value, f"finite number: {e}") from e
    if not math.isfinite(result):
        raise ValidationError(name, value, "finite number")
    return result


def validate_non_negative(value: int | float, name: str = "value") -> None:
    """Validate that a value is zero or greater.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(name, value, "non-negative value")
