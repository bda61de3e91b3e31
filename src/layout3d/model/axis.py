"""Spatial axes."""

from enum import Enum

from layout3d.errors import ValidationError


class Axis(Enum):
    """One of the three spatial axes."""

    X = "x"
    Y = "y"
    Z = "z"

    @property
    def index(self) -> int:
        """Component index of this axis (0, 1 or 2)."""
        return _AXIS_INDEX[self]

    @property
    def size_property(self) -> str:
        """Host property key holding the sizing policy for this axis."""
        return f"size{self.value.upper()}"

    @classmethod
    def parse(cls, value: "Axis | str") -> "Axis":
        """Parse an axis from an enum member or a case-insensitive name.

        Raises:
            ValidationError: If the value does not name an axis
        """
        if isinstance(value, Axis):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError("axis", value, "one of 'x', 'y', 'z'")


_AXIS_INDEX = {Axis.X: 0, Axis.Y: 1, Axis.Z: 2}
