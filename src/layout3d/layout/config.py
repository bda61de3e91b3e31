"""Container-level layout configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self

from layout3d.errors import ValidationError, to_float, validate_non_negative
from layout3d.model.axis import Axis

PADDING_SIDES = ("top", "bottom", "left", "right", "front", "back")


class Direction(Enum):
    """Layout direction: a single axis (linear) or a grid."""

    X = "x"
    Y = "y"
    Z = "z"
    XY = "xy"
    XYZ = "xyz"

    @property
    def is_linear(self) -> bool:
        return self in (Direction.X, Direction.Y, Direction.Z)

    @property
    def axis(self) -> Axis | None:
        """Primary axis for linear directions, None for grids."""
        return Axis(self.value) if self.is_linear else None

    @classmethod
    def lookup(cls, value: "Direction | str | None") -> "Direction | None":
        """Look up a direction, returning None for unknown values."""
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


@dataclass(frozen=True)
class Padding:
    """Six-sided container padding.

    Sides map to axes as x: (left, right), y: (bottom, top), z: (back, front);
    the first of each pair is the low side.
    """

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0
    front: float = 0.0
    back: float = 0.0

    def __post_init__(self) -> None:
        for side in PADDING_SIDES:
            value = to_float(getattr(self, side), f"padding.{side}")
            validate_non_negative(value, f"padding.{side}")
            object.__setattr__(self, side, value)

    def low(self, axis: Axis | str) -> float:
        """Padding on the low side of an axis (left, bottom or back)."""
        axis = Axis.parse(axis)
        if axis is Axis.X:
            return self.left
        if axis is Axis.Y:
            return self.bottom
        return self.back

    def high(self, axis: Axis | str) -> float:
        """Padding on the high side of an axis (right, top or front)."""
        axis = Axis.parse(axis)
        if axis is Axis.X:
            return self.right
        if axis is Axis.Y:
            return self.top
        return self.front

    def total(self, axis: Axis | str) -> float:
        """Total padding along an axis."""
        return self.low(axis) + self.high(axis)

    @property
    def is_zero(self) -> bool:
        return all(getattr(self, side) == 0.0 for side in PADDING_SIDES)

    @classmethod
    def from_value(cls, value: "Padding | Mapping[str, Any] | float | None") -> Self:
        """Create padding from a host value.

        Args:
            value: None (no padding), a Padding, a mapping of side names
                (missing sides default to 0) or a single uniform number

        Returns:
            A Padding instance

        Raises:
            ValidationError: On unknown side names or invalid values
        """
        if value is None:
            return cls()
        if isinstance(value, Padding):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - set(PADDING_SIDES)
            if unknown:
                raise ValidationError("padding", value, f"sides among {', '.join(PADDING_SIDES)}")
            return cls(**{side: value[side] if value[side] is not None else 0.0 for side in value})
        uniform = to_float(value, "padding")
        return cls(*([uniform] * len(PADDING_SIDES)))


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for a container's layout.

    Attributes:
        direction: 'x', 'y' or 'z' for linear layouts, 'xy' or 'xyz' for grids.
            Unknown values are accepted here and handled when solving.
        gap: Spacing between consecutive items or grid cells
        padding: Six-sided container padding
        columns: Grid column count (grid only, derived from item count if None)
        rows: Grid row count (grid only, derived if None)
    """

    direction: str = "x"
    gap: float = 0.0
    padding: Padding = field(default_factory=Padding)
    columns: int | None = None
    rows: int | None = None

    def __post_init__(self) -> None:
        gap = to_float(self.gap, "gap")
        validate_non_negative(gap, "gap")
        object.__setattr__(self, "gap", gap)
        object.__setattr__(self, "padding", Padding.from_value(self.padding))
        if isinstance(self.direction, Direction):
            object.__setattr__(self, "direction", self.direction.value)
        for name in ("columns", "rows"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 1):
                raise ValidationError(name, value, "positive integer")

    @property
    def layout_direction(self) -> Direction | None:
        """Parsed direction, or None if the direction string is unknown."""
        return Direction.lookup(self.direction)

    @property
    def is_linear(self) -> bool:
        direction = self.layout_direction
        return direction is not None and direction.is_linear

    @property
    def is_grid(self) -> bool:
        direction = self.layout_direction
        return direction is not None and not direction.is_linear

    @property
    def axis(self) -> Axis | None:
        """Primary axis for linear layouts, None otherwise."""
        direction = self.layout_direction
        return direction.axis if direction is not None else None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Create a configuration from a host property mapping.

        Args:
            data: Mapping with optional keys direction, gap, padding,
                columns and rows

        Returns:
            A LayoutConfig instance
        """
        return cls(
            direction=data.get("direction", "x"),
            gap=data.get("gap") or 0.0,
            padding=Padding.from_value(data.get("padding")),
            columns=data.get("columns"),
            rows=data.get("rows"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain summary of this configuration."""
        return {
            "direction": self.direction,
            "gap": self.gap,
            "padding": {side: getattr(self.padding, side) for side in PADDING_SIDES},
            "columns": self.columns,
            "rows": self.rows,
        }
