"""Immutable 3-component vector used for sizes, positions and anchors."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Self

import numpy as np
from numpy.typing import NDArray

from layout3d.errors import ValidationError, to_float
from layout3d.model.axis import Axis


@dataclass(frozen=True, slots=True)
class Vector3:
    """3D vector value.

    Attributes:
        x: X component
        y: Y component
        z: Z component
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __getitem__(self, axis: Axis | str | int) -> float:
        """Get a component by Axis, axis name or index."""
        index = Axis.parse(axis).index if not isinstance(axis, int) else axis
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"Vector3 index out of range: {axis!r}")

    def __iter__(self):
        """Iterate over (x, y, z)."""
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def with_axis(self, axis: Axis | str, value: float) -> "Vector3":
        """Create a new vector with one component replaced."""
        index = Axis.parse(axis).index
        components = [self.x, self.y, self.z]
        components[index] = value
        return Vector3(*components)

    def to_array(self) -> NDArray[np.float64]:
        """Convert to a numpy float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_array(cls, array: NDArray[np.float64]) -> Self:
        """Create a vector from a numpy array of shape (3,)."""
        return cls(float(array[0]), float(array[1]), float(array[2]))

    @classmethod
    def from_value(cls, value: object, name: str = "vector") -> Self:
        """Create a vector from a host value.

        Accepts a Vector3, a 3-element sequence or numpy array, or a mapping
        with ``x``, ``y`` and ``z`` keys.

        Args:
            value: Value to convert
            name: Name of the value for error messages

        Returns:
            A new Vector3

        Raises:
            ValidationError: If the value cannot be read as three numbers
        """
        if isinstance(value, Vector3):
            return value
        if isinstance(value, Mapping):
            missing = [key for key in ("x", "y", "z") if key not in value]
            if missing:
                raise ValidationError(name, value, f"mapping with keys x, y, z (missing {', '.join(missing)})")
            return cls(
                to_float(value["x"], f"{name}.x"),
                to_float(value["y"], f"{name}.y"),
                to_float(value["z"], f"{name}.z"),
            )
        if isinstance(value, np.ndarray):
            value = value.tolist()
        if isinstance(value, Sequence) and not isinstance(value, str):
            if len(value) != 3:
                raise ValidationError(name, value, "3 components")
            return cls(*(to_float(v, f"{name}[{i}]") for i, v in enumerate(value)))
        raise ValidationError(name, value, "Vector3, 3-sequence or x/y/z mapping")

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def one() -> "Vector3":
        return Vector3(1.0, 1.0, 1.0)

    def __repr__(self) -> str:
        """String representation."""
        return f"Vector3(x={self.x:.3f}, y={self.y:.3f}, z={self.z:.3f})"
