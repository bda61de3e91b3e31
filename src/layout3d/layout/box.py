"""Bounding boxes and centering helpers for layout results."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

import numpy as np
from numpy.typing import NDArray

from layout3d.errors import LayoutError
from layout3d.model.axis import Axis
from layout3d.model.vector import Vector3


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box of a set of placed items.

    Attributes:
        min: Minimum corner
        max: Maximum corner
        size: Extent along each axis (max - min)
    """

    min: Vector3
    max: Vector3
    size: Vector3

    @property
    def center(self) -> Vector3:
        """Center point of the box."""
        return (self.min + self.max) / 2

    @classmethod
    def from_extents(cls, low: NDArray[np.float64], high: NDArray[np.float64]) -> Self:
        """Create a box from min and max corner arrays."""
        return cls(
            min=Vector3.from_array(low),
            max=Vector3.from_array(high),
            size=Vector3.from_array(high - low),
        )

    @staticmethod
    def zero() -> "Bounds":
        """Zero-size box at the origin, used for empty layouts."""
        return Bounds(min=Vector3.zero(), max=Vector3.zero(), size=Vector3.zero())

    @staticmethod
    def unit() -> "Bounds":
        """Unit box centered on the origin."""
        return Bounds(
            min=Vector3(-0.5, -0.5, -0.5),
            max=Vector3(0.5, 0.5, 0.5),
            size=Vector3.one(),
        )


def _stack(vectors: Sequence[Vector3]) -> NDArray[np.float64]:
    return np.array([v.to_tuple() for v in vectors], dtype=np.float64).reshape(-1, 3)


def _check_lengths(positions: Sequence[Vector3], sizes: Sequence[Vector3]) -> None:
    if len(positions) != len(sizes):
        raise LayoutError(f"{len(positions)} positions but {len(sizes)} sizes")


def compute_bounds(positions: Sequence[Vector3], sizes: Sequence[Vector3]) -> Bounds:
    """Calculate the bounding box of items placed at their centers.

    Each item spans ``position ± size / 2`` on every axis. The result is the
    component-wise min/max across all items. With no items the unit box is
    returned.

    Args:
        positions: Item center positions
        sizes: Item sizes, same length as positions

    Returns:
        Bounding box enclosing every item

    Raises:
        LayoutError: If positions and sizes differ in length
    """
    _check_lengths(positions, sizes)
    if not positions:
        return Bounds.unit()

    centers = _stack(positions)
    half = _stack(sizes) / 2
    return Bounds.from_extents((centers - half).min(axis=0), (centers + half).max(axis=0))


def axis_extent(positions: Sequence[Vector3], sizes: Sequence[Vector3], axis: Axis | str) -> tuple[float, float]:
    """Actual (min, max) extent of placed items along one axis."""
    _check_lengths(positions, sizes)
    index = Axis.parse(axis).index
    centers = _stack(positions)[:, index]
    half = _stack(sizes)[:, index] / 2
    return float((centers - half).min()), float((centers + half).max())


def translate_axis(positions: Sequence[Vector3], axis: Axis | str, offset: float) -> list[Vector3]:
    """Move every position by ``offset`` along one axis."""
    axis = Axis.parse(axis)
    if offset == 0:
        return list(positions)
    return [p.with_axis(axis, p[axis] + offset) for p in positions]


def center_on_axis(
    positions: Sequence[Vector3],
    sizes: Sequence[Vector3],
    axis: Axis | str,
    anchor: Vector3 | None = None,
) -> list[Vector3]:
    """Center items on the anchor along one axis using their true extents.

    The extents come from each item's position and resolved size, so items
    grown by fill are accounted for.

    Args:
        positions: Item center positions
        sizes: Resolved item sizes
        axis: Axis to center along
        anchor: Point to center on (origin if None)

    Returns:
        New positions whose bounds center on the anchor along the axis
    """
    if not positions:
        return []

    axis = Axis.parse(axis)
    low, high = axis_extent(positions, sizes, axis)
    bounds_center = (low + high) / 2
    target_center = anchor[axis] if anchor is not None else 0.0
    return translate_axis(positions, axis, target_center - bounds_center)
