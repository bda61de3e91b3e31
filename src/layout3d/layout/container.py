"""Resolve a container's layout according to its own sizing mode.

A hug container takes its size from its children's bounds; a fixed
container imposes its size on its children and drives their fill sizes.
One call only ever goes one way, so a hug container with fill children
lays them out at their natural size.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from layout3d.errors import ValidationError
from layout3d.layout.config import LayoutConfig
from layout3d.layout.engine import calculate_layout
from layout3d.layout.result import LayoutResult
from layout3d.model.axis import Axis
from layout3d.model.item import LayoutItem
from layout3d.model.vector import Vector3

logger = logging.getLogger(__name__)


class ContainerSizingMode(Enum):
    """How a container's own size is determined."""

    HUG = "hug"
    FIXED = "fixed"

    @classmethod
    def parse(cls, value: "ContainerSizingMode | str | None") -> "ContainerSizingMode":
        """Parse a sizing mode; None defaults to HUG like new containers.

        Raises:
            ValidationError: If the value does not name a mode
        """
        if value is None:
            return cls.HUG
        if isinstance(value, ContainerSizingMode):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError("sizing_mode", value, "one of 'hug', 'fixed'")


@dataclass(frozen=True)
class ContainerFit:
    """Layout of a container's children together with the container's size.

    Attributes:
        result: Layout of the children
        size: Size the container should have
        center: Center of the children's bounds
        mode: Sizing mode the layout was resolved with
    """

    result: LayoutResult
    size: Vector3
    center: Vector3
    mode: ContainerSizingMode


def has_fill(items: Sequence[LayoutItem], axis: Axis | str) -> bool:
    """Check whether any item fills along an axis."""
    axis = Axis.parse(axis)
    return any(item.has_fill(axis) for item in items)


def any_fill(items: Sequence[LayoutItem]) -> bool:
    """Check whether any item fills along any axis."""
    return any(has_fill(items, axis) for axis in Axis)


def layout_container(
    items: Sequence[LayoutItem],
    config: LayoutConfig,
    mode: ContainerSizingMode | str | None = ContainerSizingMode.HUG,
    container_size: Vector3 | Sequence[float] | None = None,
    anchor: Vector3 | Sequence[float] | None = None,
) -> ContainerFit:
    """Lay out a container's children and report the container's size.

    Args:
        items: Child items in layout order
        config: Container layout configuration
        mode: HUG sizes the container to its children, FIXED sizes children
            against the given container size
        container_size: Container size, required for FIXED and ignored for HUG
        anchor: Point the layout is centered on (origin if None)

    Returns:
        ContainerFit with the children's layout and the container size

    Raises:
        ValidationError: If mode is invalid or FIXED is given no container size
    """
    mode = ContainerSizingMode.parse(mode)

    if mode is ContainerSizingMode.FIXED:
        if container_size is None:
            raise ValidationError("container_size", None, "container size for a fixed container")
        size = Vector3.from_value(container_size, "container_size")
        result = calculate_layout(items, config, size, anchor)
        center = result.bounds.center if items else Vector3.zero()
        return ContainerFit(result=result, size=size, center=center, mode=mode)

    result = calculate_layout(items, config, None, anchor)
    if container_size is not None:
        message = "Container size ignored for a hug container; fill items keep their natural size"
        logger.warning(message)
        result = LayoutResult(
            positions=result.positions,
            sizes=result.sizes,
            bounds=result.bounds,
            diagnostics=result.diagnostics + (message,),
        )

    if not items:
        return ContainerFit(result=result, size=Vector3.zero(), center=Vector3.zero(), mode=mode)
    return ContainerFit(result=result, size=result.bounds.size, center=result.bounds.center, mode=mode)
