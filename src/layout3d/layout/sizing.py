"""Sizing resolver for Fixed / Fill / Hug items.

Fill items on the primary layout axis share the space left over by the
fixed items, gaps and padding equally. Fill on any other axis stretches
to the container size minus padding when the container size is known.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from layout3d.layout.config import LayoutConfig, Padding
from layout3d.model.axis import Axis
from layout3d.model.item import LayoutItem, SizingPolicy
from layout3d.model.vector import Vector3

# Smallest size a Fill item may resolve to
FILL_FLOOR = 0.1


@dataclass(frozen=True)
class Categorization:
    """Items split by whether they fill along the layout axis.

    Attributes:
        fixed: Items that keep their base size on the axis
        fill: Items that fill along the axis
        total_fixed: Sum of the fixed items' base sizes on the axis
    """

    fixed: tuple[LayoutItem, ...]
    fill: tuple[LayoutItem, ...]
    total_fixed: float

    @property
    def fill_count(self) -> int:
        return len(self.fill)


def categorize(items: Sequence[LayoutItem], axis: Axis | str) -> Categorization:
    """Partition items into fixed-on-axis and fill-on-axis groups."""
    axis = Axis.parse(axis)
    fixed = []
    fill = []
    total_fixed = 0.0

    for item in items:
        if item.has_fill(axis):
            fill.append(item)
        else:
            fixed.append(item)
            total_fixed += item.base_size[axis]

    return Categorization(fixed=tuple(fixed), fill=tuple(fill), total_fixed=total_fixed)


def available_fill_space(
    items: Sequence[LayoutItem],
    axis: Axis | str,
    gap: float,
    padding: Padding,
    container_axis_size: float | None,
) -> float | None:
    """Space left for fill items along the layout axis.

    Returns:
        The non-negative leftover space, or None when there is no container
        size to distribute or no item fills along the axis
    """
    if container_axis_size is None:
        return None

    categories = categorize(items, axis)
    if categories.fill_count == 0:
        return None

    total_gaps = gap * (len(items) - 1)
    return max(0.0, container_axis_size - categories.total_fixed - total_gaps - padding.total(axis))


def resolve_size(
    item: LayoutItem,
    axis: Axis | str | None,
    available_space: float | None = None,
    fill_count: int = 0,
    container_size: Vector3 | None = None,
    padding: Padding | None = None,
) -> Vector3:
    """Compute an item's final size from its sizing policies.

    Args:
        item: Item to size
        axis: Primary layout axis, or None when there is none (grids)
        available_space: Leftover space on the primary axis shared by fill items
        fill_count: Number of items filling along the primary axis
        container_size: Container size, None in hug mode
        padding: Container padding

    Returns:
        The resolved size
    """
    layout_axis = Axis.parse(axis) if axis is not None else None
    padding = padding or Padding()
    size = item.base_size

    for each in Axis:
        if item.policy(each) is not SizingPolicy.FILL:
            continue

        if each is layout_axis and available_space is not None and fill_count > 0:
            value = max(available_space / fill_count, FILL_FLOOR)
        elif container_size is not None:
            value = max(container_size[each] - padding.low(each) - padding.high(each), FILL_FLOOR)
        else:
            # Nothing to fill against
            value = item.base_size[each]

        size = size.with_axis(each, value)

    return size


def resolve_sizes(
    items: Sequence[LayoutItem],
    axis: Axis | str | None,
    gap: float = 0.0,
    padding: Padding | None = None,
    container_size: Vector3 | None = None,
) -> list[Vector3]:
    """Resolve sizes for every item of a layout in one pass."""
    padding = padding or Padding()
    if axis is None:
        return [resolve_size(item, None, padding=padding) for item in items]

    axis = Axis.parse(axis)
    container_axis_size = container_size[axis] if container_size is not None else None
    available = available_fill_space(items, axis, gap, padding, container_axis_size)
    fill_count = categorize(items, axis).fill_count

    return [
        resolve_size(item, axis, available, fill_count, container_size, padding)
        for item in items
    ]


def calculate_fill_sizes(
    items: Sequence[LayoutItem],
    config: LayoutConfig,
    container_size: Vector3 | Sequence[float],
) -> list[Vector3]:
    """Resolve item sizes against a known container size without placing them.

    Used when a fixed container is resized and its fill children need new
    sizes. Grid directions size items independently of the container.

    Args:
        items: Items in layout order
        config: Container layout configuration
        container_size: Size the container now has

    Returns:
        One resolved size per item, in input order
    """
    if not items:
        return []
    container_size = Vector3.from_value(container_size, "container_size")
    return resolve_sizes(items, config.axis, config.gap, config.padding, container_size)
