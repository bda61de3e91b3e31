"""Linear layout: items placed one after another along a single axis."""

import logging
from collections.abc import Sequence

from layout3d.layout.box import center_on_axis, translate_axis
from layout3d.layout.config import Padding
from layout3d.layout.result import LayoutResult
from layout3d.layout.sizing import available_fill_space, categorize, resolve_size
from layout3d.model.axis import Axis
from layout3d.model.item import LayoutItem
from layout3d.model.vector import Vector3

logger = logging.getLogger(__name__)


def solve_linear(
    items: Sequence[LayoutItem],
    axis: Axis | str,
    gap: float = 0.0,
    padding: Padding | None = None,
    container_axis_size: float | None = None,
    container_size: Vector3 | None = None,
    anchor: Vector3 | None = None,
) -> LayoutResult:
    """Calculate a linear layout with fill-aware sizing.

    Fixed items keep their size along the axis; fill items share whatever
    the container has left. Items are then laid end to end with ``gap``
    between them, the block is centered on the anchor using its true extents
    and finally shifted by the low-side padding of the axis.

    Args:
        items: Items in layout order
        axis: Primary layout axis
        gap: Spacing between consecutive items
        padding: Container padding
        container_axis_size: Container size along the axis (None in hug mode)
        container_size: Full container size, used for cross-axis fill
        anchor: Point to center the layout on (origin if None)

    Returns:
        LayoutResult with one position and size per item
    """
    if not items:
        return LayoutResult.empty()

    axis = Axis.parse(axis)
    padding = padding or Padding()

    # 1-2. Fixed sizes first, then what is left over for fill items
    categories = categorize(items, axis)
    available = available_fill_space(items, axis, gap, padding, container_axis_size)

    logger.debug(
        f"Linear layout on {axis.value}: {len(items)} items, "
        f"{categories.fill_count} fill, available={available}"
    )

    # 3. Resolve sizes
    sizes = [
        resolve_size(item, axis, available, categories.fill_count, container_size, padding)
        for item in items
    ]

    # 4. Place item centers end to end starting from zero
    positions = []
    cursor = 0.0
    for size in sizes:
        extent = size[axis]
        positions.append(Vector3.zero().with_axis(axis, cursor + extent / 2))
        cursor += extent + gap

    # 5. Center on the anchor using actual bounds, 6. then pad the low side
    positions = center_on_axis(positions, sizes, axis, anchor)
    positions = translate_axis(positions, axis, padding.low(axis))

    # 7. Bounds over all three axes
    return LayoutResult.build(positions, sizes)
