"""Layout engine: dispatches a container's items to the linear or grid solver."""

import logging
from collections.abc import Sequence
from typing import Any

from layout3d.errors import ValidationError
from layout3d.layout.config import Direction, LayoutConfig
from layout3d.layout.grid import solve_grid
from layout3d.layout.linear import solve_linear
from layout3d.layout.result import LayoutResult
from layout3d.model.item import LayoutItem
from layout3d.model.vector import Vector3

logger = logging.getLogger(__name__)


def calculate_layout(
    items: Sequence[LayoutItem],
    config: LayoutConfig,
    container_size: Vector3 | Sequence[float] | None = None,
    anchor: Vector3 | Sequence[float] | None = None,
) -> LayoutResult:
    """Calculate positions and sizes for the items of one container.

    The call is pure: the same arguments always produce the same result.
    Misconfiguration never raises: an unknown direction or a malformed
    container size or anchor yields zero positions with base sizes and a
    diagnostic on the result.

    Args:
        items: Items in layout order
        config: Container layout configuration
        container_size: Available space per axis; None lays out in hug mode
        anchor: Point the layout is centered on (origin if None)

    Returns:
        LayoutResult with one position and size per item
    """
    if not items:
        return LayoutResult.empty()

    try:
        container_size = Vector3.from_value(container_size, "container_size") if container_size is not None else None
        anchor = Vector3.from_value(anchor, "anchor") if anchor is not None else None
    except ValidationError as e:
        return _fallback(items, str(e))

    direction = config.layout_direction
    if direction is None:
        return _fallback(items, f"Unknown layout direction '{config.direction}'")

    if direction.is_linear:
        axis = direction.axis
        return solve_linear(
            items,
            axis,
            gap=config.gap,
            padding=config.padding,
            container_axis_size=container_size[axis] if container_size is not None else None,
            container_size=container_size,
            anchor=anchor,
        )

    return solve_grid(
        items,
        direction.value,
        gap=config.gap,
        padding=config.padding,
        config=config,
        anchor=anchor,
    )


def _fallback(items: Sequence[LayoutItem], message: str) -> LayoutResult:
    # Zero positions with base sizes
    logger.warning(message)
    positions = [Vector3.zero() for _ in items]
    sizes = [item.base_size for item in items]
    return LayoutResult.build(positions, sizes, diagnostics=[message])


class LayoutEngine:
    """Engine bound to one container's layout configuration."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialize the layout engine.

        Args:
            config: Layout configuration (uses defaults if None)
        """
        self.config = config or LayoutConfig()

    @property
    def direction(self) -> Direction | None:
        return self.config.layout_direction

    def calculate_layout(
        self,
        items: Sequence[LayoutItem],
        container_size: Vector3 | Sequence[float] | None = None,
        anchor: Vector3 | Sequence[float] | None = None,
    ) -> LayoutResult:
        """Calculate the layout of items with this engine's configuration."""
        return calculate_layout(items, self.config, container_size, anchor)

    def debug_info(
        self,
        items: Sequence[LayoutItem],
        container_size: Vector3 | Sequence[float] | None = None,
        anchor: Vector3 | Sequence[float] | None = None,
    ) -> dict[str, Any]:
        """Summarize a layout calculation as plain data."""
        return layout_debug_info(items, self.config, container_size, anchor)


def layout_debug_info(
    items: Sequence[LayoutItem],
    config: LayoutConfig,
    container_size: Vector3 | Sequence[float] | None = None,
    anchor: Vector3 | Sequence[float] | None = None,
) -> dict[str, Any]:
    """Summarize a layout calculation as plain data for logging or inspection.

    Returns:
        Dictionary with the item count, the configuration, positions, sizes,
        bounds and diagnostics, all as plain floats and lists
    """
    result = calculate_layout(items, config, container_size, anchor)
    bounds = result.bounds
    return {
        "item_count": len(items),
        "item_ids": [item.id for item in items],
        "layout_config": config.to_dict(),
        "positions": [p.to_tuple() for p in result.positions],
        "sizes": [s.to_tuple() for s in result.sizes],
        "bounds": {
            "min": bounds.min.to_tuple(),
            "max": bounds.max.to_tuple(),
            "size": bounds.size.to_tuple(),
        },
        "diagnostics": list(result.diagnostics),
    }
