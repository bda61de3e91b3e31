"""layout3d - deterministic 3D auto layout for items inside containers."""

__version__ = "0.1.0"

from layout3d.errors import Layout3dError, LayoutError, ValidationError
from layout3d.layout import (
    FILL_FLOOR,
    Bounds,
    ContainerFit,
    ContainerSizingMode,
    Direction,
    LayoutConfig,
    LayoutEngine,
    LayoutResult,
    Padding,
    any_fill,
    calculate_fill_sizes,
    calculate_layout,
    compute_bounds,
    has_fill,
    layout_container,
    layout_debug_info,
    resolve_size,
    solve_grid,
    solve_linear,
)
from layout3d.model import Axis, LayoutItem, SizingPolicy, Vector3

__all__ = [
    "Axis",
    "Bounds",
    "ContainerFit",
    "ContainerSizingMode",
    "Direction",
    "FILL_FLOOR",
    "Layout3dError",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutError",
    "LayoutItem",
    "LayoutResult",
    "Padding",
    "SizingPolicy",
    "ValidationError",
    "Vector3",
    "any_fill",
    "calculate_fill_sizes",
    "calculate_layout",
    "compute_bounds",
    "has_fill",
    "layout_container",
    "layout_debug_info",
    "resolve_size",
    "solve_grid",
    "solve_linear",
]
