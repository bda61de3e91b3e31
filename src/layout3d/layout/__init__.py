"""Layout engine for 3D auto layout.

This module contains the sizing resolver, the linear and grid solvers
and the bounds utilities used to position items inside a container.
"""

from layout3d.layout.box import Bounds, compute_bounds
from layout3d.layout.config import Direction, LayoutConfig, Padding
from layout3d.layout.container import ContainerFit, ContainerSizingMode, any_fill, has_fill, layout_container
from layout3d.layout.engine import LayoutEngine, calculate_layout, layout_debug_info
from layout3d.layout.grid import solve_grid
from layout3d.layout.linear import solve_linear
from layout3d.layout.result import LayoutResult
from layout3d.layout.sizing import FILL_FLOOR, calculate_fill_sizes, resolve_size

__all__ = [
    "Bounds",
    "ContainerFit",
    "ContainerSizingMode",
    "Direction",
    "FILL_FLOOR",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutResult",
    "Padding",
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
