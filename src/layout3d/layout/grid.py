"""Grid layouts in two (xy) or three (xyz) dimensions."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from layout3d.layout.config import LayoutConfig, Padding
from layout3d.layout.result import LayoutResult
from layout3d.layout.sizing import resolve_size
from layout3d.model.item import LayoutItem
from layout3d.model.vector import Vector3

logger = logging.getLogger(__name__)

GRID_MODES = ("xy", "xyz")


@dataclass(frozen=True)
class GridShape:
    """Number of cells along each grid dimension."""

    columns: int
    rows: int
    layers: int = 1

    def cell(self, index: int) -> tuple[int, int, int]:
        """(column, row, layer) of the item at a linear index."""
        col = index % self.columns
        row = (index // self.columns) % self.rows
        layer = index // (self.columns * self.rows)
        return col, row, layer


def grid_shape(count: int, mode: str, columns: int | None = None, rows: int | None = None) -> GridShape:
    """Calculate grid dimensions for a number of items.

    Args:
        count: Number of items
        mode: 'xy' or 'xyz'
        columns: Explicit column count, derived from the item count if None
        rows: Explicit row count for xyz grids, derived if None. An xy grid
            always has exactly as many rows as its items need.

    Returns:
        The grid shape
    """
    count = max(count, 1)
    if mode == "xy":
        columns = columns or math.ceil(math.sqrt(count))
        return GridShape(columns=columns, rows=math.ceil(count / columns))

    columns = columns or _ceil_cbrt(count)
    rows = rows or columns
    layers = math.ceil(count / (columns * rows))
    return GridShape(columns=columns, rows=rows, layers=layers)


def _ceil_cbrt(value: int) -> int:
    # Float cube roots overshoot exact cubes (27 ** (1/3) > 3)
    root = round(value ** (1 / 3))
    while root ** 3 < value:
        root += 1
    while root > 1 and (root - 1) ** 3 >= value:
        root -= 1
    return root


def _centered(index: int, count: int, step: float) -> float:
    return index * step - (count - 1) * step / 2


def padding_shift(padding: Padding) -> Vector3:
    """Offset applied to every grid position for asymmetric padding."""
    return Vector3(
        (padding.right - padding.left) / 2,
        (padding.top - padding.bottom) / 2,
        (padding.front - padding.back) / 2,
    )


def solve_grid(
    items: Sequence[LayoutItem],
    mode: str,
    gap: float = 0.0,
    padding: Padding | None = None,
    config: LayoutConfig | None = None,
    anchor: Vector3 | None = None,
) -> LayoutResult:
    """Calculate a 2D or 3D grid layout.

    Items fill columns first, then rows (downward along -Y), then layers
    (along +Z). Each item is spaced by its own size plus the gap, and the
    grid is symmetric about the origin before padding and anchoring. Items
    are sized independently of the container.

    Args:
        items: Items in layout order
        mode: 'xy' or 'xyz'
        gap: Spacing between cells
        padding: Container padding
        config: Layout configuration providing optional columns (and rows for xyz)
        anchor: Offset added to every position (no offset if None)

    Returns:
        LayoutResult with one position and size per item
    """
    if not items:
        return LayoutResult.empty()
    if mode not in GRID_MODES:
        raise ValueError(f"Unknown grid mode: {mode!r}")

    padding = padding or Padding()
    columns = config.columns if config is not None else None
    rows = config.rows if config is not None else None
    shape = grid_shape(len(items), mode, columns, rows)

    logger.debug(f"Grid layout {mode}: {len(items)} items in {shape.columns}x{shape.rows}x{shape.layers}")

    shift = padding_shift(padding)
    offset = shift + anchor if anchor is not None else shift
    positions = []
    sizes = []

    for index, item in enumerate(items):
        size = resolve_size(item, None, padding=padding)
        if mode == "xyz":
            col, row, layer = shape.cell(index)
        else:
            col, row, layer = index % shape.columns, index // shape.columns, 0

        x = _centered(col, shape.columns, size.x + gap)
        y = -_centered(row, shape.rows, size.y + gap)
        z = _centered(layer, shape.layers, size.z + gap) if mode == "xyz" else 0.0

        positions.append(Vector3(x, y, z) + offset)
        sizes.append(size)

    return LayoutResult.build(positions, sizes)
