"""Result of a layout computation."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Self

from layout3d.layout.box import Bounds, compute_bounds
from layout3d.model.vector import Vector3


@dataclass(frozen=True)
class LayoutResult:
    """Final positions and sizes for a set of items.

    Attributes:
        positions: Item center positions, in input order
        sizes: Resolved item sizes, in input order
        bounds: Bounding box of the final positions and sizes
        diagnostics: Messages describing fail-soft fallbacks taken while solving
    """

    positions: tuple[Vector3, ...] = ()
    sizes: tuple[Vector3, ...] = ()
    bounds: Bounds = field(default_factory=Bounds.zero)
    diagnostics: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def ok(self) -> bool:
        """True when no fallback was taken."""
        return not self.diagnostics

    @classmethod
    def empty(cls) -> Self:
        """Result for a layout with no items."""
        return cls()

    @classmethod
    def build(
        cls,
        positions: Sequence[Vector3],
        sizes: Sequence[Vector3],
        diagnostics: Sequence[str] = (),
    ) -> Self:
        """Create a result, computing bounds from the final positions and sizes."""
        if not positions:
            return cls(diagnostics=tuple(diagnostics))
        return cls(
            positions=tuple(positions),
            sizes=tuple(sizes),
            bounds=compute_bounds(positions, sizes),
            diagnostics=tuple(diagnostics),
        )
