"""Layout items and their per-axis sizing policies."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

from layout3d.errors import ValidationError, to_float
from layout3d.model.axis import Axis
from layout3d.model.vector import Vector3

DEFAULT_ITEM_SIZE = Vector3(1.0, 1.0, 1.0)


class SizingPolicy(Enum):
    """How an item is sized along one axis.

    FIXED keeps the base size, HUG keeps the natural size (numerically the
    same as FIXED here) and FILL expands into the space left by the container.
    """

    FIXED = "fixed"
    FILL = "fill"
    HUG = "hug"

    @classmethod
    def parse(cls, value: "SizingPolicy | str | None") -> "SizingPolicy":
        """Parse a policy from an enum member or a case-insensitive string.

        ``None`` maps to FIXED, matching items that carry no layout properties.

        Raises:
            ValidationError: If the value does not name a policy
        """
        if value is None:
            return cls.FIXED
        if isinstance(value, SizingPolicy):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError("sizing_policy", value, "one of 'fixed', 'fill', 'hug'")


@dataclass(frozen=True)
class LayoutItem:
    """One element to be placed by the layout engine.

    Attributes:
        base_size: Natural, unconstrained size of the item
        size_x: Sizing policy along X
        size_y: Sizing policy along Y
        size_z: Sizing policy along Z
        id: Host identifier, carried for traceability only
    """

    base_size: Vector3 = DEFAULT_ITEM_SIZE
    size_x: SizingPolicy = SizingPolicy.FIXED
    size_y: SizingPolicy = SizingPolicy.FIXED
    size_z: SizingPolicy = SizingPolicy.FIXED
    id: Any = None

    def __post_init__(self) -> None:
        base_size = Vector3.from_value(self.base_size, "base_size")
        for axis in Axis:
            if base_size[axis] < 0:
                raise ValidationError(f"base_size.{axis.value}", base_size[axis], "non-negative size")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "base_size", base_size)
        object.__setattr__(self, "size_x", SizingPolicy.parse(self.size_x))
        object.__setattr__(self, "size_y", SizingPolicy.parse(self.size_y))
        object.__setattr__(self, "size_z", SizingPolicy.parse(self.size_z))

    def policy(self, axis: Axis | str) -> SizingPolicy:
        """Get the sizing policy for an axis."""
        axis = Axis.parse(axis)
        if axis is Axis.X:
            return self.size_x
        if axis is Axis.Y:
            return self.size_y
        return self.size_z

    def has_fill(self, axis: Axis | str) -> bool:
        """Check whether the item fills along the given axis."""
        return self.policy(axis) is SizingPolicy.FILL

    @classmethod
    def from_properties(
        cls,
        id: Any,
        layout_properties: Mapping[str, Any] | None,
        natural_size: Vector3 | Sequence[float] | None = None,
    ) -> Self:
        """Create an item from a host layout property mapping.

        Recognized keys are ``sizeX``, ``sizeY`` and ``sizeZ`` (policy names)
        and ``fixedSize``. A fixed size overrides the natural size; a scalar
        fixed size applies to every axis and missing or zero components of a
        vector fixed size fall back to 1.

        Args:
            id: Host identifier for the item
            layout_properties: Host property mapping, or None for defaults
            natural_size: Size measured from the item's own geometry

        Returns:
            A new LayoutItem
        """
        props = layout_properties or {}
        base_size = _resolve_base_size(props.get("fixedSize"), natural_size)
        return cls(
            base_size=base_size,
            size_x=SizingPolicy.parse(props.get(Axis.X.size_property)),
            size_y=SizingPolicy.parse(props.get(Axis.Y.size_property)),
            size_z=SizingPolicy.parse(props.get(Axis.Z.size_property)),
            id=id,
        )


def _resolve_base_size(fixed_size: Any, natural_size: Vector3 | Sequence[float] | None) -> Vector3:
    if fixed_size:
        if isinstance(fixed_size, (int, float)):
            value = to_float(fixed_size, "fixedSize")
            return Vector3(value, value, value)
        if isinstance(fixed_size, Mapping):
            components = [fixed_size.get(key) for key in ("x", "y", "z")]
        else:
            components = list(fixed_size)
            if len(components) != 3:
                raise ValidationError("fixedSize", fixed_size, "number, 3-sequence or x/y/z mapping")
        return Vector3(*(to_float(c, "fixedSize") if c else 1.0 for c in components))

    if natural_size is not None:
        return Vector3.from_value(natural_size, "natural_size")

    return DEFAULT_ITEM_SIZE
