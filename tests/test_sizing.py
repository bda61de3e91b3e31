"""Unit tests for the Fixed / Fill / Hug sizing resolver."""

import pytest

from layout3d import FILL_FLOOR, LayoutConfig, LayoutItem, Padding, SizingPolicy, Vector3, calculate_fill_sizes, resolve_size
from layout3d.layout.sizing import available_fill_space, categorize

FIXED = SizingPolicy.FIXED
FILL = SizingPolicy.FILL
HUG = SizingPolicy.HUG


@pytest.mark.parametrize("policy", [FIXED, HUG])
def test_fixed_and_hug_keep_base_size(policy):
    """Fixed and hug axes always return the base size."""
    item = LayoutItem(Vector3(1.25, 0.5, 3.0), size_x=policy, size_y=policy, size_z=policy)

    size = resolve_size(item, "x", available_space=10.0, fill_count=1, container_size=Vector3(9, 9, 9))

    assert size == item.base_size


def test_primary_axis_fill_divides_available_space():
    """Fill on the layout axis receives an equal share of the available space."""
    item = LayoutItem(Vector3(1, 1, 1), size_y=FILL)

    size = resolve_size(item, "y", available_space=6.0, fill_count=4)

    assert size == Vector3(1, 1.5, 1)


def test_primary_axis_fill_floor():
    """A fill share below the floor is raised to the floor."""
    item = LayoutItem(Vector3(1, 1, 1), size_x=FILL)

    size = resolve_size(item, "x", available_space=0.0, fill_count=3)

    assert size.x == FILL_FLOOR


def test_cross_axis_fill_with_container():
    """Fill on a cross axis uses the container size minus padding."""
    item = LayoutItem(Vector3(1, 1, 1), size_z=FILL)
    padding = Padding(front=0.5, back=0.25)

    size = resolve_size(item, "x", container_size=Vector3(4, 4, 4), padding=padding)

    assert size.z == pytest.approx(3.25)


def test_cross_axis_fill_without_container():
    """Without a container size there is nothing to fill against."""
    item = LayoutItem(Vector3(1, 2, 3), size_y=FILL, size_z=FILL)

    assert resolve_size(item, "x") == Vector3(1, 2, 3)


def test_degenerate_fixed_size_passes_through():
    """A zero base size on a fixed axis is returned unchanged."""
    item = LayoutItem(Vector3(0, 1, 1))

    assert resolve_size(item, "x").x == 0.0


def test_resolve_size_does_not_mutate_item():
    """Resolving a size leaves the item untouched."""
    item = LayoutItem(Vector3(1, 1, 1), size_x=FILL)

    resolve_size(item, "x", available_space=5.0, fill_count=1)

    assert item.base_size == Vector3(1, 1, 1)


def test_categorize_counts_hug_as_fixed():
    """Hug items count toward the fixed total along the axis."""
    items = [
        LayoutItem(Vector3(2, 1, 1)),
        LayoutItem(Vector3(3, 1, 1), size_x=HUG),
        LayoutItem(Vector3(5, 1, 1), size_x=FILL),
    ]

    categories = categorize(items, "x")

    assert categories.total_fixed == 5.0
    assert categories.fill_count == 1
    assert categories.fill == (items[2],)


def test_available_fill_space():
    """Available space subtracts fixed sizes, gaps and padding, never below zero."""
    items = [LayoutItem(Vector3(2, 1, 1)), LayoutItem(Vector3(1, 1, 1), size_x=FILL)]
    padding = Padding(left=0.5, right=0.5)

    assert available_fill_space(items, "x", 1.0, padding, 10.0) == pytest.approx(6.0)
    assert available_fill_space(items, "x", 1.0, padding, 2.0) == 0.0
    assert available_fill_space(items, "x", 1.0, padding, None) is None
    # No fill items on this axis
    assert available_fill_space(items, "y", 1.0, padding, 10.0) is None


def test_calculate_fill_sizes():
    """Fill sizes can be resolved without placing the items."""
    items = [
        LayoutItem(Vector3(1, 1, 1), size_x=FILL, size_y=FILL),
        LayoutItem(Vector3(1, 1, 1)),
    ]
    config = LayoutConfig(direction="x", gap=1.0, padding=Padding(top=1.0))

    sizes = calculate_fill_sizes(items, config, (6, 5, 1))

    assert sizes[0] == Vector3(4, 4, 1)
    assert sizes[1] == Vector3(1, 1, 1)
    assert calculate_fill_sizes([], config, (6, 5, 1)) == []
