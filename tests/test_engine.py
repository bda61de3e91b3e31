"""Unit tests for the layout engine entry point.

Tests dispatch, determinism and fail-soft handling, plus the properties
that hold for every layout direction.
"""

import logging
import random

import numpy as np
import pytest

from layout3d import (
    FILL_FLOOR,
    LayoutConfig,
    LayoutEngine,
    LayoutItem,
    LayoutResult,
    Padding,
    SizingPolicy,
    Vector3,
    calculate_layout,
    layout_debug_info,
)

DIRECTIONS = ["x", "y", "z", "xy", "xyz"]


def random_items(seed, count, fill_ratio=0.3):
    """Create a reproducible mix of fixed, hug and fill items."""
    rng = random.Random(seed)
    policies = [SizingPolicy.FIXED, SizingPolicy.HUG]

    items = []
    for i in range(count):
        size = Vector3(rng.uniform(0.2, 3), rng.uniform(0.2, 3), rng.uniform(0.2, 3))
        per_axis = [
            SizingPolicy.FILL if rng.random() < fill_ratio else rng.choice(policies)
            for _ in range(3)
        ]
        items.append(LayoutItem(size, *per_axis, id=f"item-{i}"))
    return items


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_deterministic(direction):
    """Identical calls produce identical results."""
    items = random_items(1, 7)
    config = LayoutConfig(direction=direction, gap=0.3, padding=Padding(left=0.2, top=0.1))

    first = calculate_layout(items, config, container_size=(20, 15, 10), anchor=(1, 2, 3))
    second = calculate_layout(items, config, container_size=(20, 15, 10), anchor=(1, 2, 3))

    assert first == second


@pytest.mark.parametrize("direction", DIRECTIONS)
@pytest.mark.parametrize("count", [1, 4, 9])
def test_one_position_and_size_per_item(direction, count):
    """Nothing is dropped or reordered."""
    items = random_items(count, count)

    result = calculate_layout(items, LayoutConfig(direction=direction), container_size=(8, 8, 8))

    assert len(result.positions) == len(result.sizes) == count


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_fixed_items_keep_base_size(direction):
    """Items without fill on any axis keep their base size exactly."""
    items = random_items(2, 6, fill_ratio=0.0)

    result = calculate_layout(items, LayoutConfig(direction=direction, gap=0.1), container_size=(5, 5, 5))

    assert [s for s in result.sizes] == [item.base_size for item in items]


@pytest.mark.parametrize("seed", range(5))
def test_fill_floor(seed):
    """No fill-resolved dimension drops below the floor."""
    items = random_items(seed, 6, fill_ratio=0.6)
    config = LayoutConfig(direction="x", gap=0.5, padding=Padding(top=2, bottom=2))

    # A container too small for its fixed items
    result = calculate_layout(items, config, container_size=(1, 1, 1))

    for item, size in zip(items, result.sizes):
        for axis in "xyz":
            if item.has_fill(axis):
                assert size[axis] >= FILL_FLOOR


@pytest.mark.parametrize("direction", ["x", "y", "z"])
@pytest.mark.parametrize("seed", range(3))
def test_linear_layouts_center_on_anchor(direction, seed):
    """Linear layouts center their bounds on the anchor along the layout axis."""
    items = random_items(seed, 5)
    anchor = Vector3(-4, 2.5, 7)

    result = calculate_layout(items, LayoutConfig(direction=direction, gap=0.25), (30, 30, 30), anchor)

    assert result.bounds.center[direction] == pytest.approx(anchor[direction], abs=1e-6)


def test_unknown_direction_fails_soft(caplog):
    """An unknown direction logs a warning and returns zero positions with base sizes."""
    items = [LayoutItem(Vector3(1, 2, 3)), LayoutItem(Vector3(2, 2, 2), size_x=SizingPolicy.FILL)]

    with caplog.at_level(logging.WARNING, logger="layout3d"):
        result = calculate_layout(items, LayoutConfig(direction="diagonal"), container_size=(10, 10, 10))

    assert result.positions == (Vector3.zero(), Vector3.zero())
    assert result.sizes == (Vector3(1, 2, 3), Vector3(2, 2, 2))
    assert not result.ok
    assert "diagonal" in result.diagnostics[0]
    assert "Unknown layout direction" in caplog.text


@pytest.mark.parametrize(
    "kwargs,name",
    [
        ({"container_size": (1, 2)}, "container_size"),
        ({"container_size": (5, float("nan"), 1)}, "container_size"),
        ({"anchor": {"x": 1, "y": 2}}, "anchor"),
        ({"anchor": "origin"}, "anchor"),
    ],
)
def test_malformed_vectors_fail_soft(kwargs, name, caplog):
    """A malformed container size or anchor falls back instead of raising."""
    items = [LayoutItem(Vector3(1, 2, 3)), LayoutItem(Vector3(2, 2, 2), size_x=SizingPolicy.FILL)]

    with caplog.at_level(logging.WARNING, logger="layout3d"):
        result = calculate_layout(items, LayoutConfig(direction="x"), **kwargs)

    assert result.positions == (Vector3.zero(), Vector3.zero())
    assert result.sizes == (Vector3(1, 2, 3), Vector3(2, 2, 2))
    assert len(result.diagnostics) == 1
    assert name in result.diagnostics[0]
    assert name in caplog.text


@pytest.mark.parametrize("direction", DIRECTIONS + ["diagonal"])
def test_empty_items(direction):
    """An empty item list is valid input with an empty result."""
    result = calculate_layout([], LayoutConfig(direction=direction))

    assert result == LayoutResult.empty()
    assert result.bounds.size == Vector3.zero()
    assert result.ok


def test_inputs_are_not_mutated():
    """The engine never changes its inputs."""
    items = random_items(3, 4, fill_ratio=0.5)
    snapshot = [(item.base_size, item.size_x, item.size_y, item.size_z) for item in items]

    calculate_layout(items, LayoutConfig(direction="y", gap=0.2), container_size=(6, 6, 6))

    assert [(item.base_size, item.size_x, item.size_y, item.size_z) for item in items] == snapshot


def test_layout_engine_wraps_config():
    """LayoutEngine gives the same result as the module-level function."""
    items = random_items(4, 3)
    config = LayoutConfig(direction="z", gap=1.0)
    engine = LayoutEngine(config)

    assert engine.calculate_layout(items, (4, 4, 12)) == calculate_layout(items, config, (4, 4, 12))
    assert engine.direction.value == "z"
    assert LayoutEngine().config == LayoutConfig()


def test_layout_debug_info():
    """Debug info reports the layout as plain data."""
    items = [LayoutItem(Vector3(1, 1, 1), id="a"), LayoutItem(Vector3(1, 1, 1), id="b")]
    config = LayoutConfig(direction="x", gap=1.0)

    info = layout_debug_info(items, config)

    assert info["item_count"] == 2
    assert info["item_ids"] == ["a", "b"]
    assert info["layout_config"]["direction"] == "x"
    assert np.allclose(info["positions"], [(-1.0, 0, 0), (1.0, 0, 0)])
    assert np.allclose(info["bounds"]["size"], (3, 1, 1))
    assert info["diagnostics"] == []
    assert LayoutEngine(config).debug_info(items) == info
