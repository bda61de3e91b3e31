"""Model layer for layout3d.

This module contains the immutable value types consumed and produced
by the layout engine.
"""

from layout3d.model.axis import Axis
from layout3d.model.item import DEFAULT_ITEM_SIZE, LayoutItem, SizingPolicy
from layout3d.model.vector import Vector3

__all__ = ["Axis", "DEFAULT_ITEM_SIZE", "LayoutItem", "SizingPolicy", "Vector3"]
