"""Domain primitives: the product record, its enums and capabilities."""

from __future__ import annotations

from .capabilities import (
    Colored,
    Sized,
    require_capability,
    supports_capability,
)
from .enums import Color, Size
from .product import Product

__all__: list[str] = [
    "Color",
    "Colored",
    "Product",
    "Size",
    "Sized",
    "require_capability",
    "supports_capability",
]
