"""Shared fixtures for product specification tests."""

from __future__ import annotations

from itertools import product as cartesian

import pytest

from product_specifications import Color, Product, Size


@pytest.fixture
def tree() -> Product:
    return Product(name="tree", color=Color.GREEN, size=Size.LARGE)


@pytest.fixture
def frog() -> Product:
    return Product(name="frog", color=Color.GREEN, size=Size.SMALL)


@pytest.fixture
def strawberry() -> Product:
    return Product(name="strawberry", color=Color.RED, size=Size.SMALL)


@pytest.fixture
def products(tree: Product, frog: Product, strawberry: Product) -> list[Product]:
    return [tree, frog, strawberry]


@pytest.fixture
def catalogue() -> list[Product]:
    """One product for every colour/size combination, in a stable order."""
    return [
        Product(name=f"item-{i}", color=color, size=size)
        for i, (color, size) in enumerate(cartesian(Color, Size))
    ]
