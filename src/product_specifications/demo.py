"""Demo: filter a small product catalogue by size and by colour AND size."""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from .attributes import ColorSpecification, SizeSpecification
from .base import AndSpecification
from .domain import Color, Product, Size
from .filter import GenericFilter, ProductFilter

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .filter import IFilter


def build_catalogue() -> list[Product]:
    """Return a fresh copy of the sample products."""
    return [
        Product(name="tree", color=Color.GREEN, size=Size.LARGE),
        Product(name="frog", color=Color.GREEN, size=Size.SMALL),
        Product(name="strawberry", color=Color.RED, size=Size.SMALL),
    ]


def format_products(products: Iterable[Product]) -> str:
    return "[" + ", ".join(str(product) for product in products) + "]"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="product_specifications",
        description="Filter a sample product catalogue with specifications.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log each filter pass at DEBUG level",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    products = build_catalogue()

    result = ProductFilter.filter_products(products, Size.SMALL)
    print(format_products(result))

    product_filter: IFilter[Product] = GenericFilter[Product]()

    small = SizeSpecification[Product](Size.SMALL)
    generic_result = product_filter.filter(products, small)
    print(f"Generic Solution: {format_products(generic_result)}")

    red = ColorSpecification[Product](Color.RED)
    specs = AndSpecification(red, small)
    multiple_spec_result = product_filter.filter(products, specs)
    print(f"Multiple Spec Result: {format_products(multiple_spec_result)}")
    return 0
