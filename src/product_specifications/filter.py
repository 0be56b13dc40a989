"""
Filters: apply a specification to a sequence of candidates.

``GenericFilter`` works with any specification, simple or composite.
``ProductFilter`` is the hard-wired, size-only filter that specifications
replace; it is kept for comparison and must agree with ``GenericFilter``
running a ``SizeSpecification``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .domain.enums import Size
    from .domain.product import Product
    from .specification import ISpecification

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IFilter(Protocol, Generic[T]):
    """Protocol for anything that narrows a sequence by a specification."""

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> list[T]:
        ...


class GenericFilter(Generic[T]):
    """
    Keep the items satisfying a specification, in their original order.

    Usage::

        small = SizeSpecification[Product](Size.SMALL)
        GenericFilter[Product]().filter(products, small)

    The input is consumed once and never mutated; every item is tested
    exactly once and the result is always a new list.
    """

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> list[T]:
        output: list[T] = []
        tested = 0
        for item in items:
            tested += 1
            if spec.is_satisfied_by(item):
                output.append(item)

        logger.debug(
            "%s matched %d of %d items",
            type(spec).__name__,
            len(output),
            tested,
        )
        return output


class ProductFilter:
    """Size-only product filter written without specifications."""

    @staticmethod
    def filter_products(products: Iterable[Product], size: Size) -> list[Product]:
        return [product for product in products if product.size == size]
