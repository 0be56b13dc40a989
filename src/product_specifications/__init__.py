from .attributes import ColorSpecification, SizeSpecification
from .base import AndSpecification, BaseSpecification
from .domain import (
    Color,
    Colored,
    Product,
    Size,
    Sized,
    require_capability,
    supports_capability,
)
from .exceptions import CapabilityError, SpecificationError
from .filter import GenericFilter, IFilter, ProductFilter
from .specification import ISpecification

__all__ = [
    # Core types
    "ISpecification",
    "BaseSpecification",
    "AndSpecification",
    "ColorSpecification",
    "SizeSpecification",
    # Domain
    "Product",
    "Color",
    "Size",
    "Colored",
    "Sized",
    "require_capability",
    "supports_capability",
    # Filters
    "IFilter",
    "GenericFilter",
    "ProductFilter",
    # Exceptions
    "SpecificationError",
    "CapabilityError",
]
