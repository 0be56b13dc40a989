"""
Attribute specifications: one equality criterion per capability.

Each specification is generic over the candidate type and bound to the
capability it reads, so pairing ``ColorSpecification`` with a type that
has no ``color`` is rejected by the type checker.  When the candidate type
is only known at runtime, use ``for_type`` to get the same rejection at
construction time instead.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .base import BaseSpecification
from .domain.capabilities import Colored, Sized, require_capability
from .domain.enums import Color, Size

C = TypeVar("C", bound=Colored, contravariant=True)
S = TypeVar("S", bound=Sized, contravariant=True)


class ColorSpecification(BaseSpecification[C]):
    """Satisfied when the candidate's ``color`` equals the target colour."""

    def __init__(self, color: Color) -> None:
        self.color = color

    @classmethod
    def for_type(cls, entity_type: type, color: Color) -> ColorSpecification[Any]:
        """
        Build a colour specification for *entity_type*.

        ``color`` must be visible on the class: annotated, a property, listed
        in ``__slots__`` or assigned in ``__init__``.

        Raises:
            CapabilityError: If *entity_type* does not expose ``color``.
        """
        require_capability(entity_type, Colored)
        return cls(color)

    def is_satisfied_by(self, candidate: C) -> bool:
        return candidate.color == self.color

    def to_dict(self) -> dict[str, Any]:
        return {"op": "=", "attr": "color", "val": self.color.value}

    def __repr__(self) -> str:
        return f"ColorSpecification({self.color.value!r})"


class SizeSpecification(BaseSpecification[S]):
    """Satisfied when the candidate's ``size`` equals the target size."""

    def __init__(self, size: Size) -> None:
        self.size = size

    @classmethod
    def for_type(cls, entity_type: type, size: Size) -> SizeSpecification[Any]:
        """
        Build a size specification for *entity_type*.

        ``size`` must be visible on the class: annotated, a property, listed
        in ``__slots__`` or assigned in ``__init__``.

        Raises:
            CapabilityError: If *entity_type* does not expose ``size``.
        """
        require_capability(entity_type, Sized)
        return cls(size)

    def is_satisfied_by(self, candidate: S) -> bool:
        return candidate.size == self.size

    def to_dict(self) -> dict[str, Any]:
        return {"op": "=", "attr": "size", "val": self.size.value}

    def __repr__(self) -> str:
        return f"SizeSpecification({self.size.value!r})"
