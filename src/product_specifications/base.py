from typing import Any, Generic, TypeVar

from .specification import ISpecification

T = TypeVar("T", contravariant=True)


class BaseSpecification(Generic[T], ISpecification[T]):
    """Base class for specifications with logic operator support."""

    def __and__(self, other: ISpecification[T]) -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def merge(self, other: ISpecification[T]) -> "AndSpecification[T]":
        """Merge with another specification using logical AND."""
        return AndSpecification(self, other)


class AndSpecification(BaseSpecification[T]):
    """
    Logical AND composite specification.

    Both children must be specifications over the same candidate type.
    Either child may itself be a composite, so ``a & b & c`` nests as
    ``AndSpecification(AndSpecification(a, b), c)``.
    """

    def __init__(self, left: ISpecification[T], right: ISpecification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(
            candidate
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [self.left.to_dict(), self.right.to_dict()],
        }

    def __repr__(self) -> str:
        return f"AndSpecification({self.left!r}, {self.right!r})"
