"""The predicate contract every product criterion and composite satisfies."""

from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol, Generic[T]):
    """
    A single yes/no question about a candidate, such as "is it red?".

    Filters accept anything with this shape, so a colour check, a size
    check and an AND of both are interchangeable.  Contravariant in ``T``:
    a specification over ``Colored`` things also works for ``Product``.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """Answer for *candidate* without reading or changing anything else."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """Describe the criterion for logs, e.g. ``{"op": "=", "attr": "size"}``."""
        ...
