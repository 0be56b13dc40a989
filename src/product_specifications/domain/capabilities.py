"""
Attribute capabilities.

A capability is a structural contract: an entity type conforms by
exposing the named attribute, never by inheriting from the protocol.
A single entity type may satisfy any number of unrelated capabilities.
"""

from __future__ import annotations

import dis
import inspect
import logging
from typing import Protocol, runtime_checkable

from ..exceptions import CapabilityError
from .enums import Color, Size

logger = logging.getLogger(__name__)


@runtime_checkable
class Colored(Protocol):
    """Entity exposes a readable ``color`` attribute."""

    @property
    def color(self) -> Color: ...


@runtime_checkable
class Sized(Protocol):
    """Entity exposes a readable ``size`` attribute."""

    @property
    def size(self) -> Size: ...


def capability_members(capability: type) -> frozenset[str]:
    """Return the public attribute names a capability protocol declares."""
    names = set(inspect.get_annotations(capability))
    names.update(
        name
        for name, member in vars(capability).items()
        if isinstance(member, property)
    )
    return frozenset(name for name in names if not name.startswith("_"))


def _slot_names(klass: type) -> list[str]:
    slots = vars(klass).get("__slots__", ())
    if isinstance(slots, str):
        return [slots]
    return list(slots)


def _init_assignments(klass: type) -> set[str]:
    """Names stored as ``<obj>.<name> = ...`` in the class's own ``__init__``."""
    init = vars(klass).get("__init__")
    if not inspect.isfunction(init):
        return set()
    return {
        instruction.argval
        for instruction in dis.get_instructions(init)
        if instruction.opname == "STORE_ATTR"
    }


def declared_attributes(entity_type: type) -> frozenset[str]:
    """
    Collect the attribute names an entity type declares.

    Looks along the MRO at annotations, properties, ``__slots__`` and
    attributes assigned in ``__init__``, plus pydantic ``model_fields``.
    Fields without defaults are not class attributes on pydantic models or
    dataclasses, hence the annotation walk.  An attribute first set in some
    other method is invisible here and must be annotated on the class.
    """
    names: set[str] = set()
    for klass in inspect.getmro(entity_type):
        names.update(inspect.get_annotations(klass))
        names.update(_slot_names(klass))
        names.update(_init_assignments(klass))
        names.update(
            name
            for name, member in vars(klass).items()
            if isinstance(member, property)
        )
    names.update(getattr(entity_type, "model_fields", {}))
    return frozenset(name for name in names if not name.startswith("_"))


def supports_capability(entity_type: type, capability: type) -> bool:
    """True when *entity_type* declares every member of *capability*."""
    return capability_members(capability) <= declared_attributes(entity_type)


def require_capability(entity_type: type, capability: type) -> None:
    """
    Reject *entity_type* unless it conforms to *capability*.

    Raises:
        CapabilityError: listing the missing attribute names.
    """
    available = declared_attributes(entity_type)
    missing = sorted(capability_members(capability) - available)
    if not missing:
        return
    logger.debug(
        "%s lacks capability %s (missing: %s)",
        entity_type.__name__,
        capability.__name__,
        ", ".join(missing),
    )
    raise CapabilityError(
        entity_type.__name__,
        capability.__name__,
        missing=missing,
        available_fields=sorted(available),
    )
