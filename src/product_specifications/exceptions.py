"""
Specification exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for log-friendly error payloads.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SpecificationError(Exception):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class CapabilityError(SpecificationError):
    """
    Entity type does not expose the attributes a specification needs.

    Raised at construction time so the mismatch never reaches filtering.

    Example error message::

        'Tree' does not support capability 'Colored'.
        Missing attributes: color
        Did you mean one of these?
          • colour

        Available fields: colour, name
    """

    def __init__(
        self,
        entity_type: str,
        capability: str,
        *,
        missing: list[str],
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.entity_type = entity_type
        self.capability = capability
        self.missing = missing
        self.available_fields = available_fields

        self.suggestions: list[str] = []
        for name in missing:
            for match in get_close_matches(name, available_fields, n=3, cutoff=cutoff):
                if match not in self.suggestions:
                    self.suggestions.append(match)

        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [
            f"'{self.entity_type}' does not support capability '{self.capability}'.",
            f"Missing attributes: {', '.join(self.missing)}",
        ]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        preview = ", ".join(self.available_fields[:15])
        if len(self.available_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        lines.append(
            "Declare missing attributes with a class annotation, a property,"
            " a __slots__ entry or an assignment in __init__."
        )
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CAPABILITY_NOT_SUPPORTED",
            "entity_type": self.entity_type,
            "capability": self.capability,
            "missing": self.missing,
            "suggestions": self.suggestions,
            "available_fields": self.available_fields,
        }
