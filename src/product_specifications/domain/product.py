"""The filterable product record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .enums import Color, Size


class Product(BaseModel):
    """A named product with a colour and a size.

    Frozen, so equality and hashing are structural over all fields.
    Conforms to both :class:`~.capabilities.Colored` and
    :class:`~.capabilities.Sized` structurally; neither is a base class.

    Usage::

        frog = Product(name="frog", color=Color.GREEN, size=Size.SMALL)
        str(frog)  # "small green frog"
    """

    model_config = ConfigDict(frozen=True)

    name: str
    color: Color
    size: Size

    def __str__(self) -> str:
        return f"{self.size} {self.color} {self.name}"
