"""Block-argument references to variables and lists.

A variable field on a block arrives either as a bare name or as a menu
selection handle that carries the name.  Both are normalised into the
``VariableRef`` union before lookup.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class NameRef(BaseModel):
    """A variable referenced by its plain name."""

    kind: Literal["name"] = "name"
    name: str


class HandleRef(BaseModel):
    """A menu selection handle; ``id`` is informational only."""

    kind: Literal["handle"] = "handle"
    name: str
    id: str | None = None


VariableRef = Annotated[
    Union[NameRef, HandleRef],
    Field(discriminator="kind"),
]


def as_variable_ref(obj: object) -> VariableRef:
    """Normalise a raw block argument into a ``VariableRef``.

    A ``name`` carried by a mapping or attribute takes precedence over the
    object's own string form.
    """
    if isinstance(obj, (NameRef, HandleRef)):
        return obj
    if isinstance(obj, str):
        return NameRef(name=obj)
    if isinstance(obj, Mapping) and "name" in obj:
        return HandleRef(name=str(obj["name"]), id=_handle_id(obj.get("id")))
    name = getattr(obj, "name", None)
    if isinstance(name, str):
        return HandleRef(name=name, id=_handle_id(getattr(obj, "id", None)))
    return NameRef(name=str(obj))


def _handle_id(value: object) -> str | None:
    return value if isinstance(value, str) else None


def ref_name(obj: object) -> str:
    """Return the plain name a reference resolves to."""
    return as_variable_ref(obj).name
