"""Variable and list entities.

A single ``Variable`` model covers every kind of entity stored in a
target's namespace; the ``type`` field selects scalar, list or broadcast
semantics.  Identity is the ``id``, never the ``name``.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

ScratchValue = bool | int | float | str

_UID_SOUP = (
    "!#%()*+,-./:;=?@[]^_`{|}~"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
)


def new_uid(length: int = 20) -> str:
    """Generate an entity id from the project id alphabet."""
    return "".join(random.choice(_UID_SOUP) for _ in range(length))


class VariableType(str, Enum):
    SCALAR = ""
    LIST = "list"
    BROADCAST_MESSAGE = "broadcast_msg"


class Variable(BaseModel):
    """A named value container owned by exactly one target.

    ``value`` is not re-validated on assignment, so a list keeps the
    identity of its backing sequence until an operation replaces it.
    ``monitor_up_to_date`` and ``monitor_snapshot`` cache the last list
    handed to a monitor poll and are never serialised.
    """

    id: str = Field(default_factory=new_uid)
    name: str
    type: VariableType = VariableType.SCALAR
    value: Any = None
    is_cloud: bool = False
    monitor_up_to_date: bool = Field(default=False, exclude=True)
    monitor_snapshot: list | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _default_value(self):
        if self.value is None:
            if self.type == VariableType.LIST:
                self.value = []
            elif self.type == VariableType.BROADCAST_MESSAGE:
                self.value = self.name
            else:
                self.value = 0
        elif self.type == VariableType.LIST and not isinstance(self.value, list):
            raise ValueError(f"list '{self.name}' needs a list value")
        return self

    @property
    def is_list(self) -> bool:
        return self.type == VariableType.LIST
