"""Scalar variable operations.

``emit`` is the cloud update hook, called as ``emit(name, value)`` only
for cloud variables and only after the value actually changed.
"""

from __future__ import annotations

from collections.abc import Callable

from blox.model.variables import Variable

from ._cast import strict_equals, to_number

CloudEmitter = Callable[[str, object], None]


def set_value(var: Variable, value: object, emit: CloudEmitter | None = None) -> None:
    if strict_equals(var.value, value):
        return
    var.value = value
    if var.is_cloud and emit is not None:
        emit(var.name, var.value)


def change_by(var: Variable, delta: object, emit: CloudEmitter | None = None) -> None:
    """Add *delta* numerically; a zero delta touches nothing."""
    d = to_number(delta)
    if d == 0:
        return
    var.value = to_number(var.value) + d
    if var.is_cloud and emit is not None:
        emit(var.name, var.value)
