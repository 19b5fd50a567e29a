"""Shared test helpers for the blox test suite."""

from blox.model.variables import Variable, VariableType
from blox.runtime import create_runtime


def make_list(items=None, name="things", **kwargs):
    """Build a list entity holding *items*."""
    return Variable(name=name, type=VariableType.LIST, value=list(items or []), **kwargs)


def make_scalar(value=0, name="score", **kwargs):
    return Variable(name=name, type=VariableType.SCALAR, value=value, **kwargs)


class RecordingProvider:
    """Cloud provider that records every request."""

    def __init__(self):
        self.calls = []

    def update_variable(self, name, value):
        self.calls.append(("update", name, value))

    def rename_variable(self, old_name, new_name):
        self.calls.append(("rename", old_name, new_name))

    def delete_variable(self, name):
        self.calls.append(("delete", name))


def make_runtime(**kwargs):
    kwargs.setdefault("sprites", ["Sprite1"])
    return create_runtime(**kwargs)
