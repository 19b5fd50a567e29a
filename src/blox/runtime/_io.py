"""I/O devices reachable from blocks through ``io_query``.

Only the ``cloud`` device exists.  Requests are fire-and-forget: the
device forwards them to a provider when one is attached and never
reports back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Protocol, runtime_checkable

from blox.model.target import Target
from blox.model.variables import VariableType

from ._scalars import set_value

logger = logging.getLogger(__name__)


@runtime_checkable
class CloudProvider(Protocol):
    """Connection to the remote cloud-variable store."""

    def update_variable(self, name: str, value: object) -> None: ...

    def rename_variable(self, old_name: str, new_name: str) -> None: ...

    def delete_variable(self, name: str) -> None: ...


class Cloud:
    """The ``cloud`` device.

    Parameters
    ----------
    stage : Target
        Where incoming server updates are applied.
    provider : CloudProvider | None
        Outgoing requests are dropped while no provider is attached.
    """

    def __init__(self, stage: Target, provider: CloudProvider | None = None) -> None:
        self.stage = stage
        self.provider = provider

    def request_update_variable(self, name: str, value: object) -> None:
        if self.provider is not None:
            self.provider.update_variable(name, value)

    def request_rename_variable(self, old_name: str, new_name: str) -> None:
        if self.provider is not None:
            self.provider.rename_variable(old_name, new_name)

    def request_delete_variable(self, name: str) -> None:
        if self.provider is not None:
            self.provider.delete_variable(name)

    def post_data(self, data: Mapping) -> None:
        """Apply a message from the server, e.g. ``{"varUpdate": {...}}``."""
        update = data.get("varUpdate")
        if update:
            self.update_cloud_variable(update.get("name"), update.get("value"))

    def update_cloud_variable(self, name: str, value: object) -> None:
        variable = self.stage.lookup_variable_by_name_and_type(name, VariableType.SCALAR)
        if variable is None or not variable.is_cloud:
            logger.debug("Ignoring cloud update for unknown variable %r", name)
            return
        # No emitter: a server update must not echo back to the server.
        set_value(variable, value)


class IODevices:
    """Registry of devices addressed by name.

    Methods are addressed by their wire name (``requestUpdateVariable``),
    which maps onto the device's snake_case method.
    """

    def __init__(self, devices: Mapping[str, object] | None = None) -> None:
        self.devices: dict[str, object] = dict(devices or {})

    def query(self, device: str, func: str, args: list | tuple = ()) -> object:
        target = self.devices.get(device)
        if target is None:
            logger.debug("No I/O device %r", device)
            return None
        method: Callable | None = getattr(target, _snake_case(func), None)
        if method is None:
            logger.debug("I/O device %r has no method %r", device, func)
            return None
        return method(*args)


def _snake_case(name: str) -> str:
    out = []
    for ch in name:
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out).lstrip("_")
