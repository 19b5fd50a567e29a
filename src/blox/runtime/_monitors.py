"""Monitor (live watcher) state.

Monitors are keyed by variable id.  Visibility only changes through
``change_block`` events shaped like the palette checkbox toggle.
"""

from __future__ import annotations

import logging
from typing import Literal, Protocol, runtime_checkable

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class MonitorEvent(BaseModel):
    id: str
    element: Literal["checkbox"] = "checkbox"
    value: bool


@runtime_checkable
class MonitorSubsystem(Protocol):
    """Anything that accepts monitor checkbox events."""

    def change_block(self, event: MonitorEvent) -> None: ...


class MonitorRecord:
    """Last known state of one monitor."""

    __slots__ = ("id", "visible", "value")

    def __init__(self, id: str, visible: bool = False, value: object = None) -> None:
        self.id = id
        self.visible = visible
        self.value = value


class MonitorRegistry:
    """Default monitor subsystem: remembers visibility and last value."""

    def __init__(self) -> None:
        self.records: dict[str, MonitorRecord] = {}

    def change_block(self, event: MonitorEvent) -> None:
        record = self.records.get(event.id)
        if record is None:
            record = self.records[event.id] = MonitorRecord(event.id)
        record.visible = event.value
        logger.debug("Monitor %s visible=%s", event.id, event.value)

    def is_visible(self, monitor_id: str) -> bool:
        record = self.records.get(monitor_id)
        return record is not None and record.visible

    def visible_ids(self) -> list[str]:
        return [r.id for r in self.records.values() if r.visible]

    def update(self, monitor_id: str, value: object) -> bool:
        """Store a polled value; True when it is a different object.

        Identity, not equality, decides: list monitors are re-rendered
        only when the poll hands back a new list.
        """
        record = self.records.get(monitor_id)
        if record is None:
            record = self.records[monitor_id] = MonitorRecord(monitor_id)
        elif record.value is value:
            return False
        record.value = value
        return True
