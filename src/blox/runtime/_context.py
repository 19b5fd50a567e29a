"""Runtime context: the user-facing object for running data blocks.

Owns the stage and sprite targets, the I/O devices and the monitor
subsystem, and dispatches block opcodes against them.
"""

from __future__ import annotations

import logging

from blox.model.target import Target
from blox.model.variables import Variable

from . import _lists
from ._blocks import BlockUtility, DataBlocks
from ._cast import BloxError
from ._io import Cloud, CloudProvider, IODevices
from ._monitors import MonitorRegistry, MonitorSubsystem
from ._scope import ScopeChain

logger = logging.getLogger(__name__)


class RuntimeContext:
    """Stage, sprites and the services data blocks reach through ``util``.

    Parameters
    ----------
    stage : Target
        The global scope.
    sprites : list[Target] | None
        Sprite targets; names must be unique.
    cloud_provider : CloudProvider | None
        Receiver of cloud variable updates.
    monitors : MonitorSubsystem | None
        Receiver of visibility events (default: a ``MonitorRegistry``).
    """

    def __init__(
        self,
        stage: Target,
        sprites: list[Target] | None = None,
        cloud_provider: CloudProvider | None = None,
        monitors: MonitorSubsystem | None = None,
    ) -> None:
        if not stage.is_stage:
            raise BloxError(f"Target {stage.name!r} is not a stage")
        self.stage = stage
        self.sprites: dict[str, Target] = {}
        for sprite in sprites or []:
            if sprite.is_stage:
                raise BloxError(f"Sprite {sprite.name!r} is marked as a stage")
            if sprite.name in self.sprites:
                raise BloxError(f"Duplicate sprite name {sprite.name!r}")
            self.sprites[sprite.name] = sprite
        self.editing_target: Target = stage
        self.cloud = Cloud(stage, cloud_provider)
        self.io = IODevices({"cloud": self.cloud})
        self.monitors = monitors if monitors is not None else MonitorRegistry()
        self.data_blocks = DataBlocks(self)
        self._primitives = self.data_blocks.get_primitives()

    # -----------------------------------------------------------------------
    # Targets and scope
    # -----------------------------------------------------------------------

    def get_target(self, name: str | None) -> Target:
        if name is None or name == self.stage.name:
            return self.stage
        try:
            return self.sprites[name]
        except KeyError:
            raise BloxError(
                f"No target named {name!r}. Available: {sorted(self.sprites)}"
            ) from None

    def set_editing_target(self, name: str | None) -> None:
        self.editing_target = self.get_target(name)

    def scope(self, target: Target | str | None = None) -> ScopeChain:
        """Scope chain for *target* (default: the editing target)."""
        if target is None:
            local = self.editing_target
        elif isinstance(target, Target):
            local = target
        else:
            local = self.get_target(target)
        return ScopeChain(self.stage, local)

    def find_variable(self, variable_id: str) -> tuple[Target, Variable] | None:
        for target in [self.stage, *self.sprites.values()]:
            variable = target.lookup_variable_by_id(variable_id)
            if variable is not None:
                return target, variable
        return None

    # -----------------------------------------------------------------------
    # Block execution
    # -----------------------------------------------------------------------

    def execute(
        self,
        opcode: str,
        args: dict | None = None,
        target: Target | str | None = None,
        update_monitor: bool = False,
    ) -> object:
        """Run one block and return what it reports."""
        try:
            primitive = self._primitives[opcode]
        except KeyError:
            raise BloxError(f"Unknown opcode {opcode!r}") from None
        util = BlockUtility(self.scope(target), self, update_monitor=update_monitor)
        return primitive(args or {}, util)

    def io_query(self, device: str, func: str, args: list | tuple = ()) -> object:
        return self.io.query(device, func, args)

    def poll_monitors(self) -> list[str]:
        """Re-read every visible monitor; return ids whose value changed.

        Lists are read in monitor-poll mode, so an unchanged list reports
        the same object and is skipped.
        """
        if not isinstance(self.monitors, MonitorRegistry):
            return []
        changed: list[str] = []
        for monitor_id in self.monitors.visible_ids():
            found = self.find_variable(monitor_id)
            if found is None:
                continue
            _, variable = found
            if variable.is_list:
                value = _lists.get_contents(variable, for_monitor=True)
            else:
                value = variable.value
            if self.monitors.update(monitor_id, value):
                changed.append(monitor_id)
        return changed

    # -----------------------------------------------------------------------
    # Editing
    # -----------------------------------------------------------------------

    def rename_variable(self, variable_id: str, new_name: str) -> Variable | None:
        found = self.find_variable(variable_id)
        if found is None:
            return None
        target, variable = found
        old_name = variable.name
        target.rename_variable(variable_id, new_name)
        logger.debug("Renamed variable %s from %r to %r", variable_id, old_name, new_name)
        if variable.is_cloud:
            self.io_query("cloud", "requestRenameVariable", [old_name, new_name])
        return variable

    def delete_variable(self, variable_id: str) -> Variable | None:
        found = self.find_variable(variable_id)
        if found is None:
            return None
        target, variable = found
        target.delete_variable(variable_id)
        logger.debug("Deleted variable %s (%r)", variable_id, variable.name)
        if variable.is_cloud:
            self.io_query("cloud", "requestDeleteVariable", [variable.name])
        return variable
