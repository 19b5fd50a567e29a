"""Variable and list blocks.

Each block method takes the block's argument dict (``VARIABLE``, ``LIST``,
``INDEX``, ``ITEM``, ``VALUE``) and a :class:`BlockUtility`, resolves the
named entity through the utility's scope chain, and delegates to the
scalar or list operations.  Block methods never raise.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from blox.model.variables import Variable, VariableType

from . import _lists, _scalars
from ._cast import to_number
from ._monitors import MonitorEvent
from ._scope import ScopeChain

if TYPE_CHECKING:
    from ._context import RuntimeContext


class BlockUtility:
    """Per-call view of the runtime handed to block methods.

    Parameters
    ----------
    scope : ScopeChain
        Where variable names are resolved.
    runtime : RuntimeContext
        Owner of the I/O devices and monitor subsystem.
    update_monitor : bool
        True while a monitor poll, not a script, is evaluating the block.
    """

    def __init__(
        self,
        scope: ScopeChain,
        runtime: RuntimeContext,
        update_monitor: bool = False,
    ) -> None:
        self.scope = scope
        self.runtime = runtime
        self.update_monitor = update_monitor

    def io_query(self, device: str, func: str, args: list | tuple = ()) -> object:
        return self.runtime.io_query(device, func, args)


class DataBlocks:
    """The variable/list block set of one runtime."""

    def __init__(self, runtime: RuntimeContext) -> None:
        self.runtime = runtime

    def get_primitives(self) -> dict[str, Callable[[dict, BlockUtility], object]]:
        return {
            "data_variable": self.get_variable,
            "data_setvariableto": self.set_variable_to,
            "data_changevariableby": self.change_variable_by,
            "data_showvariable": self.show_variable,
            "data_hidevariable": self.hide_variable,
            "data_listcontents": self.get_list_contents,
            "data_addtolist": self.add_to_list,
            "data_deleteoflist": self.delete_of_list,
            "data_deletealloflist": self.delete_all_of_list,
            "data_insertatlist": self.insert_at_list,
            "data_replaceitemoflist": self.replace_item_of_list,
            "data_itemoflist": self.item_of_list,
            "data_itemnumoflist": self.item_num_of_list,
            "data_lengthoflist": self.length_of_list,
            "data_listcontainsitem": self.list_contains_item,
            "data_showlist": self.show_list,
            "data_hidelist": self.hide_list,
        }

    # -----------------------------------------------------------------------
    # Menus
    # -----------------------------------------------------------------------

    def get_variable_names(self) -> list[str]:
        return self.runtime.scope().variable_names(VariableType.SCALAR)

    def get_list_names(self) -> list[str]:
        return self.runtime.scope().variable_names(VariableType.LIST)

    # -----------------------------------------------------------------------
    # Variables
    # -----------------------------------------------------------------------

    def get_variable(self, args: dict, util: BlockUtility) -> object:
        variable = util.scope.resolve(args["VARIABLE"], VariableType.SCALAR)
        return variable.value

    def set_variable_to(self, args: dict, util: BlockUtility) -> None:
        variable = util.scope.resolve(args["VARIABLE"], VariableType.SCALAR)
        _scalars.set_value(variable, args["VALUE"], self._cloud_emitter(util))

    def change_variable_by(self, args: dict, util: BlockUtility) -> None:
        # A zero change does not even create the variable.
        if to_number(args["VALUE"]) == 0:
            return
        variable = util.scope.resolve(args["VARIABLE"], VariableType.SCALAR)
        _scalars.change_by(variable, args["VALUE"], self._cloud_emitter(util))

    def show_variable(self, args: dict, util: BlockUtility) -> None:
        self.change_monitor_visibility(util, args["VARIABLE"], VariableType.SCALAR, True)

    def hide_variable(self, args: dict, util: BlockUtility) -> None:
        self.change_monitor_visibility(util, args["VARIABLE"], VariableType.SCALAR, False)

    @staticmethod
    def _cloud_emitter(util: BlockUtility) -> Callable[[str, object], None]:
        def emit(name: str, value: object) -> None:
            util.io_query("cloud", "requestUpdateVariable", [name, value])
        return emit

    # -----------------------------------------------------------------------
    # Lists
    # -----------------------------------------------------------------------

    def _list(self, args: dict, util: BlockUtility) -> Variable:
        return util.scope.resolve(args["LIST"], VariableType.LIST)

    def get_list_contents(self, args: dict, util: BlockUtility) -> list | str:
        return _lists.get_contents(self._list(args, util), for_monitor=util.update_monitor)

    def add_to_list(self, args: dict, util: BlockUtility) -> None:
        _lists.add(self._list(args, util), args["ITEM"])

    def delete_of_list(self, args: dict, util: BlockUtility) -> None:
        _lists.delete_at(self._list(args, util), args["INDEX"])

    def delete_all_of_list(self, args: dict, util: BlockUtility) -> None:
        _lists.delete_all(self._list(args, util))

    def insert_at_list(self, args: dict, util: BlockUtility) -> None:
        _lists.insert_at(self._list(args, util), args["INDEX"], args["ITEM"])

    def replace_item_of_list(self, args: dict, util: BlockUtility) -> None:
        _lists.replace_at(self._list(args, util), args["INDEX"], args["ITEM"])

    def item_of_list(self, args: dict, util: BlockUtility) -> object:
        return _lists.item_at(self._list(args, util), args["INDEX"])

    def item_num_of_list(self, args: dict, util: BlockUtility) -> int:
        return _lists.index_of(self._list(args, util), args["ITEM"])

    def length_of_list(self, args: dict, util: BlockUtility) -> int:
        return _lists.length(self._list(args, util))

    def list_contains_item(self, args: dict, util: BlockUtility) -> bool:
        return _lists.contains(self._list(args, util), args["ITEM"])

    def show_list(self, args: dict, util: BlockUtility) -> None:
        self.change_monitor_visibility(util, args["LIST"], VariableType.LIST, True)

    def hide_list(self, args: dict, util: BlockUtility) -> None:
        self.change_monitor_visibility(util, args["LIST"], VariableType.LIST, False)

    # -----------------------------------------------------------------------
    # Monitors
    # -----------------------------------------------------------------------

    def change_monitor_visibility(
        self,
        util: BlockUtility,
        ref: object,
        variable_type: VariableType,
        visible: bool,
    ) -> None:
        variable = util.scope.resolve(ref, variable_type)
        # Monitors are keyed by variable id; mimic the palette checkbox.
        self.runtime.monitors.change_block(
            MonitorEvent(id=variable.id, element="checkbox", value=visible),
        )
