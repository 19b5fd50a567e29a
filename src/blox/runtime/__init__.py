"""blox runtime: variable and list blocks over a stage and its sprites.

Entry point::

    from blox.runtime import create_runtime

    rt = create_runtime(sprites=["Cat"])
    rt.execute("data_addtolist", {"LIST": "scores", "ITEM": 10}, target="Cat")
    index = {"LIST": "scores", "INDEX": 1}
    assert rt.execute("data_itemoflist", index, target="Cat") == 10
"""

from __future__ import annotations

from typing import Any

from blox.model.target import Target

from ._cast import LIST_ALL, LIST_INVALID, BloxError, compare, to_list_index, to_number
from ._context import RuntimeContext
from ._io import CloudProvider
from ._lists import LIST_ITEM_LIMIT
from ._monitors import MonitorRegistry, MonitorSubsystem
from ._scope import ScopeChain


def create_runtime(
    *,
    stage: Target | str = "Stage",
    sprites: list[Any] | tuple = (),
    cloud_provider: CloudProvider | None = None,
    monitors: MonitorSubsystem | None = None,
) -> RuntimeContext:
    """Create a runtime context.

    Parameters
    ----------
    stage
        A stage ``Target`` or the name for a fresh, empty one.
    sprites
        Sprite ``Target`` objects or names for fresh, empty sprites.
    cloud_provider
        Receives cloud variable updates; without one they are dropped.
    monitors
        Monitor subsystem; defaults to a ``MonitorRegistry``.

    Returns
    -------
    RuntimeContext
        The runtime, with the stage as editing target.
    """
    return RuntimeContext(
        stage=_resolve_target(stage, is_stage=True),
        sprites=[_resolve_target(s, is_stage=False) for s in sprites],
        cloud_provider=cloud_provider,
        monitors=monitors,
    )


def _resolve_target(target: Any, *, is_stage: bool) -> Target:
    if isinstance(target, Target):
        return target
    if isinstance(target, str):
        return Target(name=target, is_stage=is_stage)
    raise BloxError(
        f"Targets must be Target objects or names, got {type(target).__name__}"
    )


__all__ = [
    "create_runtime",
    "RuntimeContext",
    "ScopeChain",
    "MonitorRegistry",
    "BloxError",
    "LIST_ITEM_LIMIT",
    "LIST_ALL",
    "LIST_INVALID",
    "compare",
    "to_list_index",
    "to_number",
]
