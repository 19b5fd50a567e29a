"""List operations over list ``Variable`` entities.

Indices given to these functions are user-facing (1-based, or keywords
such as ``"last"``) and go through :func:`to_list_index`.  Nothing here
raises: invalid indices turn writes into no-ops and reads into ``""``.
Every structural mutation clears ``monitor_up_to_date``.
"""

from __future__ import annotations

import logging

from blox.model.variables import Variable

from ._cast import LIST_ALL, LIST_INVALID, compare, to_list_index, to_string

logger = logging.getLogger(__name__)

LIST_ITEM_LIMIT = 200_000


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------

def add(lst: Variable, item: object) -> None:
    """Append *item*; silently dropped once the list is full."""
    if len(lst.value) < LIST_ITEM_LIMIT:
        lst.value.append(item)
        lst.monitor_up_to_date = False
    else:
        logger.debug("List %r is full, dropping item", lst.name)


def delete_at(lst: Variable, index: object) -> None:
    """Delete one item, or every item when *index* is ``"all"``."""
    position = to_list_index(index, len(lst.value), accept_all=True)
    if position is LIST_INVALID:
        return
    if position is LIST_ALL:
        delete_all(lst)
        return
    del lst.value[position - 1]
    lst.monitor_up_to_date = False


def delete_all(lst: Variable) -> None:
    lst.value = []
    lst.monitor_up_to_date = False


def insert_at(lst: Variable, index: object, item: object) -> None:
    """Insert *item* before *index* (``length + 1`` appends).

    A full list stays full: the item goes in and the last item falls off.
    Inserting past the cap itself is ignored.
    """
    position = to_list_index(index, len(lst.value) + 1)
    if position is LIST_INVALID:
        return
    if position > LIST_ITEM_LIMIT:
        return
    lst.value.insert(position - 1, item)
    if len(lst.value) > LIST_ITEM_LIMIT:
        lst.value.pop()
    lst.monitor_up_to_date = False


def replace_at(lst: Variable, index: object, item: object) -> None:
    position = to_list_index(index, len(lst.value))
    if position is LIST_INVALID:
        return
    lst.value[position - 1] = item
    lst.monitor_up_to_date = False


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def item_at(lst: Variable, index: object) -> object:
    position = to_list_index(index, len(lst.value))
    if position is LIST_INVALID:
        return ""
    return lst.value[position - 1]


def index_of(lst: Variable, item: object) -> int:
    """1-based position of the first item equal to *item*, or 0.

    Uses :func:`compare` rather than ``list.index`` so that ``123`` is
    found at the first of ``"123"`` or ``123``, whichever comes first.
    """
    for i, value in enumerate(lst.value):
        if compare(value, item) == 0:
            return i + 1
    return 0


def length(lst: Variable) -> int:
    return len(lst.value)


def contains(lst: Variable, item: object) -> bool:
    if item in lst.value:
        return True
    for value in lst.value:
        if compare(value, item) == 0:
            return True
    return False


# ---------------------------------------------------------------------------
# Contents
# ---------------------------------------------------------------------------

def get_contents(lst: Variable, for_monitor: bool = False) -> list | str:
    """Report the list's contents.

    For a monitor poll, the previously returned list is handed back while
    nothing has changed; after a change a fresh copy is returned so the
    monitor sees a new object.  The copy never aliases the live list.

    Otherwise the items are joined into a string: with no separator when
    every item is a single character, with spaces otherwise.
    """
    if for_monitor:
        if lst.monitor_up_to_date and lst.monitor_snapshot is not None:
            return lst.monitor_snapshot
        lst.monitor_up_to_date = True
        lst.monitor_snapshot = list(lst.value)
        return lst.monitor_snapshot

    all_single_letters = True
    for value in lst.value:
        if not (isinstance(value, str) and len(value) == 1):
            all_single_letters = False
            break
    if all_single_letters:
        return "".join(lst.value)
    return " ".join(to_string(value) for value in lst.value)
