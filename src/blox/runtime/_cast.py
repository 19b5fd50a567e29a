"""Value coercion and comparison for block arguments.

Block values are loosely typed: a list may hold ``123`` and ``"123"`` side
by side and both must behave as the same number.  Numeric parsing follows
JavaScript ``Number()`` so projects behave the same on every runtime.
"""

from __future__ import annotations

import math
import random
import re
from decimal import Decimal
from enum import Enum


class BloxError(Exception):
    """Misuse of the runtime API (never raised by block operations)."""


class ListIndex(str, Enum):
    """Sentinels returned by :func:`to_list_index`."""

    INVALID = "INVALID"
    ALL = "ALL"


LIST_INVALID = ListIndex.INVALID
LIST_ALL = ListIndex.ALL

_MAX_SAFE_INTEGER = 2 ** 53 - 1

# Characters removed by String.prototype.trim().
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


# ---------------------------------------------------------------------------
# Numeric parsing (JavaScript Number semantics)
# ---------------------------------------------------------------------------

_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_RADIX_RE = re.compile(r"^0(?:([xX])[0-9a-fA-F]+|([oO])[0-7]+|([bB])[01]+)$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_number(text: str) -> int | float:
    """Parse a string the way ``Number(text)`` does; NaN when unparsable."""
    text = text.strip(_JS_WHITESPACE)
    if not text:
        return 0

    if _INTEGER_RE.match(text):
        n = int(text)
        return n if abs(n) <= _MAX_SAFE_INTEGER else float(n)
    if _DECIMAL_RE.match(text):
        return float(text)

    m = _RADIX_RE.match(text)
    if m:
        return int(text, 0)

    m = _INFINITY_RE.match(text)
    if m:
        return -math.inf if m.group(1) == "-" else math.inf

    return math.nan


def _js_number(value: object) -> int | float:
    if isinstance(value, bool):
        return 1 if value else 0
    if _is_number(value):
        return value
    if value is None:
        return 0
    if isinstance(value, str):
        return _parse_number(value)
    return math.nan


def to_number(value: object) -> int | float:
    """Coerce to a number; anything that is not a number becomes 0."""
    n = _js_number(value)
    if isinstance(n, float) and math.isnan(n):
        return 0
    return n


def to_string(value: object) -> str:
    """Render a value the way JavaScript ``String()`` does."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        text = repr(value)
        if "e" not in text:
            return text
        if 1e-6 <= abs(value) < 1e21:
            return format(Decimal(text), "f")
        mantissa, _, exponent = text.partition("e")
        exp = int(exponent)
        return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
    return str(value)


def is_whitespace(value: object) -> bool:
    return value is None or (isinstance(value, str) and value.strip(_JS_WHITESPACE) == "")


def strict_equals(a: object, b: object) -> bool:
    """JavaScript ``===`` over block primitives (ints and floats are one type)."""
    if _is_number(a) and _is_number(b):
        return a == b
    return type(a) is type(b) and a == b


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def compare(v1: object, v2: object) -> int | float:
    """Compare two values; 0 means equal.

    Numeric strings compare as numbers, so ``compare(123, "123") == 0``.
    A blank string is never treated as numeric zero.  Non-numeric operands
    compare as case-insensitive strings.
    """
    n1 = _js_number(v1)
    n2 = _js_number(v2)
    if n1 == 0 and is_whitespace(v1):
        n1 = math.nan
    elif n2 == 0 and is_whitespace(v2):
        n2 = math.nan

    if math.isnan(n1) or math.isnan(n2):
        s1 = to_string(v1).lower()
        s2 = to_string(v2).lower()
        if s1 < s2:
            return -1
        if s1 > s2:
            return 1
        return 0

    if math.isinf(n1) and math.isinf(n2) and n1 == n2:
        return 0
    return n1 - n2


# ---------------------------------------------------------------------------
# List indices
# ---------------------------------------------------------------------------

def to_list_index(
    index: object,
    length: int,
    accept_all: bool = False,
) -> int | ListIndex:
    """Translate a user-facing list index into a 1-based position.

    Returns ``LIST_INVALID`` for anything out of ``[1, length]`` and
    ``LIST_ALL`` for ``"all"`` when *accept_all* is set.
    """
    if not _is_number(index):
        if index == "all":
            return LIST_ALL if accept_all else LIST_INVALID
        if index == "last":
            return length if length > 0 else LIST_INVALID
        if index in ("random", "any"):
            if length > 0:
                return 1 + math.floor(random.random() * length)
            return LIST_INVALID

    n = to_number(index)
    if not math.isfinite(n):
        return LIST_INVALID
    position = math.floor(n)
    if position < 1 or position > length:
        return LIST_INVALID
    return position
