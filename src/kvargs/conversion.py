# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""String <-> value conversion for argument values.

Every value is stored as a string and converted on demand. The set of
supported target types is closed: it is the :data:`STRATEGIES` table,
keyed by the type tag the caller passes to the accessors. Plain python
``int`` and ``float`` are unbounded and double precision respectively;
numpy scalar types are used where a fixed width is wanted.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NewType, TypeAlias

import numpy as np

from kvargs.exceptions import ConversionError

TRUE = "true"
FALSE = "false"

#: Type tag for single character values. Values are plain ``str``
#: of length one.
Char = NewType("Char", str)

Scalar: TypeAlias = str | bool | int | float | np.bool_ | np.integer | np.floating

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(
    r"-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Strategy:
    name: str
    to_string: Callable[[Any], str]
    from_string: Callable[[str], Any]


def _numeric_error(src: str, name: str) -> ConversionError:
    return ConversionError(src, name, f"Invalid string [{src}] to convert to numeric type")


def _bool_to_string(value: Any) -> str:
    return TRUE if value else FALSE


def _bool_from_string(src: str) -> bool:
    if src not in (TRUE, FALSE):
        raise ConversionError(
            src,
            "bool",
            f"Invalid value [{src}] to parse to bool, expected values:[{TRUE} / {FALSE}].",
        )
    return src == TRUE


def _char_from_string(src: str) -> str:
    if len(src) != 1:
        raise ConversionError(src, "char", f"Can't convert [{src}], size: [{len(src)}] to char")
    return src


def _int_from_string(src: str) -> int:
    if _INT_RE.fullmatch(src) is None:
        raise _numeric_error(src, "int")
    try:
        return int(src)
    except ValueError:
        # interpreter digit limit (sys.set_int_max_str_digits)
        raise _numeric_error(src, "int") from None


def _float_from_string(src: str) -> float:
    if _FLOAT_RE.fullmatch(src) is None:
        raise _numeric_error(src, "float")
    value = float(src)
    # float() saturates to inf or 0.0 instead of failing
    if math.isinf(value) and "inf" not in src.lower():
        raise _numeric_error(src, "float")
    mantissa = re.split("[eE]", src)[0]
    if value == 0.0 and any(c in "123456789" for c in mantissa):
        raise _numeric_error(src, "float")
    return value


def _fixed_int(dtype: type[np.integer]) -> Strategy:
    info = np.iinfo(dtype)
    name = np.dtype(dtype).name

    def from_string(src: str) -> np.integer:
        if info.min == 0 and src.startswith("-"):
            raise _numeric_error(src, name)
        value = _int_from_string(src)
        if not info.min <= value <= info.max:
            raise _numeric_error(src, name)
        return dtype(value)

    return Strategy(name, str, from_string)


def _fixed_float(dtype: type[np.floating]) -> Strategy:
    name = np.dtype(dtype).name

    def from_string(src: str) -> np.floating:
        value = _float_from_string(src)
        with np.errstate(over="ignore", under="ignore"):
            converted = dtype(value)
        if np.isinf(converted) and not math.isinf(value):
            raise _numeric_error(src, name)
        if converted == 0 and value != 0:
            raise _numeric_error(src, name)
        return converted

    return Strategy(name, str, from_string)


STRATEGIES: dict[Any, Strategy] = {
    str: Strategy("str", str, str),
    Char: Strategy("char", str, _char_from_string),
    bool: Strategy("bool", _bool_to_string, _bool_from_string),
    np.bool_: Strategy("bool", _bool_to_string, lambda src: np.bool_(_bool_from_string(src))),
    int: Strategy("int", str, _int_from_string),
    float: Strategy("float", repr, _float_from_string),
}
STRATEGIES.update(
    {
        t: _fixed_int(t)
        for t in (
            np.int8,
            np.int16,
            np.int32,
            np.int64,
            np.uint8,
            np.uint16,
            np.uint32,
            np.uint64,
        )
    }
)
STRATEGIES.update({t: _fixed_float(t) for t in (np.float16, np.float32, np.float64)})

# Lookup order for subclasses, e.g. IntEnum members or str subclasses.
# bool precedes int.
_FALLBACK_ORDER = (bool, np.bool_, int, float, str)


def strategy_for(type_: Any) -> Strategy:
    """Returns the conversion strategy registered for the type tag ``type_``."""
    try:
        return STRATEGIES[type_]
    except (KeyError, TypeError):
        raise TypeError(f"unsupported argument type: {type_!r}") from None


def _strategy_for_value(value: Any) -> Strategy:
    if (strategy := STRATEGIES.get(type(value))) is not None:
        return strategy
    for candidate in _FALLBACK_ORDER:
        if isinstance(value, candidate):
            return STRATEGIES[candidate]
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def to_string(value: Scalar) -> str:
    """Canonical string form of ``value``, as stored in the registry."""
    return _strategy_for_value(value).to_string(value)


def from_string(src: str, type_: Any = str) -> Any:
    """Converts ``src`` to ``type_``.

    :raises ConversionError: If ``src`` is not a valid ``type_`` literal.
    :raises TypeError: If no strategy exists for ``type_``.
    """
    return strategy_for(type_).from_string(src)


def strip(source: str, chars: str = " ") -> str:
    """Strips any of ``chars`` from both ends of ``source``, never from the middle.

    >>> strip("  He llo  ")
    'He llo'
    """
    return source.strip(chars)


def split(source: str, sep: str = " ") -> list[str]:
    """Splits ``source`` at every occurrence of ``sep``. Runs of ``sep``
    count as one separator and leading or trailing runs yield no empty
    pieces.

    >>> split("12Hello12there!", "12")
    ['Hello', 'there!']
    >>> split("2,3,4,0,", ",")
    ['2', '3', '4', '0']
    """
    if sep == "":
        raise ValueError("empty separator")
    return [piece for piece in source.split(sep) if piece != ""]
