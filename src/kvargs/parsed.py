# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeVar, overload

from kvargs.conversion import from_string, split
from kvargs.exceptions import ArgsError, ArgumentNotFoundError

T = TypeVar("T")


class ParsedArgs:
    """Read-only view over the name -> value strings produced by a
    single :meth:`kvargs.parser.ArgsParser.parse` call. Values are
    converted on every access; nothing is cached.
    """

    def __init__(self, values: Mapping[str, str], list_separator: str = ",") -> None:
        self._values = MappingProxyType(dict(values))
        self._list_separator = list_separator

    @property
    def raw(self) -> Mapping[str, str]:
        return self._values

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._values)!r})"

    def _lookup(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise ArgumentNotFoundError(name) from None

    @overload
    def get(self, name: str) -> str: ...

    @overload
    def get(self, name: str, type: type[T]) -> T: ...  # noqa: A002

    @overload
    def get(self, name: str, type: Any) -> Any: ...  # noqa: A002

    def get(self, name: str, type: Any = str) -> Any:  # noqa: A002
        """Returns the value of ``name`` converted to ``type``.

        :raises ArgumentNotFoundError: ``name`` has no value.
        :raises ConversionError: The value is not a valid ``type`` literal.
        """
        return from_string(self._lookup(name), type)

    @overload
    def get_optional(self, name: str) -> str | None: ...

    @overload
    def get_optional(self, name: str, type: type[T]) -> T | None: ...  # noqa: A002

    @overload
    def get_optional(self, name: str, type: Any) -> Any | None: ...  # noqa: A002

    def get_optional(self, name: str, type: Any = str) -> Any | None:  # noqa: A002
        """Like :meth:`get`, but returns ``None`` instead of raising."""
        try:
            return self.get(name, type)
        except ArgsError:
            return None

    def get_list(self, name: str, type: Any = str, sep: str | None = None) -> list[Any]:  # noqa: A002
        """Splits the value of ``name`` at ``sep`` and converts every piece.

        E.g. ``--ids=2,3,4,0,`` read with ``get_list("ids", int)``
        yields ``[2, 3, 4, 0]``. Either all pieces convert or the
        call raises.
        """
        if sep is None:
            sep = self._list_separator
        return [from_string(piece, type) for piece in split(self._lookup(name), sep)]
