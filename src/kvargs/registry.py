# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, model_validator

from kvargs.conversion import FALSE, TRUE, Scalar, to_string
from kvargs.exceptions import EmptyDefaultValueError, ListDefaultError
from kvargs.log import get_logger

logger = get_logger(__name__)


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


#: Sentinel for "declared without a default value".
NO_DEFAULT: Final[Any] = _NoDefault()

_CONTAINER_TYPES = (list, tuple, set, frozenset, dict)


class ArgumentSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    optional: bool
    default: str = ""
    help: str = ""

    @model_validator(mode="after")
    def _mandatory_without_default(self) -> ArgumentSpec:
        if not self.optional and self.default != "":
            raise ValueError(f"mandatory argument [{self.name}] can't have a default value")
        return self

    @property
    def has_default(self) -> bool:
        return self.default != ""


class ArgumentRegistry:
    """The set of accepted argument names. Specs are only ever added;
    a name which is already known is rejected and the first spec stays.
    """

    def __init__(self) -> None:
        self._specs: dict[str, ArgumentSpec] = {}

    def add_argument(
        self,
        name: str,
        help: str = "",  # noqa: A002
        *,
        default: Scalar = NO_DEFAULT,
        optional: bool = False,
    ) -> bool:
        """Declares the argument ``name``.

        Passing ``default`` makes the argument optional; the value is
        stored in its canonical string form right away. Without a
        default, ``optional`` decides whether parsing fails when the
        argument is absent.

        :param name: The name used on the command line, without ``--``.
        :param help: A brief description shown in the help output.
        :param default: Scalar default value. Lists can't be defaults;
                        read list arguments with ``get_list()`` instead.
        :param optional: Only relevant when no default is given.
        :return: ``False`` if ``name`` was already declared, else ``True``.
        :raises EmptyDefaultValueError: The default converts to an empty string.
        :raises ListDefaultError: The default is a container.
        """
        if default is NO_DEFAULT:
            spec = ArgumentSpec(name=name, optional=optional, help=help)
        else:
            if isinstance(default, _CONTAINER_TYPES):
                raise ListDefaultError(name, default)
            default_str = to_string(default)
            if default_str == "":
                raise EmptyDefaultValueError(name)
            spec = ArgumentSpec(name=name, optional=True, default=default_str, help=help)

        if name in self._specs:
            logger.debug(f"ignoring duplicate declaration of [{name}]")
            return False

        self._specs[name] = spec
        logger.trace(f"declared {spec!r}")
        return True

    def spec(self, name: str) -> ArgumentSpec:
        return self._specs[name]

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[ArgumentSpec]:
        for name in sorted(self._specs):
            yield self._specs[name]

    def render_help(self, app_path: str = "") -> str:
        if len(self._specs) == 0:
            return "There are no configured arguments\n"

        lines = [f"Following is the list of configured arguments for {app_path}:"]
        for spec in self:
            entry = f"\tDescription: {spec.help}, Optional: [{TRUE if spec.optional else FALSE}]"
            if spec.has_default:
                entry += f", Default value: [{spec.default}]"
            lines += [f"--{spec.name}", entry]

        lines += ["--help", "\tDescription: To print this message"]
        return "\n".join(lines) + "\n"
