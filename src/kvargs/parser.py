# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Parsing of ``--name=value`` command lines.

The procedure is:

1. Declare the expected arguments with :meth:`ArgsParser.add_argument`
2. Call :meth:`ArgsParser.parse` with the full argument vector
3. Read typed values from the returned :class:`ParsedArgs`

Only named arguments exist. A lone ``help``, ``--help`` or ``-h``
prints the declared arguments and terminates the process.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Any, TextIO

from kvargs.config import DEFAULT_SETTINGS, ParserSettings
from kvargs.conversion import Scalar, split, strip
from kvargs.exceptions import (
    FormatError,
    HelpRequested,
    MissingMandatoryArgumentError,
    UnknownArgumentError,
)
from kvargs.log import get_logger
from kvargs.parsed import ParsedArgs
from kvargs.registry import NO_DEFAULT, ArgumentRegistry

logger = get_logger(__name__)


def tokenize(token: str, settings: ParserSettings = DEFAULT_SETTINGS) -> tuple[str, str]:
    """Validates a single ``--name=value`` token and returns its
    stripped name and value.

    :raises FormatError: The token does not have the expected shape.
    """
    if not token.startswith(settings.prefix):
        raise FormatError(token)
    body = token[len(settings.prefix) :]

    if body.count(settings.assignment) != 1:
        raise FormatError(token)

    pieces = split(body, settings.assignment)
    if len(pieces) != 2:
        raise FormatError(token)

    name = strip(pieces[0], settings.strip_chars)
    value = strip(pieces[1], settings.strip_chars)
    if name == "" or value == "":
        raise FormatError(token)

    return name, value


class ArgsParser:
    """Declares the accepted arguments and parses argument vectors.

    :param settings: Token grammar; see :class:`ParserSettings`.
    :param exit: Called with ``0`` after help was printed.
    :param help_file: Stream the help is written to, ``sys.stdout`` if None.
    """

    def __init__(
        self,
        settings: ParserSettings = DEFAULT_SETTINGS,
        exit: Callable[[int], Any] = sys.exit,  # noqa: A002
        help_file: TextIO | None = None,
    ) -> None:
        self.settings = settings
        self.registry = ArgumentRegistry()
        self.app_path = ""
        self._exit = exit
        self._help_file = help_file

    def add_argument(
        self,
        name: str,
        help: str = "",  # noqa: A002
        *,
        default: Scalar = NO_DEFAULT,
        optional: bool = False,
    ) -> bool:
        """See :meth:`ArgumentRegistry.add_argument`."""
        return self.registry.add_argument(name, help, default=default, optional=optional)

    def render_help(self) -> str:
        return self.registry.render_help(self.app_path)

    def print_help(self) -> None:
        file = self._help_file if self._help_file is not None else sys.stdout
        print(self.render_help(), file=file)

    def parse(self, argv: Sequence[str] | None = None) -> ParsedArgs:
        """Parses ``argv``; ``argv[0]`` is the program path.
        If ``argv`` is None, ``sys.argv`` is used.

        :raises FormatError: A token is not of the form ``--name=value``.
        :raises UnknownArgumentError: A name was never declared.
        :raises MissingMandatoryArgumentError: A mandatory argument is absent.
        """
        if argv is None:
            argv = sys.argv

        self.app_path = argv[0] if len(argv) > 0 else ""
        if len(argv) == 2 and argv[1] in self.settings.help_tokens:
            self.print_help()
            self._exit(0)
            raise HelpRequested(self.app_path)

        values: dict[str, str] = {}
        for token in argv[1:]:
            name, value = tokenize(token, self.settings)
            if name not in self.registry:
                raise UnknownArgumentError(name)
            if name in values:
                logger.debug(f"[{name}] passed again, [{value}] overrides [{values[name]}]")
            logger.trace(f"{name} = {value}")
            values[name] = value

        for spec in self.registry:
            if spec.name in values:
                continue
            if not spec.optional:
                raise MissingMandatoryArgumentError(spec.name)
            if spec.has_default:
                logger.debug(f"using default [{spec.default}] for [{spec.name}]")
                values[spec.name] = spec.default

        return ParsedArgs(values, self.settings.list_separator)
