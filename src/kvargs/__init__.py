# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Declaration, parsing and typed retrieval of ``--name=value`` arguments.

The public interface is the :class:`ArgsParser` class, the
:class:`ParsedArgs` accessor it returns, the :data:`Char` type tag and
the exception hierarchy.
"""

from kvargs.config import ParserSettings
from kvargs.conversion import Char, from_string, to_string
from kvargs.exceptions import (
    ArgsError,
    ArgumentNotFoundError,
    ConfigurationError,
    ConversionError,
    EmptyDefaultValueError,
    FormatError,
    HelpRequested,
    ListDefaultError,
    MissingMandatoryArgumentError,
    ParseError,
    UnknownArgumentError,
)
from kvargs.parsed import ParsedArgs
from kvargs.parser import ArgsParser, tokenize
from kvargs.registry import NO_DEFAULT, ArgumentRegistry, ArgumentSpec

__all__ = (
    "NO_DEFAULT",
    "ArgsError",
    "ArgsParser",
    "ArgumentNotFoundError",
    "ArgumentRegistry",
    "ArgumentSpec",
    "Char",
    "ConfigurationError",
    "ConversionError",
    "EmptyDefaultValueError",
    "FormatError",
    "HelpRequested",
    "ListDefaultError",
    "MissingMandatoryArgumentError",
    "ParseError",
    "ParsedArgs",
    "ParserSettings",
    "UnknownArgumentError",
    "from_string",
    "tokenize",
    "to_string",
)
