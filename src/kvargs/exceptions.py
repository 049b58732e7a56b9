# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

# ****************
# * Base classes *
# ****************


class ArgsError(ValueError):
    """Base class for all errors caused by the invoked command line
    or by retrieving values from it. These are runtime conditions:
    the caller reports them and picks an exit code.
    """

    def __init__(self, message: str) -> None:
        self.message = message

        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({repr(str(self))})"


class ConfigurationError(Exception):
    """Programmer errors raised while arguments are declared.
    Deliberately unrelated to :class:`ArgsError`, so that handlers
    for command line errors never hide them.
    """


class HelpRequested(Exception):
    """Raised by the parser when help was printed but the injected
    exit callable returned instead of terminating the process.
    """

    def __init__(self, app_path: str) -> None:
        self.app_path = app_path

        super().__init__(f"help requested for [{app_path}]")


# *****************
# * Parsing stage *
# *****************


class ParseError(ArgsError):
    pass


class FormatError(ParseError):
    def __init__(self, token: str) -> None:
        self.token = token

        super().__init__(
            f"Unexpected format: [{token}], expected format is: [--arg=value]. Try --help"
        )


class UnknownArgumentError(ParseError):
    def __init__(self, name: str) -> None:
        self.name = name

        super().__init__(f"Unknown arg: [{name}]. Try --help")


class MissingMandatoryArgumentError(ParseError):
    def __init__(self, name: str) -> None:
        self.name = name

        super().__init__(f"Mandatory argument [{name}] not passed in arguments. Try --help")


# *******************
# * Retrieval stage *
# *******************


class ArgumentNotFoundError(ArgsError):
    def __init__(self, name: str) -> None:
        self.name = name

        super().__init__(f"Couldn't find [{name}] in arguments")


class ConversionError(ArgsError):
    def __init__(self, source: str, target: str, message: str) -> None:
        self.source = source
        self.target = target

        super().__init__(message)


# *********************
# * Declaration stage *
# *********************


class EmptyDefaultValueError(ConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name

        super().__init__(f"Default value is empty for [{name}]")


class ListDefaultError(ConfigurationError, TypeError):
    def __init__(self, name: str, default: object) -> None:
        self.name = name
        self.default = default

        super().__init__(
            f"Can't use a {type(default).__name__} as default value for [{name}]; "
            "declare it without default and read it with get_list()"
        )
