# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import sys
from collections.abc import Sequence

import exitcode

from kvargs.conversion import from_string
from kvargs.exceptions import ArgsError
from kvargs.log import Loglevel, get_logger, setup_logging
from kvargs.parser import ArgsParser, tokenize

logger = get_logger("kvargs.demo")


def build_parser() -> ArgsParser:
    parser = ArgsParser()
    parser.add_argument("log_path", "Log file path for app", optional=False)
    parser.add_argument("timeout", "Timeout for the app (seconds)", default=60)
    parser.add_argument("ids", "Allowed ids", optional=True)
    parser.add_argument("verbosity", "0: info, 1: debug, 2: trace", default=0)
    return parser


def get_log_level(argv: Sequence[str]) -> Loglevel:
    """Looks for ``--verbosity`` ahead of parsing, so that the records
    of the parse itself reach the console. Malformed tokens are left
    for the parser to report.
    """
    verbosity = 0
    for token in argv[1:]:
        try:
            name, value = tokenize(token)
            if name == "verbosity":
                verbosity = from_string(value, int)
        except ArgsError:
            continue

    if verbosity == 1:
        return Loglevel.DEBUG
    if verbosity >= 2:
        return Loglevel.TRACE
    return Loglevel.INFO


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    setup_logging(get_log_level(argv))
    parser = build_parser()

    try:
        args = parser.parse(argv)

        print(f"log_path is:[{args.get('log_path')}]")
        print(f"timeout is:[{args.get('timeout', int)}]")
        print("Allowed ids:")
        for id_ in args.get_list("ids", int) if "ids" in args else []:
            print(id_)
    except ArgsError as e:
        logger.error(e)
        return exitcode.USAGE

    return exitcode.OK


if __name__ == "__main__":
    sys.exit(main())
