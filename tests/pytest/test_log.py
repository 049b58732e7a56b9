# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import datetime
import logging

import pytest

from kvargs import ArgsParser, log
from kvargs.log import ConsoleFormatter, Loglevel, get_logger, setup_logging


def make_record(levelno: int, msg: str) -> logging.LogRecord:
    created = datetime.datetime(2024, 1, 2, 3, 4, 5, 678500).timestamp()
    return logging.makeLogRecord(
        {"name": "kvargs.parser", "msg": msg, "levelno": levelno, "created": created}
    )


def test_loglevel_from_name() -> None:
    assert Loglevel.from_name("trace") == Loglevel.TRACE
    assert Loglevel.from_name("DEBUG") == Loglevel.DEBUG

    with pytest.raises(ValueError):
        Loglevel.from_name("loud")


def test_console_formatter() -> None:
    msg = ConsoleFormatter().format(make_record(Loglevel.INFO, "hello"))
    assert msg == "Jan 02 03:04:05.678 kvargs.parser: hello"


def test_console_formatter_colored() -> None:
    msg = ConsoleFormatter(colored=True).format(make_record(Loglevel.ERROR, "oops"))
    assert msg.endswith("kvargs.parser: \033[31moops\033[0m")


def test_parser_traces_tokens(caplog: pytest.LogCaptureFixture) -> None:
    parser = ArgsParser()
    parser.add_argument("t", "time interval", default=5)

    with caplog.at_level(Loglevel.TRACE, logger="kvargs"):
        parser.parse(["app", "--t=1"])

    records = [r for r in caplog.records if r.name == "kvargs.parser"]
    assert [(r.levelno, r.getMessage()) for r in records] == [(Loglevel.TRACE, "t = 1")]


def test_parser_logs_defaults_and_overrides(caplog: pytest.LogCaptureFixture) -> None:
    parser = ArgsParser()
    parser.add_argument("t", "time interval", default=5)
    parser.add_argument("u", "other", default=1)

    with caplog.at_level(logging.DEBUG, logger="kvargs"):
        parser.parse(["app", "--u=2", "--u=3"])

    assert "using default [5] for [t]" in caplog.text
    assert "[u] passed again, [3] overrides [2]" in caplog.text


def test_setup_logging_replaces_listener() -> None:
    name = "kvargs.setup_test"
    try:
        setup_logging(Loglevel.INFO, colored=False, logger_name=name)
        first = log._listener
        setup_logging(Loglevel.DEBUG, colored=False, logger_name=name)

        assert first is not None
        assert first._thread is None  # type: ignore[attr-defined]
        assert log._listener is not first
        assert len(logging.getLogger(name).handlers) == 1
    finally:
        log._stop_listener()
        logging.getLogger(name).handlers.clear()


def test_setup_logging_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    name = "kvargs.env_test"
    monkeypatch.setenv("KVARGS_LOGLEVEL", "trace")
    try:
        setup_logging(colored=False, logger_name=name)
        assert log._listener is not None
        assert log._listener.handlers[0].level == Loglevel.TRACE
    finally:
        log._stop_listener()
        logging.getLogger(name).handlers.clear()


def test_get_logger_trace() -> None:
    assert isinstance(get_logger("kvargs.trace_test"), log.Logger)
