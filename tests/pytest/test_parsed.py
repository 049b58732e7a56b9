# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import numpy as np
import pytest

from kvargs import ArgsParser, Char, ParsedArgs
from kvargs.exceptions import ArgumentNotFoundError, ConversionError

APP_PATH = "host/prod/apps/test_app"


@pytest.fixture
def parsed() -> ParsedArgs:
    parser = ArgsParser()
    parser.add_argument("e", "enable event", optional=True)
    parser.add_argument("e_an", "enable another event", optional=True)
    parser.add_argument("d", "example double value", optional=True)
    parser.add_argument("nv", "a negative int", optional=True)
    parser.add_argument("c", "a char", default="x")
    parser.add_argument("int_v", "list of int values", optional=False)
    parser.add_argument("double_v", "list of double values", optional=False)
    return parser.parse(
        [
            APP_PATH,
            "--e=true",
            "--e_an=false",
            "--d=4.325",
            "--nv=-585666",
            "--int_v=2,3,4,0,",
            "--double_v=2.6|3.14|4.4489",
        ]
    )


def test_get_scalars(parsed: ParsedArgs) -> None:
    assert parsed.get("e", bool) is True
    assert parsed.get("e_an", bool) is False
    assert parsed.get("d", float) == pytest.approx(4.325)
    assert parsed.get("nv", int) == -585666
    assert parsed.get("nv", np.int32) == np.int32(-585666)
    assert parsed.get("c", Char) == "x"
    assert parsed.get("d") == "4.325"


def test_get_not_found(parsed: ParsedArgs) -> None:
    with pytest.raises(ArgumentNotFoundError) as excinfo:
        parsed.get("unknown arg", bool)
    assert str(excinfo.value) == "Couldn't find [unknown arg] in arguments"


def test_get_conversion_error(parsed: ParsedArgs) -> None:
    with pytest.raises(ConversionError, match=r"Invalid value \[4.325\] to parse to bool"):
        parsed.get("d", bool)
    with pytest.raises(ConversionError):
        parsed.get("nv", np.int16)


def test_get_optional(parsed: ParsedArgs) -> None:
    assert parsed.get_optional("e", bool) is True
    assert parsed.get_optional("d", float) == pytest.approx(4.325)
    assert parsed.get_optional("unknown arg", bool) is None
    assert parsed.get_optional("d", bool) is None
    assert parsed.get_optional("int_v", int) is None


def test_get_list(parsed: ParsedArgs) -> None:
    assert parsed.get_list("int_v", int) == [2, 3, 4, 0]
    assert parsed.get_list("double_v", float, "|") == pytest.approx([2.6, 3.14, 4.4489])
    assert parsed.get_list("double_v") == ["2.6|3.14|4.4489"]
    assert parsed.get_list("nv", int) == [-585666]


def test_get_list_no_partial_result(parsed: ParsedArgs) -> None:
    with pytest.raises(ConversionError, match=r"Invalid string \[2.6\|3.14\|4.4489\]"):
        parsed.get_list("double_v", float)


def test_get_list_not_found(parsed: ParsedArgs) -> None:
    with pytest.raises(ArgumentNotFoundError):
        parsed.get_list("ids", int)


def test_get_list_custom_default_separator() -> None:
    args = ParsedArgs({"ids": "1;2;;3"}, list_separator=";")
    assert args.get_list("ids", np.uint8) == [1, 2, 3]


def test_is_read_only(parsed: ParsedArgs) -> None:
    with pytest.raises(TypeError):
        parsed.raw["e"] = "false"  # type: ignore[index]
    assert parsed.get("e", bool) is True


def test_does_not_alias_input() -> None:
    values = {"a": "1"}
    args = ParsedArgs(values)
    values["a"] = "2"
    assert args.get("a", int) == 1


def test_container_protocol(parsed: ParsedArgs) -> None:
    assert "e" in parsed
    assert "unknown arg" not in parsed
    assert len(parsed) == 7
    assert set(parsed) == {"e", "e_an", "d", "nv", "c", "int_v", "double_v"}
