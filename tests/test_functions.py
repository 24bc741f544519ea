import io

import pytest

from fendcore.functions import (
    BuiltInFunction,
    UnableToInvertFunction,
    parse_function_name,
    read_function,
    write_function,
)
from fendcore.serialize import DeserializationError


@pytest.mark.parametrize(
    "func,expected",
    [
        (BuiltInFunction.SIN, BuiltInFunction.ASIN),
        (BuiltInFunction.COS, BuiltInFunction.ACOS),
        (BuiltInFunction.TAN, BuiltInFunction.ATAN),
        (BuiltInFunction.ASIN, BuiltInFunction.SIN),
        (BuiltInFunction.ACOS, BuiltInFunction.COS),
        (BuiltInFunction.ATAN, BuiltInFunction.TAN),
        (BuiltInFunction.SINH, BuiltInFunction.ASINH),
        (BuiltInFunction.COSH, BuiltInFunction.ACOSH),
        (BuiltInFunction.TANH, BuiltInFunction.ATANH),
        (BuiltInFunction.ASINH, BuiltInFunction.SINH),
        (BuiltInFunction.ACOSH, BuiltInFunction.COSH),
        (BuiltInFunction.ATANH, BuiltInFunction.TANH),
    ],
)
def test_invert(func, expected):
    assert func.invert() is expected
    assert func.invert().invert() is func


@pytest.mark.parametrize(
    "func", [BuiltInFunction.ABS, BuiltInFunction.LN, BuiltInFunction.NOT]
)
def test_not_invertible(func):
    with pytest.raises(UnableToInvertFunction) as info:
        func.invert()
    assert info.value.name == func.value


def test_display_names():
    assert str(parse_function_name("log10")) == "log10"
    assert str(parse_function_name("approximately")) == "approximately"


def test_wire_format():
    buf = io.BytesIO()
    write_function(BuiltInFunction.SIN, buf)
    assert buf.getvalue() == b"\x00" * 7 + b"\x03" + b"sin"


@pytest.mark.parametrize(
    "func", [f for f in BuiltInFunction if f is not BuiltInFunction.ARG]
)
def test_round_trip(func):
    buf = io.BytesIO()
    write_function(func, buf)
    buf.seek(0)
    assert read_function(buf) is func


def test_arg_is_not_readable():
    buf = io.BytesIO()
    write_function(BuiltInFunction.ARG, buf)
    buf.seek(0)
    with pytest.raises(DeserializationError):
        read_function(buf)


def test_parse_unknown_name():
    with pytest.raises(DeserializationError):
        parse_function_name("sqrt")


def test_parse_known_name():
    assert parse_function_name("imag") is BuiltInFunction.IMAG