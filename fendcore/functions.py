"""Built-in functions known to the calculator."""

from __future__ import annotations

import enum
from typing import BinaryIO

from fendcore.serialize import DeserializationError, read_string, write_string


class UnableToInvertFunction(ValueError):
    """Raised when a built-in function has no inverse."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unable to invert function {name}")
        self.name = name


class BuiltInFunction(enum.Enum):
    """A named built-in function; the value is its name."""

    APPROXIMATELY = "approximately"
    ABS = "abs"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    LN = "ln"
    LOG2 = "log2"
    LOG10 = "log10"
    BASE = "base"
    SAMPLE = "sample"
    NOT = "not"
    CONJUGATE = "conjugate"
    REAL = "real"
    IMAG = "imag"
    ARG = "arg"

    def __str__(self) -> str:
        return self.value

    def invert(self) -> BuiltInFunction:
        """Return the inverse function, e.g. ``asin`` for ``sin``."""
        try:
            return _INVERSES[self]
        except KeyError:
            raise UnableToInvertFunction(self.value) from None


_INVERSE_PAIRS = (
    (BuiltInFunction.SIN, BuiltInFunction.ASIN),
    (BuiltInFunction.COS, BuiltInFunction.ACOS),
    (BuiltInFunction.TAN, BuiltInFunction.ATAN),
    (BuiltInFunction.SINH, BuiltInFunction.ASINH),
    (BuiltInFunction.COSH, BuiltInFunction.ACOSH),
    (BuiltInFunction.TANH, BuiltInFunction.ATANH),
)

_INVERSES: dict[BuiltInFunction, BuiltInFunction] = {
    **{a: b for a, b in _INVERSE_PAIRS},
    **{b: a for a, b in _INVERSE_PAIRS},
}

# "arg" is deliberately absent: it has never been accepted when reading
# serialized data.
_PARSEABLE: dict[str, BuiltInFunction] = {
    func.value: func for func in BuiltInFunction if func is not BuiltInFunction.ARG
}


def parse_function_name(name: str) -> BuiltInFunction:
    """Look up a built-in function by its serialized name."""
    try:
        return _PARSEABLE[name]
    except KeyError:
        raise DeserializationError(f"unknown built-in function {name!r}") from None


def write_function(func: BuiltInFunction, stream: BinaryIO) -> None:
    """Serialize a built-in function as its name."""
    write_string(func.value, stream)


def read_function(stream: BinaryIO) -> BuiltInFunction:
    """Deserialize a built-in function written by :func:`write_function`."""
    return parse_function_name(read_string(stream))