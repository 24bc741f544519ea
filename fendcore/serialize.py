"""Binary encoding of primitive values: big-endian integers, strings and booleans."""

from __future__ import annotations

from typing import BinaryIO

USIZE_BYTES = 8


class DeserializationError(ValueError):
    """Raised when serialized data is well-formed in length but invalid in content."""

    def __init__(self, message: str = "failed to deserialize object") -> None:
        super().__init__(message)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _write_uint(value: int, size: int, stream: BinaryIO) -> None:
    stream.write(value.to_bytes(size, "big", signed=False))


def _read_uint(size: int, stream: BinaryIO) -> int:
    return int.from_bytes(_read_exact(stream, size), "big", signed=False)


def write_u8(value: int, stream: BinaryIO) -> None:
    """Write one unsigned byte."""
    _write_uint(value, 1, stream)


def read_u8(stream: BinaryIO) -> int:
    """Read one unsigned byte."""
    return _read_uint(1, stream)


def write_i32(value: int, stream: BinaryIO) -> None:
    """Write a signed 32-bit big-endian integer."""
    stream.write(value.to_bytes(4, "big", signed=True))


def read_i32(stream: BinaryIO) -> int:
    """Read a signed 32-bit big-endian integer."""
    return int.from_bytes(_read_exact(stream, 4), "big", signed=True)


def write_u64(value: int, stream: BinaryIO) -> None:
    """Write an unsigned 64-bit big-endian integer."""
    _write_uint(value, 8, stream)


def read_u64(stream: BinaryIO) -> int:
    """Read an unsigned 64-bit big-endian integer."""
    return _read_uint(8, stream)


def write_usize(value: int, stream: BinaryIO) -> None:
    """Write a size value as an unsigned 64-bit big-endian integer."""
    _write_uint(value, USIZE_BYTES, stream)


def read_usize(stream: BinaryIO) -> int:
    """Read a size value written by :func:`write_usize`."""
    return _read_uint(USIZE_BYTES, stream)


def write_string(value: str, stream: BinaryIO) -> None:
    """Write a UTF-8 string prefixed by its byte length."""
    encoded = value.encode("utf-8")
    write_usize(len(encoded), stream)
    stream.write(encoded)


def read_string(stream: BinaryIO) -> str:
    """Read a length-prefixed UTF-8 string."""
    length = read_usize(stream)
    data = _read_exact(stream, length)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DeserializationError("invalid UTF-8 in string") from exc


def write_bool(value: bool, stream: BinaryIO) -> None:
    """Write a boolean as a single 0 or 1 byte."""
    write_u8(1 if value else 0, stream)


def read_bool(stream: BinaryIO) -> bool:
    """Read a boolean; any byte other than 0 or 1 is rejected."""
    byte = read_u8(stream)
    if byte == 0:
        return False
    if byte == 1:
        return True
    raise DeserializationError(f"invalid boolean byte {byte}")