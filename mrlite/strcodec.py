"""Conversions between integers and string keys or raw byte strings.

The ``*_to_key`` functions give a human-readable, zero-padded decimal
key of at least ten digits, so that keys sort like their values.  All of
them treat their value as a signed 32-bit integer, and reject values
that are negative in that view.

The ``encode_*``/``decode_*`` functions give the native in-memory byte
image of the value: fast, but not portable across machines of
different endianness.
"""

from __future__ import annotations

import re
import struct

KEY_FILL_SIZE = 10

_INT32 = struct.Struct("=i")
_UINT32 = struct.Struct("=I")
_INT64 = struct.Struct("=q")
_UINT64 = struct.Struct("=Q")

_KEY_NUMBER = re.compile(r"\s*([+-]?\d+)")


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Reinterpret ``value`` as a ``bits``-wide integer, as a C cast does."""
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _numeric_to_key(value: int) -> str:
    value = _wrap(value, 32, signed=True)
    if value < 0:
        raise ValueError(f"cannot build a key from a negative value: {value}")
    return f"{value:0{KEY_FILL_SIZE}d}"


def _key_to_numeric(key: str, bits: int, signed: bool) -> int:
    match = _KEY_NUMBER.match(key)
    if match is None:
        raise ValueError(f"key holds no number: {key!r}")
    value = int(match.group(1))
    low, high = (
        (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed else (0, (1 << bits) - 1)
    )
    if not low <= value <= high:
        raise ValueError(f"key {key!r} is out of range for a {bits}-bit integer")
    return value


def int32_to_key(value: int) -> str:
    return _numeric_to_key(value)


def uint32_to_key(value: int) -> str:
    return _numeric_to_key(value)


def int64_to_key(value: int) -> str:
    return _numeric_to_key(value)


def uint64_to_key(value: int) -> str:
    return _numeric_to_key(value)


def key_to_int32(key: str) -> int:
    return _key_to_numeric(key, 32, signed=True)


def key_to_uint32(key: str) -> int:
    return _key_to_numeric(key, 32, signed=False)


def key_to_int64(key: str) -> int:
    return _key_to_numeric(key, 64, signed=True)


def key_to_uint64(key: str) -> int:
    return _key_to_numeric(key, 64, signed=False)


def _encode(codec: struct.Struct, value: int, bits: int, signed: bool) -> bytes:
    if not -(1 << (bits - 1)) <= value < 1 << bits:
        raise ValueError(f"value does not fit in {bits} bits: {value}")
    return codec.pack(_wrap(value, bits, signed))


def _decode(codec: struct.Struct, data: bytes) -> int:
    if len(data) != codec.size:
        raise ValueError(f"expected {codec.size} bytes, got {len(data)}")
    return codec.unpack(data)[0]


def encode_int32(value: int) -> bytes:
    return _encode(_INT32, value, 32, signed=True)


def decode_int32(data: bytes) -> int:
    return _decode(_INT32, data)


def encode_uint32(value: int) -> bytes:
    return _encode(_UINT32, value, 32, signed=False)


def decode_uint32(data: bytes) -> int:
    return _decode(_UINT32, data)


def encode_int64(value: int) -> bytes:
    return _encode(_INT64, value, 64, signed=True)


def decode_int64(data: bytes) -> int:
    return _decode(_INT64, data)


def encode_uint64(value: int) -> bytes:
    return _encode(_UINT64, value, 64, signed=False)


def decode_uint64(data: bytes) -> int:
    return _decode(_UINT64, data)