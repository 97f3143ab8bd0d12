"""Length-prefixed byte pieces stored in a shared pool, and their file IO.

A piece is either a region of a writable buffer whose first
``PIECE_HEADER_SIZE`` bytes hold the region's length, or a plain bytes
string.  Both kinds compare and serialise the same way.
"""

from __future__ import annotations

import struct
from typing import BinaryIO

PIECE_HEADER_SIZE = 4
MAX_PIECE_SIZE = 0xFFFFFFFF
MAX_READ_SIZE = 32 * 1024 * 1024

_HEADER = struct.Struct("<I")


class MemoryPiece:
    """A view on a length-prefixed region of a buffer, or on a bytes string."""

    __slots__ = ("_buffer", "_offset", "_string")
    __hash__ = None  # mutable

    def __init__(self, buffer=None, offset=0, size=0):
        self._buffer = None
        self._offset = 0
        self._string = None
        if buffer is not None:
            self.set(buffer, offset, size)

    def set(self, buffer, offset, size):
        """Point at ``buffer[offset:]`` and write ``size`` into its header."""
        if buffer is None:
            raise ValueError("buffer must not be None")
        if size < 0 or size > MAX_PIECE_SIZE:
            raise ValueError(f"piece size out of range: {size}")
        if offset < 0 or offset + PIECE_HEADER_SIZE + size > len(buffer):
            raise ValueError(
                f"buffer of length {len(buffer)} cannot hold a piece of "
                f"size {size} at offset {offset}"
            )
        _HEADER.pack_into(buffer, offset, size)
        self._buffer = buffer
        self._offset = offset
        self._string = None

    def set_string(self, string):
        """Point at a bytes string (a str is encoded as UTF-8)."""
        if string is None:
            raise ValueError("string must not be None")
        if isinstance(string, str):
            string = string.encode("utf-8")
        self._string = bytes(string)
        self._buffer = None
        self._offset = 0

    def clear(self):
        self._buffer = None
        self._offset = 0
        self._string = None

    def is_set(self):
        return self.is_string() or self.is_piece()

    def is_string(self):
        return self._string is not None

    def is_piece(self):
        return self._buffer is not None

    @property
    def buffer(self):
        """The buffer this piece lives in, or None."""
        return self._buffer

    @property
    def offset(self):
        """Offset of the piece header inside its buffer."""
        return self._offset

    def data(self):
        """The piece's bytes: a writable view for pool pieces, None if unset."""
        if self.is_piece():
            start = self._offset + PIECE_HEADER_SIZE
            return memoryview(self._buffer)[start:start + self.size()]
        if self.is_string():
            return self._string
        return None

    def size(self):
        if self.is_piece():
            return _HEADER.unpack_from(self._buffer, self._offset)[0]
        if self.is_string():
            return len(self._string)
        return 0

    def __lt__(self, other):
        if not isinstance(other, MemoryPiece):
            return NotImplemented
        return memory_piece_less_than(self, other)

    def __eq__(self, other):
        if not isinstance(other, MemoryPiece):
            return NotImplemented
        return memory_piece_equal(self, other)

    def __str__(self):
        if not self.is_set():
            return f"({self.size()}) [not set]"
        text = bytes(self.data()).decode("utf-8", errors="replace")
        return f"({self.size()}) {text}"

    def __repr__(self):
        return f"MemoryPiece{str(self)!r}"


def _content(piece):
    data = piece.data()
    return b"" if data is None else bytes(data)


def memory_piece_less_than(x, y):
    """Lexical byte-wise comparison; a proper prefix sorts first."""
    return _content(x) < _content(y)


def memory_piece_equal(x, y):
    return _content(x) == _content(y)


def write_varint32(output: BinaryIO, value):
    """Write an unsigned 32-bit value as a base-128 varint."""
    if value < 0 or value > MAX_PIECE_SIZE:
        raise ValueError(f"value out of uint32 range: {value}")
    encoded = bytearray()
    while value >= 0x80:
        encoded.append((value & 0x7F) | 0x80)
        value >>= 7
    encoded.append(value)
    output.write(bytes(encoded))


def read_varint32(input: BinaryIO):
    """Read a varint; return None at a clean end of stream."""
    result = 0
    for shift in range(0, 35, 7):
        byte = input.read(1)
        if not byte:
            if shift == 0:
                return None
            raise EOFError("truncated varint")
        b = byte[0]
        result |= (b & 0x7F) << shift
        if not b & 0x80:
            if result > MAX_PIECE_SIZE:
                raise ValueError("varint exceeds 32 bits")
            return result
    raise ValueError("varint longer than 5 bytes")


def write_memory_piece(output: BinaryIO, piece):
    """Write a piece as its varint length followed by its bytes."""
    if not piece.is_set():
        raise ValueError("cannot write an unset MemoryPiece")
    write_varint32(output, piece.size())
    if piece.size() > 0:
        output.write(bytes(piece.data()))


def read_memory_piece(input: BinaryIO):
    """Read one piece; return its bytes, or None at end of stream."""
    size = read_varint32(input)
    if size is None:
        return None
    if size >= MAX_READ_SIZE:
        raise ValueError(
            f"the size of string exceeds the maximum of {MAX_READ_SIZE}"
        )
    if size == 0:
        return b""
    data = input.read(size)
    if len(data) < size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data