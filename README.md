# mrlite

Small building blocks for handling key-value data:

- length-prefixed byte pieces that live in a shared buffer, with lexical
  comparison and varint-prefixed file IO;
- helpers for splitting, joining and printf-style formatting of strings;
- fixed-width decimal keys and native binary encodings of integers;
- mutex primitives that can be used as context managers.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Memory pieces (`mrlite.memory_piece`)

A `MemoryPiece` refers either to a region of a writable buffer, such as a
`bytearray`, or to a plain bytes string. A region starts with a 4-byte
little-endian length header (`PIECE_HEADER_SIZE`), and the data follows it.
`set(buffer, offset, size)` writes the header. `set_string(string)` stores a
bytes string, and encodes a `str` as UTF-8. `data()` returns a writable
`memoryview` for a buffer piece, the bytes for a string piece, and `None` for a
piece that is not set. Pieces of either kind compare by content with `<` and
`==`, or with `memory_piece_less_than` and `memory_piece_equal`.

```python
import io
from mrlite.memory_piece import MemoryPiece, read_memory_piece, write_memory_piece

pool = bytearray(64)
apple = MemoryPiece(pool, 0, 5)
apple.data()[:] = b"apple"

pear = MemoryPiece()
pear.set_string("pear")
assert apple < pear

stream = io.BytesIO()
write_memory_piece(stream, apple)
write_memory_piece(stream, pear)
stream.seek(0)
assert read_memory_piece(stream) == b"apple"
assert read_memory_piece(stream) == b"pear"
assert read_memory_piece(stream) is None   # clean end of stream
```

On disk a piece is a base-128 varint length followed by its bytes.
`write_varint32` and `read_varint32` can be used on their own. Reading behaves
as follows:

- `read_varint32` and `read_memory_piece` return `None` at a clean end of stream.
- A truncated varint or piece body raises `EOFError`.
- A piece of 32 MiB or more (`MAX_READ_SIZE`) raises `ValueError`.
- Writing a piece that is not set raises `ValueError`.

## Strings

- `mrlite.split_string`: `split_string_using(full, delim)` returns a list,
  `split_string_to_set_using(full, delim)` returns a set, and
  `iter_split_string(full, delim)` is a generator. Every character of `delim`
  is a delimiter. Runs of delimiters count as one, and empty fields are
  dropped, so `split_string_using(" apple \torange ", " \t")` gives
  `["apple", "orange"]`.
- `mrlite.join_strings`: `join_strings(strings, delimiter=" ")`.
- `mrlite.stringprintf`: `string_printf(format, *args)` applies `%`-formatting.
  `string_append_f(dst, format, *args)` returns `dst` with the formatted text
  appended.

## Integer codecs (`mrlite.strcodec`)

- `int32_to_key`, `uint32_to_key`, `int64_to_key` and `uint64_to_key` give a
  zero-padded decimal key at least ten digits long, so
  `int32_to_key(42) == "0000000042"`. Each of them reinterprets the value as a
  signed 32-bit integer and raises `ValueError` if the result is negative.
- `key_to_int32`, `key_to_uint32`, `key_to_int64` and `key_to_uint64` parse the
  leading integer of a key. They raise `ValueError` if there is none, or if it
  is out of range for the type.
- `encode_*` and `decode_*` for `int32`, `uint32`, `int64` and `uint64` convert
  between integers and their native in-memory bytes. Native byte order is not
  portable between machines of different endianness. Decoding data of the
  wrong length raises `ValueError`.

## Locks

- `mrlite.mutex.Mutex(recursive=True)` wraps `threading.RLock`, or
  `threading.Lock` when `recursive=False`. It provides `lock()`, `try_lock()`
  and `unlock()`. Unlocking a mutex that is not held raises `RuntimeError`. It
  works as a context manager, and `locker()` returns a `ScopedLocker` for it.
- `mrlite.mutex.NullMutex` has the same interface but never blocks.
  `locked()` reports its state.
- `mrlite.scoped_locker`: `ScopedLocker`, `ScopedReaderLocker` and
  `ScopedWriterLocker` hold a lock for the length of a `with` block. They call
  `lock`/`unlock`, `reader_lock`/`reader_unlock` and
  `writer_lock`/`writer_unlock` respectively.

```python
from mrlite.mutex import Mutex

mutex = Mutex()
with mutex.locker():
    ...  # mutex held here
```

## What this package does not do

The package provides the pieces and the on-disk record format, but not the
components built on top of them. It does not include:

- a memory-pool allocator;
- a buffer that sorts key-value pairs and spills them to files;
- an iterator that merges spilled files back in key order;
- a condition variable;
- glob-style file-pattern matching.

It has no command-line interface.