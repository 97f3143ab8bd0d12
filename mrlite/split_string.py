"""Splitting a string on any of a set of delimiter characters.

Every character of ``delim`` is a possible delimiter.  Runs of
delimiters are treated as one separator, and empty substrings are
never produced.
"""

from __future__ import annotations

import re
from collections.abc import Iterator


def iter_split_string(full: str, delim: str) -> Iterator[str]:
    """Yield the non-empty substrings of ``full`` between delimiter characters."""
    if delim is None:
        raise ValueError("delim must not be None")
    if not delim:
        if full:
            yield full
        return
    pattern = re.compile(f"[^{re.escape(delim)}]+")
    for match in pattern.finditer(full):
        yield match.group()


def split_string_using(full: str, delim: str) -> list[str]:
    """The substrings of ``full`` in order of appearance."""
    return list(iter_split_string(full, delim))


def split_string_to_set_using(full: str, delim: str) -> set[str]:
    """The distinct substrings of ``full``."""
    return set(iter_split_string(full, delim))