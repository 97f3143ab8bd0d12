"""Joining a sequence of strings with a delimiter."""

from __future__ import annotations

from collections.abc import Iterable


def join_strings(strings: Iterable[str], delimiter: str = " ") -> str:
    """Concatenate ``strings`` in iteration order, separated by ``delimiter``."""
    return delimiter.join(strings)