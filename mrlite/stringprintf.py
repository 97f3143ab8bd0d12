"""printf-style string formatting."""

from __future__ import annotations


def string_printf(format: str, *args) -> str:
    """Format ``args`` with the printf-style ``format``."""
    return format % args


def string_append_f(dst: str, format: str, *args) -> str:
    """Return ``dst`` followed by ``args`` formatted with ``format``."""
    return dst + string_printf(format, *args)