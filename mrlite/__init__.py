"""Length-prefixed byte pieces with varint IO, string and integer codecs, and locks."""

__version__ = "0.1.0"