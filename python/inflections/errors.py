"""
Exceptions raised by the inflections package.

Transformations never raise; only loading external rule documents can fail.
"""


class InflectionError(Exception):
    """Base class for inflections errors."""


class InflectionDecodeError(InflectionError, ValueError):
    """An irregular-word document could not be decoded."""
