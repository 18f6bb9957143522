"""Utility functions for splicedrum."""

from splicedrum.utils.binary import bytes_to_bools, format_float32, null_terminated
from splicedrum.utils.stream import ByteCursor, LimitedReader

__all__ = [
    "bytes_to_bools",
    "format_float32",
    "null_terminated",
    "ByteCursor",
    "LimitedReader",
]
