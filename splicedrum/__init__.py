"""
splicedrum - Decoder for SPLICE drum machine pattern files.

This library provides tools to:
- Decode .splice files into an immutable Pattern model
- Render patterns as text step grids
- Inspect the frame structure of a file

Example usage:
    from splicedrum import decode_file

    pattern = decode_file("pattern_1.splice")
    print(pattern)
"""

__version__ = "0.1.0"
__author__ = "splicedrum Contributors"

from splicedrum.errors import (
    DecodeError,
    ErrorKind,
    MalformedFieldError,
    NotSpliceError,
    SpliceError,
    TruncatedRecordError,
)
from splicedrum.formats.splice.reader import SpliceReader, decode, decode_bytes, decode_file
from splicedrum.models.pattern import Pattern
from splicedrum.models.track import Track

__all__ = [
    "SpliceReader",
    "decode",
    "decode_bytes",
    "decode_file",
    "Pattern",
    "Track",
    "SpliceError",
    "NotSpliceError",
    "DecodeError",
    "TruncatedRecordError",
    "MalformedFieldError",
    "ErrorKind",
]
