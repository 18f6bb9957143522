"""SPLICE format handlers."""

from splicedrum.formats.splice.framer import Frame, FrameReader
from splicedrum.formats.splice.reader import SpliceReader, decode, decode_bytes, decode_file
from splicedrum.formats.splice.tracks import TrackDecoder

__all__ = [
    "Frame",
    "FrameReader",
    "SpliceReader",
    "TrackDecoder",
    "decode",
    "decode_bytes",
    "decode_file",
]
