"""Test configuration and fixtures."""

import struct
from typing import Optional, Sequence

import pytest

# Tracks of the reference pattern saved by a 0.808-alpha unit at 120 BPM
PATTERN_1_TRACKS = [
    (0, "kick", [1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0]),
    (1, "snare", [0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0]),
    (2, "clap", [0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0]),
    (3, "hh-open", [0, 0, 1, 0, 0, 0, 1, 0, 1, 0, 1, 0, 0, 0, 1, 0]),
    (4, "hh-close", [1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1]),
    (5, "cowbell", [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0]),
]

PATTERN_1_TEXT = """Saved with HW Version: 0.808-alpha
Tempo: 120
(0) kick\t|x---|x---|x---|x---|
(1) snare\t|----|x---|----|x---|
(2) clap\t|----|x-x-|----|----|
(3) hh-open\t|--x-|--x-|x-x-|--x-|
(4) hh-close\t|x---|x---|----|x--x|
(5) cowbell\t|----|----|--x-|----|
"""


def build_track(track_id: int, name: str, steps: Sequence[int], name_length: Optional[int] = None):
    """Encode one track record."""
    name_raw = name.encode("utf-8")
    if name_length is None:
        name_length = len(name_raw)
    return bytes([track_id]) + struct.pack(">I", name_length) + name_raw + bytes(steps)


def build_frame(
    version: str = "0.808-alpha",
    tempo: float = 120.0,
    tracks: bytes = b"",
    declared_length: Optional[int] = None,
    magic: bytes = b"SPLICE",
    trailing: bytes = b"",
) -> bytes:
    """Encode a SPLICE frame; the length covers version, tempo and tracks by default."""
    body = version.encode("utf-8").ljust(32, b"\x00")[:32] + struct.pack("<f", tempo) + tracks
    if declared_length is None:
        declared_length = len(body)
    return magic + struct.pack(">Q", declared_length) + body + trailing


@pytest.fixture
def make_frame():
    """Return the frame builder."""
    return build_frame


@pytest.fixture
def make_track():
    """Return the track record builder."""
    return build_track


@pytest.fixture
def empty_frame():
    """Frame with version and tempo only."""
    return build_frame()


@pytest.fixture
def pattern_1_data():
    """Return raw bytes of the six-track reference pattern."""
    tracks = b"".join(build_track(*t) for t in PATTERN_1_TRACKS)
    return build_frame(tracks=tracks)


@pytest.fixture
def pattern_1_text():
    return PATTERN_1_TEXT


@pytest.fixture
def pattern_1_file(tmp_path, pattern_1_data):
    """Return path to the reference pattern written to disk."""
    path = tmp_path / "pattern_1.splice"
    path.write_bytes(pattern_1_data)
    return path
