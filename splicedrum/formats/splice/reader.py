"""
SPLICE file reader.

Reads .splice drum machine files and builds the Pattern model.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from splicedrum.formats.splice.framer import FrameReader
from splicedrum.formats.splice.tracks import TrackDecoder
from splicedrum.models.pattern import Pattern

logger = logging.getLogger(__name__)


class SpliceReader:
    """
    Reader for SPLICE pattern files.

    Decoding is all-or-nothing: a complete Pattern is returned or a
    SpliceError is raised.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"Version: {pattern.version}, Tempo: {pattern.tempo}")
    """

    def __init__(self):
        self.framer = FrameReader()

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a SPLICE file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Decoded Pattern
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a SPLICE file.

        The file handle is closed whether decoding succeeds or fails.

        Raises:
            OSError: If the file cannot be opened
            SpliceError: If the contents are not a valid SPLICE frame
        """
        filepath = Path(filepath)
        logger.debug("Decoding %s", filepath)

        with open(filepath, "rb") as f:
            return self.parse_stream(f)

    def parse_stream(self, stream: BinaryIO) -> Pattern:
        """
        Parse a SPLICE frame from a readable binary stream.

        Only the bytes the frame declares are consumed; anything after
        the frame is left unread.
        """
        frame = self.framer.read(stream)
        tracks = TrackDecoder(frame.payload).decode()

        return Pattern(
            version=frame.version,
            tempo=frame.tempo,
            tracks=tracks,
            _declared_length=frame.declared_length,
        )

    def parse_bytes(self, data: bytes) -> Pattern:
        """Parse a SPLICE frame held in memory."""
        return self.parse_stream(io.BytesIO(data))

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file starts with the SPLICE magic marker.

        Args:
            filepath: Path to check

        Returns:
            True if the file appears to be a SPLICE file
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                magic = f.read(FrameReader.MAGIC_SIZE)
        except OSError:
            return False

        return magic == FrameReader.MAGIC

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic header information without decoding the tracks.

        Args:
            filepath: Path to .splice file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read(FrameReader.TRACKS_OFFSET)
            size = f.seek(0, io.SEEK_END)

        info = {
            "valid": False,
            "size": size,
        }

        if len(data) >= FrameReader.VERSION_OFFSET:
            info["valid"] = data[: FrameReader.MAGIC_SIZE] == FrameReader.MAGIC
            info["declared_length"] = int.from_bytes(
                data[FrameReader.LENGTH_OFFSET : FrameReader.VERSION_OFFSET], "big"
            )
            info["frame_size"] = FrameReader.VERSION_OFFSET + info["declared_length"]

        if len(data) >= FrameReader.TEMPO_OFFSET:
            version = data[FrameReader.VERSION_OFFSET : FrameReader.TEMPO_OFFSET]
            info["version"] = version.split(b"\x00", 1)[0].decode("utf-8", errors="replace")

        return info


def decode(stream: BinaryIO) -> Pattern:
    """Decode a SPLICE pattern from a readable binary stream."""
    return SpliceReader().parse_stream(stream)


def decode_bytes(data: bytes) -> Pattern:
    """Decode a SPLICE pattern held in memory."""
    return SpliceReader().parse_bytes(data)


def decode_file(path: Union[str, Path]) -> Pattern:
    """
    Decode the drum machine file at `path`.

    Raises:
        OSError: If the file cannot be opened or read
        NotSpliceError: If the file is not a SPLICE file
        DecodeError: If a field or track record is truncated or malformed
    """
    return SpliceReader.read(path)
