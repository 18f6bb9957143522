"""
SPLICE frame header reader.

Frame layout (big-endian unless noted):
    Offset  Size    Description
    0       6       Magic "SPLICE"
    6       8       Declared payload length (uint64), counted from offset 14
    14      32      Version string, NUL-padded
    46      4       Tempo (float32, little-endian)
    50      ...     Track records until the payload length is exhausted
"""

import logging
import math
from dataclasses import dataclass
from typing import BinaryIO

from splicedrum.errors import DecodeError, MalformedFieldError, NotSpliceError
from splicedrum.utils.binary import null_terminated
from splicedrum.utils.stream import ByteCursor, LimitedReader

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """
    Validated frame header plus a cursor over the bounded payload.

    Attributes:
        version: Version string from the header
        tempo: Tempo in BPM
        declared_length: Payload length claimed by the header
        payload: Cursor positioned at the first track record
    """

    version: str
    tempo: float
    declared_length: int
    payload: ByteCursor


class FrameReader:
    """
    Reads and validates the fixed part of a SPLICE frame.

    Example:
        frame = FrameReader().read(f)
        print(frame.version, frame.tempo)
    """

    MAGIC = b"SPLICE"
    MAGIC_SIZE = 6
    LENGTH_SIZE = 8
    VERSION_SIZE = 32
    TEMPO_SIZE = 4

    # Offsets
    LENGTH_OFFSET = MAGIC_SIZE
    VERSION_OFFSET = LENGTH_OFFSET + LENGTH_SIZE
    TEMPO_OFFSET = VERSION_OFFSET + VERSION_SIZE
    TRACKS_OFFSET = TEMPO_OFFSET + TEMPO_SIZE

    def read(self, source: BinaryIO) -> Frame:
        """
        Read the frame header from `source`.

        Args:
            source: Readable binary stream positioned at the magic marker

        Returns:
            Frame with a payload cursor bounded by the declared length

        Raises:
            NotSpliceError: Bad magic or unreadable header
            MalformedFieldError: Tempo missing from the payload or not finite
        """
        cursor = ByteCursor(source)

        try:
            magic = cursor.read_upto(self.MAGIC_SIZE)
            if magic != self.MAGIC:
                raise NotSpliceError()
            declared_length = cursor.read_u64_be("length")
            version_raw = cursor.read_exact(self.VERSION_SIZE, "version")
        except (DecodeError, OSError) as e:
            raise NotSpliceError() from e

        version = null_terminated(version_raw)
        logger.debug("SPLICE header: length=%d version=%r", declared_length, version)

        # The version field already consumed part of the declared payload
        bounded = LimitedReader(source, declared_length - self.VERSION_SIZE)
        payload = ByteCursor(bounded, offset=self.TEMPO_OFFSET)

        tempo = self._read_tempo(payload)
        logger.debug("Tempo: %s BPM, %d payload bytes left", tempo, bounded.remaining)

        return Frame(
            version=version,
            tempo=tempo,
            declared_length=declared_length,
            payload=payload,
        )

    def _read_tempo(self, payload: ByteCursor) -> float:
        """Read the little-endian float32 tempo from the payload."""
        offset = payload.offset
        try:
            tempo = payload.read_f32_le("tempo")
        except DecodeError as e:
            raise MalformedFieldError(
                f"Cannot decode tempo at offset {e.offset}: "
                f"expected {e.expected} bytes, got {e.actual}",
                field="tempo",
                offset=e.offset,
                expected=e.expected,
                actual=e.actual,
            ) from e

        if not math.isfinite(tempo):
            raise MalformedFieldError(
                f"Tempo at offset {offset} is not a finite number: {tempo}",
                field="tempo",
                offset=offset,
                expected=self.TEMPO_SIZE,
                actual=self.TEMPO_SIZE,
            )
        return tempo
