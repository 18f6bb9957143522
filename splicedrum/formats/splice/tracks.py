"""
SPLICE track record decoder.

Track record layout:
    Size    Description
    1       Track id (uint8)
    4       Name length N (uint32, big-endian)
    N       Name bytes
    16      Step flags, one byte each, non-zero = on
"""

import logging
from typing import List, Tuple

from splicedrum.errors import TruncatedRecordError
from splicedrum.models.track import STEPS_PER_TRACK, Track
from splicedrum.utils.binary import bytes_to_bools
from splicedrum.utils.stream import ByteCursor

logger = logging.getLogger(__name__)


class TrackDecoder:
    """
    Decode track records from a bounded payload until it is exhausted.

    End-of-input at the start of a record ends decoding cleanly; anywhere
    else inside a record it raises TruncatedRecordError.
    """

    STEP_COUNT = STEPS_PER_TRACK
    NAME_ENCODING = "utf-8"

    def __init__(self, payload: ByteCursor):
        self.payload = payload

    def decode(self) -> Tuple[Track, ...]:
        """
        Decode all remaining records.

        Returns:
            Tracks in order of appearance (empty tuple if none)
        """
        tracks: List[Track] = []

        while True:
            head = self.payload.read_upto(1)
            if not head:
                break
            track = self._decode_record(head[0])
            logger.debug("Track %d: %r (%d steps on)", track.id, track.name, track.active_steps)
            tracks.append(track)

        return tuple(tracks)

    def _decode_record(self, track_id: int) -> Track:
        """Decode the remainder of a record whose id byte was already read."""
        name_length = self.payload.read_u32_be("name length")
        self._check_available(name_length, "name")

        name_raw = self.payload.read_exact(name_length, "name")
        steps_raw = self.payload.read_exact(self.STEP_COUNT, "steps")

        return Track(
            id=track_id,
            name=name_raw.decode(self.NAME_ENCODING, errors="replace"),
            steps=bytes_to_bools(steps_raw),
        )

    def _check_available(self, size: int, field: str) -> None:
        """Reject a length that cannot fit in what is left of the frame."""
        remaining = self.payload.remaining
        if remaining is not None and size > remaining:
            raise TruncatedRecordError(
                f"Truncated {field} at offset {self.payload.offset}: "
                f"record claims {size} bytes, frame has {remaining} left",
                field=field,
                offset=self.payload.offset,
                expected=size,
                actual=remaining,
            )
