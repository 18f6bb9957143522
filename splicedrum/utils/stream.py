"""
Stream primitives for field-by-field binary decoding.

LimitedReader bounds how many bytes may be pulled from an underlying
source; ByteCursor reads typed fields from any readable object while
tracking the absolute offset for error reporting.
"""

import struct
from typing import BinaryIO, Optional

from splicedrum.errors import TruncatedRecordError

# Upper bound for a single read call so a corrupt length field can never
# force a large allocation before the data is actually there.
READ_CHUNK_SIZE = 64 * 1024


class LimitedReader:
    """
    Read at most `limit` bytes from a source, then report end-of-input.

    Reads past the bound return b"" and never touch the source, even if
    it still has trailing bytes.

    Example:
        bounded = LimitedReader(f, 36)
        bounded.read(100)  # at most 36 bytes
    """

    def __init__(self, source: BinaryIO, limit: int):
        self._source = source
        self._remaining = max(0, limit)

    @property
    def remaining(self) -> int:
        """Bytes that may still be read before the bound is reached."""
        return self._remaining

    def read(self, size: int = -1) -> bytes:
        if self._remaining <= 0:
            return b""
        if size is None or size < 0 or size > self._remaining:
            size = self._remaining
        data = self._source.read(size)
        self._remaining -= len(data)
        return data


class ByteCursor:
    """
    Sequential reader of fixed-width fields.

    Args:
        source: Object with a read(size) method
        offset: Absolute offset of the first byte read from source
    """

    def __init__(self, source, offset: int = 0):
        self._source = source
        self._offset = offset

    @property
    def offset(self) -> int:
        """Absolute offset of the next byte to be read."""
        return self._offset

    @property
    def remaining(self) -> Optional[int]:
        """Bytes left in a bounded source, or None if the source is unbounded."""
        return getattr(self._source, "remaining", None)

    def read_upto(self, size: int) -> bytes:
        """
        Read up to `size` bytes, stopping early only at end-of-input.

        Short reads from the source are retried until it returns b"".
        """
        parts = []
        needed = size
        while needed > 0:
            chunk = self._source.read(min(needed, READ_CHUNK_SIZE))
            if not chunk:
                break
            parts.append(chunk)
            needed -= len(chunk)
        data = b"".join(parts)
        self._offset += len(data)
        return data

    def read_exact(self, size: int, field: str) -> bytes:
        """
        Read exactly `size` bytes.

        Raises:
            TruncatedRecordError: If input ends before `size` bytes
        """
        start = self._offset
        data = self.read_upto(size)
        if len(data) != size:
            raise TruncatedRecordError(
                f"Truncated {field} at offset {start}: "
                f"expected {size} bytes, got {len(data)}",
                field=field,
                offset=start,
                expected=size,
                actual=len(data),
            )
        return data

    def read_u8(self, field: str) -> int:
        return self.read_exact(1, field)[0]

    def read_u32_be(self, field: str) -> int:
        return struct.unpack(">I", self.read_exact(4, field))[0]

    def read_u64_be(self, field: str) -> int:
        return struct.unpack(">Q", self.read_exact(8, field))[0]

    def read_f32_le(self, field: str) -> float:
        return struct.unpack("<f", self.read_exact(4, field))[0]
