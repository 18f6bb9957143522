"""
Small helpers for converting raw field bytes into Python values.
"""

import math
import struct
from typing import Iterable, Tuple

FLOAT32_MAX = 3.4028234663852886e38


def null_terminated(buf: bytes, encoding: str = "utf-8") -> str:
    """
    Decode a fixed-width NUL-padded string field.

    The string ends at the first zero byte; if there is none the whole
    buffer is used.

    Example:
        >>> null_terminated(b"0.808-alpha\\x00\\x00\\x00")
        '0.808-alpha'
    """
    end = buf.find(b"\x00")
    if end != -1:
        buf = buf[:end]
    return buf.decode(encoding, errors="replace")


def bytes_to_bools(buf: Iterable[int]) -> Tuple[bool, ...]:
    """Map each byte to a flag; any non-zero byte is True."""
    return tuple(b != 0 for b in buf)


def format_float32(value: float) -> str:
    """
    Format a float using the shortest text that survives a float32 round-trip.

    Whole numbers drop the trailing ".0", so 120.0 -> "120" and a float32
    read of 98.4 -> "98.4".
    """
    if not math.isfinite(value) or abs(value) > FLOAT32_MAX:
        return repr(value)

    packed = struct.pack("<f", value)
    text = repr(value)
    for precision in range(1, 10):
        candidate = float(f"{value:.{precision}g}")
        if struct.pack("<f", candidate) == packed:
            text = repr(candidate)
            break

    if text.endswith(".0"):
        text = text[:-2]
    return text
