"""
Error types raised while decoding SPLICE pattern files.

Every error carries an ErrorKind so callers can branch on the
classification without comparing against shared sentinel objects.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classification of decode failures."""

    NOT_SPLICE = "not_splice"
    TRUNCATED_RECORD = "truncated_record"
    MALFORMED_FIELD = "malformed_field"


class SpliceError(Exception):
    """Base class for all SPLICE decoding errors."""

    kind: ErrorKind


class NotSpliceError(SpliceError):
    """Raised when a stream does not start with a readable SPLICE header."""

    kind = ErrorKind.NOT_SPLICE

    def __init__(self, message: str = "Not a SPLICE stream"):
        super().__init__(message)


class DecodeError(SpliceError):
    """
    Structural violation below the frame header.

    Attributes:
        field: Name of the field being read
        offset: Absolute byte offset of the field in the frame
        expected: Number of bytes the field requires
        actual: Number of bytes that were available
    """

    def __init__(
        self,
        message: str,
        field: str = "",
        offset: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        super().__init__(message)
        self.field = field
        self.offset = offset
        self.expected = expected
        self.actual = actual


class TruncatedRecordError(DecodeError):
    """A track record extends past the available input."""

    kind = ErrorKind.TRUNCATED_RECORD


class MalformedFieldError(DecodeError):
    """A fixed-format field could not be decoded from its bytes."""

    kind = ErrorKind.MALFORMED_FIELD
