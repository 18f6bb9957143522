"""Format handlers."""

from splicedrum.formats.splice import SpliceReader

__all__ = ["SpliceReader"]
