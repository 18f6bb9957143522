"""Data models for decoded drum patterns."""

from splicedrum.models.pattern import Pattern
from splicedrum.models.track import STEPS_PER_TRACK, Track

__all__ = [
    "Pattern",
    "Track",
    "STEPS_PER_TRACK",
]
