"""
Track data model - one instrument lane of a drum pattern.
"""

from dataclasses import dataclass
from typing import Tuple

STEPS_PER_TRACK = 16
STEPS_PER_BEAT = 4


@dataclass(frozen=True)
class Track:
    """
    A single instrument lane.

    Attributes:
        id: Track identifier (0-255, one byte in the file)
        name: Instrument label, may be empty
        steps: 16 on/off flags, one per sixteenth note of a 4/4 bar
    """

    id: int
    name: str
    steps: Tuple[bool, ...]

    def __post_init__(self):
        if not 0 <= self.id <= 255:
            raise ValueError(f"Track id must be 0-255, got {self.id}")
        # Accept any iterable of flags but always store a tuple of bools
        steps = tuple(bool(s) for s in self.steps)
        if len(steps) != STEPS_PER_TRACK:
            raise ValueError(f"Track must have {STEPS_PER_TRACK} steps, got {len(steps)}")
        object.__setattr__(self, "steps", steps)

    @property
    def label(self) -> str:
        """Printable form of the track id."""
        return str(self.id)

    @property
    def active_steps(self) -> int:
        """Number of steps switched on."""
        return sum(self.steps)

    def format_steps(self, on: str = "x", off: str = "-") -> str:
        """
        Render steps in runs of four between bar delimiters.

        Example:
            "|x---|x---|x---|x---|"
        """
        res = "|"
        for i, step in enumerate(self.steps):
            res += on if step else off
            if (i + 1) % STEPS_PER_BEAT == 0:
                res += "|"
        return res

    def __str__(self) -> str:
        return f"({self.label}) {self.name}\t{self.format_steps()}"
