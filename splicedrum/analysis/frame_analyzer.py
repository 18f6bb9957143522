"""
SPLICE frame analyzer.

Produces a structural report of a file without raising on malformed
input:
- Region map attributing each byte to a header field or track record
- Decoded pattern, or the error that stopped decoding
- Trailing bytes after the declared frame
- Suspicious content (duplicate ids, unnamed tracks)
"""

import bisect
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from splicedrum.errors import SpliceError
from splicedrum.formats.splice.framer import FrameReader
from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.models.pattern import Pattern
from splicedrum.models.track import STEPS_PER_TRACK


@dataclass
class FrameRegion:
    """A byte range [start, end) with a field name."""

    start: int
    end: int
    name: str
    description: str
    track_index: Optional[int] = None

    @property
    def size(self) -> int:
        return self.end - self.start


@dataclass
class FrameIssue:
    """A single finding about the file."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class FrameAnalysis:
    """Complete SPLICE file analysis result."""

    filepath: str
    filesize: int
    pattern: Optional[Pattern] = None
    error: Optional[SpliceError] = None
    declared_length: Optional[int] = None
    regions: List[FrameRegion] = field(default_factory=list)
    issues: List[FrameIssue] = field(default_factory=list)
    data: bytes = field(default=b"", repr=False)

    # Region start offsets, rebuilt when regions change
    _starts: List[int] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def valid(self) -> bool:
        return self.pattern is not None

    @property
    def frame_end(self) -> Optional[int]:
        """Offset one past the last byte the decoder may consume."""
        if self.declared_length is None:
            return None
        # The version field is always read, even if the length undercounts it
        payload = max(0, self.declared_length - FrameReader.VERSION_SIZE)
        return FrameReader.TEMPO_OFFSET + payload

    @property
    def trailing_bytes(self) -> int:
        """Bytes present after the declared frame."""
        if self.frame_end is None:
            return 0
        return max(0, self.filesize - self.frame_end)

    @property
    def errors(self) -> List[FrameIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> List[FrameIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    def region_at(self, offset: int) -> Optional[FrameRegion]:
        """Find the region containing `offset`.

        Regions are sorted and non-overlapping, so this is a binary search.
        """
        if len(self._starts) != len(self.regions):
            self._starts = [r.start for r in self.regions]
        i = bisect.bisect_right(self._starts, offset) - 1
        if i >= 0 and offset < self.regions[i].end:
            return self.regions[i]
        return None


class FrameAnalyzer:
    """
    Analyze SPLICE files for display and validation.

    Example:
        analysis = FrameAnalyzer().analyze_file("pattern_1.splice")
        for region in analysis.regions:
            print(region.name, region.start, region.end)
    """

    def analyze_file(self, filepath: Union[str, Path]) -> FrameAnalysis:
        """Read and analyze a file."""
        filepath = Path(filepath)
        with open(filepath, "rb") as f:
            data = f.read()
        return self.analyze_bytes(data, str(filepath))

    def analyze_bytes(self, data: bytes, filepath: str = "") -> FrameAnalysis:
        """Analyze raw file contents."""
        analysis = FrameAnalysis(filepath=filepath, filesize=len(data), data=data)
        is_splice = data[: FrameReader.MAGIC_SIZE] == FrameReader.MAGIC

        if is_splice and len(data) >= FrameReader.VERSION_OFFSET:
            analysis.declared_length = int.from_bytes(
                data[FrameReader.LENGTH_OFFSET : FrameReader.VERSION_OFFSET], "big"
            )

        try:
            analysis.pattern = SpliceReader().parse_bytes(data)
        except SpliceError as e:
            analysis.error = e
            offset = getattr(e, "offset", None) or 0
            analysis.issues.append(FrameIssue("error", "Decode", offset, str(e)))

        # Foreign file: report the decode error only
        if not is_splice:
            return analysis

        analysis.regions = self._map_regions(analysis)
        self._check_frame_size(analysis)
        if analysis.pattern is not None:
            self._check_tracks(analysis)

        return analysis

    def _map_regions(self, analysis: FrameAnalysis) -> List[FrameRegion]:
        """Attribute bytes to fields, clipping at the end of the data."""
        data = analysis.data
        regions: List[FrameRegion] = []
        limit = len(data)
        if analysis.frame_end is not None:
            limit = min(limit, analysis.frame_end)

        def add(start, size, name, desc, track_index=None, bound=len(data)) -> bool:
            end = min(start + size, bound)
            if end > start:
                regions.append(FrameRegion(start, end, name, desc, track_index))
            return start + size <= bound

        if not add(0, FrameReader.MAGIC_SIZE, "MAGIC", "Magic marker"):
            return regions
        if not add(FrameReader.LENGTH_OFFSET, FrameReader.LENGTH_SIZE, "LENGTH", "Payload length"):
            return regions
        if not add(FrameReader.VERSION_OFFSET, FrameReader.VERSION_SIZE, "VERSION", "Version"):
            return regions
        if not add(FrameReader.TEMPO_OFFSET, FrameReader.TEMPO_SIZE, "TEMPO", "Tempo", bound=limit):
            return regions

        pos = FrameReader.TRACKS_OFFSET
        index = 0
        while pos < limit:
            add(pos, 1, "TRK_ID", f"Track {index} id", index, limit)
            if not add(pos + 1, 4, "TRK_LEN", f"Track {index} name length", index, limit):
                break
            name_length = int.from_bytes(data[pos + 1 : pos + 5], "big")
            pos += 5
            if not add(pos, name_length, "TRK_NAME", f"Track {index} name", index, limit):
                break
            pos += name_length
            if not add(pos, STEPS_PER_TRACK, "TRK_STEPS", f"Track {index} steps", index, limit):
                break
            pos += STEPS_PER_TRACK
            index += 1

        if analysis.trailing_bytes:
            regions.append(
                FrameRegion(analysis.frame_end, len(data), "TRAILING", "Bytes after frame")
            )

        return regions

    def _check_frame_size(self, analysis: FrameAnalysis) -> None:
        frame_end = analysis.frame_end
        if frame_end is None:
            return
        if analysis.trailing_bytes:
            analysis.issues.append(
                FrameIssue(
                    "warning",
                    "Frame",
                    frame_end,
                    f"{analysis.trailing_bytes} trailing bytes after declared frame",
                )
            )
        elif frame_end > analysis.filesize and analysis.valid:
            analysis.issues.append(
                FrameIssue(
                    "warning",
                    "Frame",
                    analysis.filesize,
                    f"Declared frame ends at {frame_end}, file has {analysis.filesize} bytes",
                )
            )

    def _check_tracks(self, analysis: FrameAnalysis) -> None:
        tracks = analysis.pattern.tracks
        counts = Counter(t.id for t in tracks)
        for track_id, count in sorted(counts.items()):
            if count > 1:
                analysis.issues.append(
                    FrameIssue("warning", "Tracks", 0, f"Track id {track_id} appears {count} times")
                )

        for i, track in enumerate(tracks):
            if not track.name:
                analysis.issues.append(
                    FrameIssue("info", "Tracks", 0, f"Track {i} (id {track.id}) has no name")
                )
