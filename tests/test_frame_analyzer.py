"""Tests for SPLICE frame analysis."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from splicedrum.analysis import FrameAnalyzer
from splicedrum.errors import NotSpliceError, TruncatedRecordError

KICK = [1, 0, 0, 0] * 4


class TestFrameAnalyzer:
    """Test cases for FrameAnalyzer."""

    def test_region_map(self, make_frame, make_track):
        data = make_frame(tracks=make_track(1, "kick", KICK))
        analysis = FrameAnalyzer().analyze_bytes(data)

        assert analysis.valid
        assert [r.name for r in analysis.regions] == [
            "MAGIC",
            "LENGTH",
            "VERSION",
            "TEMPO",
            "TRK_ID",
            "TRK_LEN",
            "TRK_NAME",
            "TRK_STEPS",
        ]
        assert analysis.region_at(0).name == "MAGIC"
        assert analysis.region_at(50).name == "TRK_ID"
        assert analysis.region_at(55).name == "TRK_NAME"
        assert analysis.region_at(len(data) - 1).name == "TRK_STEPS"
        assert analysis.region_at(len(data)) is None

    def test_regions_are_contiguous(self, pattern_1_data):
        analysis = FrameAnalyzer().analyze_bytes(pattern_1_data)

        for prev, cur in zip(analysis.regions, analysis.regions[1:]):
            assert prev.end == cur.start
        assert analysis.regions[-1].end == len(pattern_1_data)

    def test_empty_name_has_no_name_region(self, make_frame, make_track):
        data = make_frame(tracks=make_track(3, "", KICK))
        analysis = FrameAnalyzer().analyze_bytes(data)

        names = [r.name for r in analysis.regions]
        assert "TRK_NAME" not in names
        assert names[-1] == "TRK_STEPS"
        assert any(i.severity == "info" for i in analysis.issues)

    def test_trailing_bytes(self, pattern_1_data):
        analysis = FrameAnalyzer().analyze_bytes(pattern_1_data + b"\x00" * 12)

        assert analysis.valid
        assert analysis.trailing_bytes == 12
        assert analysis.frame_end == len(pattern_1_data)
        assert analysis.regions[-1].name == "TRAILING"
        assert len(analysis.warnings) == 1

    def test_duplicate_ids_warned(self, make_frame, make_track):
        tracks = make_track(1, "kick", KICK) + make_track(1, "kick", KICK)
        analysis = FrameAnalyzer().analyze_bytes(make_frame(tracks=tracks))

        assert analysis.valid
        assert any("appears 2 times" in w.message for w in analysis.warnings)

    def test_truncated_file(self, pattern_1_data):
        analysis = FrameAnalyzer().analyze_bytes(pattern_1_data[:-4])

        assert not analysis.valid
        assert isinstance(analysis.error, TruncatedRecordError)
        assert len(analysis.errors) == 1
        assert analysis.regions[-1].name == "TRK_STEPS"
        assert analysis.regions[-1].end == len(pattern_1_data) - 4

    def test_not_splice(self):
        analysis = FrameAnalyzer().analyze_bytes(b"RIFF")

        assert not analysis.valid
        assert isinstance(analysis.error, NotSpliceError)
        assert analysis.declared_length is None
        assert analysis.trailing_bytes == 0

    def test_foreign_file_reports_only_decode_error(self):
        """Test that a length read from a non-SPLICE header is not trusted."""
        data = b"RIFF" + b"\x00" * 9 + b"\x01" + bytes(100)
        analysis = FrameAnalyzer().analyze_bytes(data)

        assert isinstance(analysis.error, NotSpliceError)
        assert [(i.severity, i.message) for i in analysis.issues] == [
            ("error", "Not a SPLICE stream")
        ]
        assert analysis.declared_length is None
        assert analysis.regions == []
        assert analysis.trailing_bytes == 0
        assert analysis.region_at(0) is None

    def test_keeps_analyzed_data(self, pattern_1_data):
        analysis = FrameAnalyzer().analyze_bytes(pattern_1_data)

        assert analysis.data == pattern_1_data
        assert analysis.filesize == len(pattern_1_data)

    def test_region_at_every_byte(self, pattern_1_data):
        """Test that lookup agrees with the region bounds for each offset."""
        analysis = FrameAnalyzer().analyze_bytes(pattern_1_data)

        for region in analysis.regions:
            for offset in range(region.start, region.end):
                assert analysis.region_at(offset) is region
        assert analysis.region_at(-1) is None

    def test_analyze_file(self, pattern_1_file):
        analysis = FrameAnalyzer().analyze_file(pattern_1_file)

        assert analysis.filepath == str(pattern_1_file)
        assert analysis.pattern is not None
        assert len(analysis.pattern.tracks) == 6
