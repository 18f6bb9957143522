"""
Pattern analysis module.

Provides structural inspection of SPLICE files.
"""

from splicedrum.analysis.frame_analyzer import (
    FrameAnalysis,
    FrameAnalyzer,
    FrameIssue,
    FrameRegion,
)

__all__ = [
    "FrameAnalysis",
    "FrameAnalyzer",
    "FrameIssue",
    "FrameRegion",
]
