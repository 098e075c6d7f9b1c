"""
MatchStage enum for the two-stage conversion algorithm.

A conversion walks its matchers in two stages, in order of evaluation:
1. Primary - matchers supplied when the converter was built
2. Fallback - matchers tried only when every primary matcher missed
"""

from enum import Enum


class MatchStage(Enum):
    """Records which stage of the converter produced a result."""
    PRIMARY = "primary"      # Stage 1: one of the primary matchers hit
    FALLBACK = "fallback"    # Stage 2: one of the fallback matchers hit
    NONE = "none"            # No matcher hit
