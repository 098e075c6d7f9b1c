"""
Core data models for enumorph.

This module contains the following dataclasses:
- ConversionTrace: The outcome of converting one value, with the stage that matched
- ConversionSummary: Aggregated statistics over several conversions
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from .match_stage import MatchStage


@dataclass
class ConversionTrace:
    """Represents the outcome of converting a single value."""
    value: Any                        # Input value
    result: Optional[Enum]            # Matched member (None if no match)
    stage: MatchStage                 # Which stage matched
    matcher_index: Optional[int] = None  # Position within the stage's matchers

    @property
    def matched(self) -> bool:
        return self.result is not None


@dataclass
class ConversionSummary:
    """Summary of a batch of conversions."""
    total: int = 0                    # Values converted
    matched: int = 0                  # Values that resolved to a member
    unmatched: int = 0                # Values with no match
    primary_hits: int = 0             # Matches from primary matchers
    fallback_hits: int = 0            # Matches from fallback matchers

    @classmethod
    def from_traces(cls, traces: Iterable[ConversionTrace]) -> "ConversionSummary":
        """Aggregate a sequence of traces into a summary."""
        summary = cls()
        for trace in traces:
            summary.total += 1
            if trace.stage is MatchStage.PRIMARY:
                summary.primary_hits += 1
            elif trace.stage is MatchStage.FALLBACK:
                summary.fallback_hits += 1
            if trace.matched:
                summary.matched += 1
            else:
                summary.unmatched += 1
        return summary
