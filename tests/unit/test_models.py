"""
Unit tests for data models in enumorph.models.

Tests cover:
- MatchStage enum values
- ConversionTrace.matched
- ConversionSummary.from_traces aggregation
- InvalidConfigurationError hierarchy
"""

import pytest

from enumorph.models import (
    ConversionSummary,
    ConversionTrace,
    InvalidConfigurationError,
    MatchStage,
)
from sample_enums import Color


@pytest.mark.unit
class TestMatchStage:
    """Tests for the MatchStage enum."""

    def test_values(self):
        assert MatchStage.PRIMARY.value == "primary"
        assert MatchStage.FALLBACK.value == "fallback"
        assert MatchStage.NONE.value == "none"

    def test_member_count(self):
        assert len(MatchStage) == 3


@pytest.mark.unit
class TestConversionTrace:
    """Tests for ConversionTrace."""

    def test_matched_when_result_present(self):
        trace = ConversionTrace(value="red", result=Color.RED, stage=MatchStage.PRIMARY, matcher_index=0)
        assert trace.matched

    def test_not_matched_without_result(self):
        trace = ConversionTrace(value="purple", result=None, stage=MatchStage.NONE)
        assert not trace.matched
        assert trace.matcher_index is None


@pytest.mark.unit
class TestConversionSummary:
    """Tests for ConversionSummary."""

    def test_defaults(self):
        summary = ConversionSummary()
        assert summary.total == 0
        assert summary.matched == 0
        assert summary.unmatched == 0

    def test_from_traces(self, sample_traces):
        summary = ConversionSummary.from_traces(sample_traces)

        assert summary.total == 3
        assert summary.matched == 2
        assert summary.unmatched == 1
        assert summary.primary_hits == 1
        assert summary.fallback_hits == 1

    def test_from_empty_traces(self):
        assert ConversionSummary.from_traces([]) == ConversionSummary()

    def test_accepts_generator(self, sample_traces):
        summary = ConversionSummary.from_traces(t for t in sample_traces if t.matched)
        assert summary.total == 2
        assert summary.unmatched == 0


@pytest.mark.unit
def test_invalid_configuration_error_is_value_error():
    assert issubclass(InvalidConfigurationError, ValueError)
