"""Tests for the Rich-based ConversionReport."""

from enumorph.models import ConversionSummary
from enumorph.ui import ConversionReport
from sample_enums import Color


def output_of(report: ConversionReport) -> str:
    return report.console.file.getvalue()


class TestDisplayMembers:
    """Tests for display_members()."""

    def test_lists_canonical_members_in_order(self, report_with_captured_output):
        report_with_captured_output.display_members(Color)
        output = output_of(report_with_captured_output)

        assert "Color members" in output
        assert output.index("RED") < output.index("GREEN") < output.index("BLUE")
        assert "CRIMSON" not in output


class TestDisplayConversions:
    """Tests for display_conversions()."""

    def test_shows_results(self, report_with_captured_output, sample_traces):
        report_with_captured_output.display_conversions(sample_traces, Color)
        output = output_of(report_with_captured_output)

        assert "Conversions to Color" in output
        assert "Color.RED" in output
        assert "'purple'" in output
        assert "no match" in output
        assert "Stage" not in output

    def test_verbose_shows_stage_and_matcher(self, report_with_captured_output, sample_traces):
        report_with_captured_output.display_conversions(
            sample_traces,
            Color,
            verbose=True,
            matcher_labels=["by_name_ignoring_case(Color)"],
            fallback_labels=["never", "by_explicit_mapping(1 entries)"],
        )
        output = output_of(report_with_captured_output)

        assert "primary" in output
        assert "fallback" in output
        assert "by_name_ignoring_case(Color)" in output
        assert "by_explicit_mapping(1 entries)" in output

    def test_verbose_without_labels_uses_index(self, report_with_captured_output, sample_traces):
        report_with_captured_output.display_conversions(sample_traces, Color, verbose=True)
        output = output_of(report_with_captured_output)

        assert "#0" in output
        assert "#1" in output

    def test_markup_in_input_is_escaped(self, report_with_captured_output):
        from enumorph.models import ConversionTrace, MatchStage

        traces = [ConversionTrace(value="[bold]x[/bold]", result=None, stage=MatchStage.NONE)]
        report_with_captured_output.display_conversions(traces, Color)

        assert "[bold]x[/bold]" in output_of(report_with_captured_output)

    def test_empty_traces(self, report_with_captured_output):
        report_with_captured_output.display_conversions([], Color)

        assert "No values to convert" in output_of(report_with_captured_output)


class TestDisplaySummary:
    """Tests for display_summary()."""

    def test_shows_counts(self, report_with_captured_output, sample_traces):
        report_with_captured_output.display_summary(ConversionSummary.from_traces(sample_traces))
        output = output_of(report_with_captured_output)

        assert "Values converted: 3" in output
        assert "Matched: 2" in output
        assert "primary: 1, fallback: 1" in output
        assert "Unmatched: 1" in output
