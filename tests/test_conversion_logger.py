"""Tests for ConversionLogger log file output."""

from pathlib import Path

import pytest

from enumorph.models import ConversionSummary
from enumorph.reporting import ConversionLogger
from sample_enums import Color


class TestConversionLogger:
    """Tests for the structured log file."""

    def test_writes_all_sections(self, temp_dir: Path, sample_traces):
        log_path = temp_dir / "run.log"

        with ConversionLogger(log_path, target=Color) as logger:
            logger.log_header()
            logger.log_configuration(["by_name_ignoring_case(Color)"], [])
            logger.log_results(sample_traces)
            logger.log_summary(ConversionSummary.from_traces(sample_traces))

        content = log_path.read_text(encoding="utf-8")

        assert ConversionLogger.SEPARATOR in content
        assert "enumorph - Conversion Log" in content
        assert "Target: sample_enums.Color" in content
        assert "0. by_name_ignoring_case(Color)" in content
        assert "(none)" in content
        assert "'red' -> Color.RED (primary #0)" in content
        assert "'r' -> Color.RED (fallback #1)" in content
        assert "'purple' -> no match" in content
        assert "Values converted: 3" in content
        assert "Unmatched: 1" in content
        assert f"Log file: {log_path}" in content

    def test_separator_is_65_characters(self):
        assert len(ConversionLogger.SEPARATOR) == 65

    def test_missing_parent_directory(self, temp_dir: Path):
        with pytest.raises(OSError, match="does not exist"):
            ConversionLogger(temp_dir / "missing" / "run.log", target=Color)

    def test_parent_is_a_file(self, temp_dir: Path):
        blocker = temp_dir / "file.txt"
        blocker.write_text("x")

        with pytest.raises(OSError, match="not a directory"):
            ConversionLogger(blocker / "run.log", target=Color)

    def test_file_closed_after_context(self, temp_dir: Path):
        logger = ConversionLogger(temp_dir / "run.log", target=Color)
        with logger:
            logger.log_header()

        assert logger._file_handle is None
        assert logger.get_log_path() == temp_dir / "run.log"

    def test_write_after_close_warns(self, temp_dir: Path, capsys):
        logger = ConversionLogger(temp_dir / "run.log", target=Color)
        logger.log_header()

        assert "closed log file" in capsys.readouterr().err
