"""ConversionLogger for writing conversion runs to a structured log file.

This module provides the ConversionLogger class used by the ``enumorph``
CLI's ``--log-file`` option.
"""

import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Type

from enumorph.models import ConversionSummary, ConversionTrace


class ConversionLogger:
    """Logger for conversion runs with structured output format.

    Generates log files with sections for header, configuration, results,
    and summary.

    Usage:
        with ConversionLogger(log_path, target=Color) as logger:
            logger.log_header()
            logger.log_configuration(matcher_labels, fallback_labels)
            logger.log_results(traces)
            logger.log_summary(summary)

    Attributes:
        SEPARATOR: The 65-character separator line used between sections.
    """

    SEPARATOR = "=" * 65

    def __init__(self, log_file_path: Path, target: Type[Enum]) -> None:
        """Initialize the ConversionLogger.

        Args:
            log_file_path: Path of the log file to write.
            target: The enum type conversions resolve into.

        Raises:
            OSError: If the parent directory does not exist or is not a
                directory.
        """
        self._log_file_path = Path(log_file_path)
        self._target = target
        self._start_timestamp = datetime.now()
        self._file_handle: Optional[TextIO] = None

        parent = self._log_file_path.parent
        if not parent.exists():
            raise OSError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise OSError(f"Parent path is not a directory: {parent}")

    def __enter__(self) -> "ConversionLogger":
        """Open the log file for writing.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        try:
            self._file_handle = open(self._log_file_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open log file for writing: {e}") from e
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the log file if it is open."""
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing log file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    def get_log_path(self) -> Path:
        return self._log_file_path

    def log_header(self) -> None:
        """Write the title, timestamp and target enum."""
        self._write_separator()
        self._write_line("enumorph - Conversion Log")
        self._write_separator()
        self._write_line(f"Timestamp: {self._format_timestamp(self._start_timestamp)}")
        self._write_line(
            f"Target: {self._target.__module__}.{self._target.__qualname__}"
        )
        self._write_line("")

    def log_configuration(
        self, matcher_labels: Sequence[str], fallback_labels: Sequence[str]
    ) -> None:
        """Write the matcher configuration section.

        Args:
            matcher_labels: Descriptions of the primary matchers, in order.
            fallback_labels: Descriptions of the fallback matchers, in order.
        """
        self._write_separator()
        self._write_line("CONFIGURATION")
        self._write_separator()
        self._write_line("Primary matchers:")
        self._write_labels(matcher_labels)
        self._write_line("Fallback matchers:")
        self._write_labels(fallback_labels)
        self._write_line("")

    def log_results(self, traces: List[ConversionTrace]) -> None:
        """Write one line per conversion."""
        self._write_separator()
        self._write_line("RESULTS")
        self._write_separator()
        for trace in traces:
            if trace.matched:
                outcome = (
                    f"{self._target.__name__}.{trace.result.name} "
                    f"({trace.stage.value} #{trace.matcher_index})"
                )
            else:
                outcome = "no match"
            self._write_line(f"{trace.value!r} -> {outcome}", indent=2)
        self._write_line("")

    def log_summary(self, summary: ConversionSummary) -> None:
        """Write the summary section."""
        self._write_separator()
        self._write_line("SUMMARY")
        self._write_separator()
        self._write_line(f"Values converted: {summary.total}")
        self._write_line(f"Matched: {summary.matched}")
        self._write_line(f"Primary hits: {summary.primary_hits}", indent=2)
        self._write_line(f"Fallback hits: {summary.fallback_hits}", indent=2)
        self._write_line(f"Unmatched: {summary.unmatched}")
        self._write_line("")
        self._write_line(f"Log file: {self._log_file_path}")
        self._write_separator()

    def _write_labels(self, labels: Sequence[str]) -> None:
        if not labels:
            self._write_line("(none)", indent=2)
        for index, label in enumerate(labels):
            self._write_line(f"{index}. {label}", indent=2)

    def _format_timestamp(self, dt: datetime) -> str:
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_separator(self) -> None:
        self._write_line(self.SEPARATOR)

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the log file with optional indentation."""
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed log file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)
