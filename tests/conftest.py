"""Pytest fixtures for enumorph tests."""

import io
from pathlib import Path
from typing import Dict, Generator
import tempfile

import pytest
from rich.console import Console

from enumorph.models import ConversionTrace, MatchStage
from enumorph.ui import ConversionReport
from sample_enums import A, B, Color


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests of a single component")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def explicit_enum_mapping() -> Dict[A, B]:
    """A-to-B mapping where A.A_VALUE has no same-named B member."""
    return {
        A.COMMON_VALUE: B.COMMON_VALUE,
        A.A_VALUE: B.B_VALUE,
    }


@pytest.fixture
def explicit_string_mapping() -> Dict[str, B]:
    """String-to-B mapping keyed by A's member names."""
    return {
        "COMMON_VALUE": B.COMMON_VALUE,
        "A_VALUE": B.B_VALUE,
    }


@pytest.fixture
def sample_traces() -> list:
    """One trace per stage, for report and logger tests."""
    return [
        ConversionTrace(value="red", result=Color.RED, stage=MatchStage.PRIMARY, matcher_index=0),
        ConversionTrace(value="r", result=Color.RED, stage=MatchStage.FALLBACK, matcher_index=1),
        ConversionTrace(value="purple", result=None, stage=MatchStage.NONE),
    ]


@pytest.fixture
def report_with_captured_output() -> ConversionReport:
    """Create a ConversionReport whose console writes to a StringIO buffer.

    Read the output with ``report.console.file.getvalue()``.
    """
    console = Console(file=io.StringIO(), force_terminal=False, width=120)
    return ConversionReport(console=console)
