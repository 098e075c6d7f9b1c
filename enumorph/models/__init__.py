"""
Models package for enumorph.

This package provides convenient imports for all data models:
- MatchStage: Enum for the stage that produced a match
- ConversionTrace: Outcome of a single conversion
- ConversionSummary: Statistics over several conversions
- InvalidConfigurationError: Raised for missing or invalid configuration
"""

from .match_stage import MatchStage
from .errors import InvalidConfigurationError
from .data_models import (
    ConversionTrace,
    ConversionSummary,
)

__all__ = [
    "MatchStage",
    "InvalidConfigurationError",
    "ConversionTrace",
    "ConversionSummary",
]
