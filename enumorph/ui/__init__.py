"""Rich output package for enumorph."""

from .conversion_report import ConversionReport

__all__ = [
    "ConversionReport",
]
