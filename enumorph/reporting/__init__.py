"""Log file reporting for enumorph CLI runs."""

from .conversion_logger import ConversionLogger

__all__ = [
    "ConversionLogger",
]
