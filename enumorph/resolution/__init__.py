"""Resolution package for enumorph.

This package contains the EnumConverter, which applies primary and fallback
matchers in order, and the one-shot conversion functions built on it.

Example:
    >>> from enumorph.resolution import EnumConverter, convert
    >>> EnumConverter.to(Color).convert("red")
    <Color.RED: 1>
    >>> convert("RED", Color)
    <Color.RED: 1>
"""

from .enum_converter import (
    EnumConverter,
    convert,
    convert_with,
    default_matcher,
    to,
    using,
)

__all__ = [
    "EnumConverter",
    "convert",
    "convert_with",
    "default_matcher",
    "to",
    "using",
]
