"""enumorph - Enum conversion by ordered matchers.

A Python library for resolving arbitrary values into members of a target
enum by trying an ordered sequence of matchers, with optional fallbacks.
"""

__version__ = "1.0.0"

from .models import (
    ConversionSummary,
    ConversionTrace,
    InvalidConfigurationError,
    MatchStage,
)
from .matching import (
    by_explicit_mapping,
    by_name,
    by_name_ignoring_case,
    by_similar_name,
    first_matching_against_members,
    first_matching_member,
    member_name,
)
from .resolution import (
    EnumConverter,
    convert,
    convert_with,
    default_matcher,
    to,
    using,
)

__all__ = [
    "__version__",
    "ConversionSummary",
    "ConversionTrace",
    "InvalidConfigurationError",
    "MatchStage",
    "by_explicit_mapping",
    "by_name",
    "by_name_ignoring_case",
    "by_similar_name",
    "first_matching_against_members",
    "first_matching_member",
    "member_name",
    "EnumConverter",
    "convert",
    "convert_with",
    "default_matcher",
    "to",
    "using",
]


def main() -> None:
    """Entry point for the enumorph CLI application.

    This function is called when the `enumorph` command is invoked after
    package installation via pip. It imports and runs the Typer app
    from the enumorph.cli module.
    """
    from enumorph.cli import app
    app()
