"""
enumorph - CLI Interface.

A command-line interface for resolving values into members of a Python enum,
useful for checking how raw values (config strings, legacy codes, other
enums' names) will be converted before wiring a converter into code.

Usage Examples:
    # Convert values by case-insensitive name
    enumorph convert myapp.enums:Color red GREEN Blue

    # Exact names only
    enumorph convert myapp.enums:Color RED red --case-sensitive

    # Explicit fallback mapping for legacy codes
    enumorph convert myapp.enums:Color r g --map r=RED --map g=GREEN

    # Tolerate typos, show which matcher hit, and log the run
    enumorph convert myapp.enums:Color gren --fuzzy --verbose --log-file run.log

    # List the members of an enum
    enumorph members myapp.enums:Color
"""

import importlib
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Type

import typer
from rich.console import Console

from enumorph.matching import (
    by_explicit_mapping,
    by_name,
    by_similar_name,
)
from enumorph.models import ConversionSummary, InvalidConfigurationError
from enumorph.reporting import ConversionLogger
from enumorph.resolution import EnumConverter
from enumorph.ui import ConversionReport

__version__ = "1.0.0"

# Initialize Typer app
app = typer.Typer(
    name="enumorph",
    help="enumorph - Resolve values into members of a Python enum.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"enumorph v{__version__}")
        raise typer.Exit()


def load_enum_type(target: str) -> Type[Enum]:
    """
    Import an enum type from a ``module.path:EnumName`` reference.

    The part after the colon may be dotted to reach a nested class.

    Args:
        target: Reference to the enum type.

    Returns:
        The referenced Enum subclass.

    Raises:
        typer.Exit: If the reference is malformed, cannot be imported, or
            does not name an Enum subclass.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        console.print(
            f"[red]Error:[/red] Target must look like 'module.path:EnumName', got: {target}"
        )
        raise typer.Exit(1)

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        console.print(f"[red]Error:[/red] Cannot import module '{module_name}': {e}")
        raise typer.Exit(1)

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            console.print(
                f"[red]Error:[/red] '{attr_path}' not found in module '{module_name}'"
            )
            raise typer.Exit(1)

    if not (isinstance(obj, type) and issubclass(obj, Enum)):
        console.print(f"[red]Error:[/red] '{target}' is not an Enum type")
        raise typer.Exit(1)

    return obj


def parse_mapping(entries: List[str], target: Type[Enum]) -> Dict[str, Enum]:
    """
    Parse ``KEY=MEMBER`` entries into an explicit mapping.

    MEMBER is looked up by exact name first, then case-insensitively.

    Args:
        entries: Raw ``--map`` option values.
        target: The enum type members are taken from.

    Returns:
        Dictionary mapping input strings to target members.

    Raises:
        typer.Exit: If an entry is malformed or names an unknown member.
    """
    mapping: Dict[str, Enum] = {}
    for entry in entries:
        key, sep, member_ref = entry.partition("=")
        key, member_ref = key.strip(), member_ref.strip()
        if not sep or not key:
            console.print(
                f"[red]Error:[/red] Mapping must look like 'KEY=MEMBER', got: {entry}"
            )
            raise typer.Exit(1)

        member = EnumConverter.using(by_name(target)).with_fallback(
            EnumConverter.to(target)
        ).convert(member_ref)
        if member is None:
            console.print(
                f"[red]Error:[/red] '{member_ref}' is not a member of {target.__name__}"
            )
            raise typer.Exit(1)
        mapping[key] = member
    return mapping


def validate_similarity(value: float) -> float:
    """
    Validate similarity threshold is within valid range.

    Args:
        value: Similarity value to validate.

    Returns:
        Validated similarity value.

    Raises:
        typer.BadParameter: If value is out of range.
    """
    if not 0.0 <= value <= 100.0:
        raise typer.BadParameter("Similarity must be between 0 and 100")
    return value


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """enumorph - Resolve values into members of a Python enum."""
    pass


@app.command()
def members(
    target: str = typer.Argument(..., help="Enum reference as 'module.path:EnumName'."),
) -> None:
    """
    List the members of an enum in definition order.
    """
    enum_type = load_enum_type(target)
    ConversionReport(console).display_members(enum_type)


@app.command()
def convert(
    target: str = typer.Argument(..., help="Enum reference as 'module.path:EnumName'."),
    values: List[str] = typer.Argument(..., help="Values to convert."),
    case_sensitive: bool = typer.Option(
        False,
        "--case-sensitive",
        "-s",
        help="Match member names exactly instead of ignoring case.",
    ),
    mapping: Optional[List[str]] = typer.Option(
        None,
        "--map",
        "-m",
        help="Explicit fallback mapping KEY=MEMBER (repeatable).",
    ),
    fuzzy: bool = typer.Option(
        False,
        "--fuzzy",
        "-f",
        help="Add a similar-name matcher as the last fallback.",
    ),
    min_similarity: float = typer.Option(
        85.0,
        "--min-similarity",
        help="Minimum name similarity for --fuzzy (0-100).",
        callback=validate_similarity,
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 if any value has no match.",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        "-l",
        help="Path for log file output.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show which matcher produced each result.",
    ),
) -> None:
    """
    Convert values into members of an enum.

    Values are matched by member name (case-insensitive unless
    --case-sensitive), then by the --map entries, then by name similarity
    if --fuzzy is given.
    """
    enum_type = load_enum_type(target)

    try:
        if case_sensitive:
            converter = EnumConverter.using(by_name(enum_type))
        else:
            converter = EnumConverter.to(enum_type)

        fallbacks = []
        if mapping:
            fallbacks.append(by_explicit_mapping(parse_mapping(mapping, enum_type)))
        if fuzzy:
            fallbacks.append(by_similar_name(enum_type, min_similarity / 100.0))
        converter.with_fallbacks(fallbacks)
    except InvalidConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    traces = [converter.explain(value) for value in values]
    summary = ConversionSummary.from_traces(traces)

    matcher_labels = [repr(m) for m in converter.matchers]
    fallback_labels = [repr(m) for m in converter.fallbacks]

    report = ConversionReport(console)
    report.display_conversions(
        traces,
        enum_type,
        verbose=verbose,
        matcher_labels=matcher_labels,
        fallback_labels=fallback_labels,
    )
    report.display_summary(summary)

    if log_file:
        try:
            with ConversionLogger(log_file, target=enum_type) as logger_instance:
                logger_instance.log_header()
                logger_instance.log_configuration(matcher_labels, fallback_labels)
                logger_instance.log_results(traces)
                logger_instance.log_summary(summary)
            console.print(f"[dim]Log written to: {log_file}[/dim]")
        except OSError as e:
            console.print(
                f"[yellow]Warning:[/yellow] Failed to write log file: {e}."
            )

    if strict and summary.unmatched:
        console.print(
            f"[red]Error:[/red] {summary.unmatched} value(s) did not match {enum_type.__name__}"
        )
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
