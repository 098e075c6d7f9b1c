"""Enum conversion for enumorph.

This module provides the EnumConverter class, which resolves an input value
into a member of a target enum by trying an ordered sequence of matchers.

Matchers are evaluated in two stages, returning early on the first hit:
    1. Primary matchers, supplied when the converter is created
    2. Fallback matchers, tried only when every primary matcher missed

A converter created with ``EnumConverter.to(Target)`` uses a single primary
matcher comparing names case-insensitively. Explicit matchers replace that
default; fallbacks are the only way to supplement it.

Example:
    >>> from enumorph.resolution import EnumConverter
    >>> from enumorph.matching import by_explicit_mapping
    >>> converter = EnumConverter.to(B).with_fallback(
    ...     by_explicit_mapping({A.A_VALUE: B.B_VALUE})
    ... )
    >>> converter.convert(A.COMMON_VALUE)
    <B.COMMON_VALUE: 1>
    >>> converter.convert(A.A_VALUE)
    <B.B_VALUE: 2>
"""

from enum import Enum
from typing import Any, Optional, Sequence, Tuple, Type, Union

from enumorph.matching import Matcher, by_name_ignoring_case, require_enum_type
from enumorph.models import ConversionTrace, InvalidConfigurationError, MatchStage


def _freeze_matchers(matchers: Sequence[Matcher], kind: str) -> Tuple[Matcher, ...]:
    """Copy a matcher sequence into a tuple, validating every entry.

    Args:
        matchers: The matchers to validate.
        kind: Name used in error messages ("matchers" or "fallbacks").

    Raises:
        InvalidConfigurationError: If the sequence or an entry is missing,
            or an entry is not callable.
    """
    if matchers is None:
        raise InvalidConfigurationError(f"The {kind} must be defined")
    if isinstance(matchers, type) and issubclass(matchers, Enum):
        raise InvalidConfigurationError(
            f"Expected a sequence of {kind}, got the enum type {matchers.__name__}; "
            "use EnumConverter.to() for name matching"
        )

    try:
        frozen = tuple(matchers)
    except TypeError as e:
        raise InvalidConfigurationError(
            f"The {kind} must be a sequence of callables, got {matchers!r}"
        ) from e
    for index, matcher in enumerate(frozen):
        if matcher is None:
            raise InvalidConfigurationError(f"The {kind} must not contain None (index {index})")
        if not callable(matcher):
            raise InvalidConfigurationError(
                f"The {kind} must be callables, got {matcher!r} at index {index}"
            )
    return frozen


def default_matcher(target: Type[Enum]) -> Matcher:
    """The matcher used by ``EnumConverter.to()``: case-insensitive name equality."""
    return by_name_ignoring_case(target)


class EnumConverter:
    """Converts input values into members of a target enum.

    Primary matchers are tried in order, then fallback matchers. The first
    matcher returning a member wins and no later matcher is invoked. A None
    input never reaches the matchers.

    The converter is also callable, so it can be handed to ``map()``:

        >>> list(map(EnumConverter.to(B), [A.COMMON_VALUE, A.A_VALUE]))
        [<B.COMMON_VALUE: 1>, None]

    Configure a converter fully before sharing it between threads;
    ``with_fallback()`` and ``with_fallbacks()`` rebind the fallback tuple
    and are not synchronized with in-flight conversions.

    Attributes:
        matchers: Primary matchers, in evaluation order.
        fallbacks: Fallback matchers, in evaluation order.
    """

    def __init__(self, matchers: Sequence[Matcher]) -> None:
        """Initialize the converter with explicit primary matchers.

        Args:
            matchers: Primary matchers to apply in order. May be empty.

        Raises:
            InvalidConfigurationError: If matchers is None or contains an
                entry that is None or not callable.
        """
        self._matchers = _freeze_matchers(matchers, "matchers")
        self._fallbacks: Tuple[Matcher, ...] = ()

    @classmethod
    def to(cls, target: Type[Enum]) -> "EnumConverter":
        """Create a converter using the default matcher for target."""
        return cls([default_matcher(require_enum_type(target))])

    @classmethod
    def using(cls, matcher: Matcher) -> "EnumConverter":
        """Create a converter with a single explicit primary matcher."""
        if matcher is None:
            raise InvalidConfigurationError("The matcher must be defined")
        return cls([matcher])

    @classmethod
    def using_all(cls, matchers: Sequence[Matcher]) -> "EnumConverter":
        """Create a converter with several explicit primary matchers."""
        return cls(matchers)

    @property
    def matchers(self) -> Tuple[Matcher, ...]:
        return self._matchers

    @property
    def fallbacks(self) -> Tuple[Matcher, ...]:
        return self._fallbacks

    def with_fallback(self, matcher: Matcher) -> "EnumConverter":
        """Replace any previous fallbacks with a single fallback matcher.

        Returns:
            The converter itself, for chaining.

        Raises:
            InvalidConfigurationError: If matcher is None or not callable.
        """
        if matcher is None:
            raise InvalidConfigurationError("The fallback must be defined")
        return self.with_fallbacks([matcher])

    def with_fallbacks(self, matchers: Sequence[Matcher]) -> "EnumConverter":
        """Replace any previous fallbacks with a sequence of fallback matchers.

        Returns:
            The converter itself, for chaining.

        Raises:
            InvalidConfigurationError: If matchers is None or contains an
                entry that is None or not callable.
        """
        self._fallbacks = _freeze_matchers(matchers, "fallbacks")
        return self

    def convert(self, value: Any) -> Optional[Enum]:
        """Convert value into a target member.

        Args:
            value: The value to convert.

        Returns:
            The first member returned by a matcher, or None if no matcher
            matched or value is None.
        """
        return self.explain(value).result

    def __call__(self, value: Any) -> Optional[Enum]:
        return self.convert(value)

    def explain(self, value: Any) -> ConversionTrace:
        """Convert value and report which matcher produced the result.

        Args:
            value: The value to convert.

        Returns:
            ConversionTrace with the result, the stage that matched and the
            index of the matcher within that stage.
        """
        if value is None:
            return ConversionTrace(value=None, result=None, stage=MatchStage.NONE)

        # Snapshot the fallbacks so a concurrent rebind cannot split a conversion
        stages = (
            (MatchStage.PRIMARY, self._matchers),
            (MatchStage.FALLBACK, self._fallbacks),
        )
        for stage, matchers in stages:
            for index, matcher in enumerate(matchers):
                result = matcher(value)
                if result is not None:
                    return ConversionTrace(
                        value=value, result=result, stage=stage, matcher_index=index
                    )

        return ConversionTrace(value=value, result=None, stage=MatchStage.NONE)

    def __repr__(self) -> str:
        return (
            f"EnumConverter(matchers={list(self._matchers)!r}, "
            f"fallbacks={list(self._fallbacks)!r})"
        )


def to(target: Type[Enum]) -> EnumConverter:
    """Create a converter using the default matcher. See ``EnumConverter.to()``."""
    return EnumConverter.to(target)


def using(*matchers: Matcher) -> EnumConverter:
    """Create a converter with the given primary matchers, in order."""
    return EnumConverter(matchers)


def convert(value: Any, target: Type[Enum]) -> Optional[Enum]:
    """Convert value into a member of target using the default matcher.

    Example:
        >>> convert("common_value", B)
        <B.COMMON_VALUE: 1>
    """
    return EnumConverter.to(target).convert(value)


def convert_with(
    value: Any, matchers: Union[Matcher, Sequence[Matcher]]
) -> Optional[Enum]:
    """Convert value using one matcher or a sequence of matchers.

    Example:
        >>> convert_with("common_value", by_name(B)) is None
        True
    """
    if callable(matchers) and not (isinstance(matchers, type) and issubclass(matchers, Enum)):
        matchers = [matchers]
    return EnumConverter(matchers).convert(value)
