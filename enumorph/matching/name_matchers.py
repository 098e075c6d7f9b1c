"""Matcher implementations for enumorph.

A matcher is any callable taking an input value and returning a member of
the target enum, or None when it does not match. This module provides the
built-in matchers and the factories used to create them.

A member matcher tests the input against each member with any predicate
of (value, member), scanning members in definition order.

Name-based matchers compare a derived name of the input against each
member's symbolic name, scanning members in definition order:
    1. by_name - exact equality
    2. by_name_ignoring_case - case-insensitive equality (the default)
    3. by_similar_name - best RapidFuzz similarity above a threshold

Example:
    >>> from enumorph.matching import by_name_ignoring_case
    >>> matcher = by_name_ignoring_case(Color)
    >>> matcher("red")
    <Color.RED: 1>
    >>> matcher("purple") is None
    True
"""

from enum import Enum
from typing import Any, Callable, Dict, Hashable, Mapping, Optional, Type

from rapidfuzz import fuzz

from enumorph.models import InvalidConfigurationError

Matcher = Callable[[Any], Optional[Enum]]
NameExtractor = Callable[[Any], Optional[str]]
NamePredicate = Callable[[str, str], bool]
MemberPredicate = Callable[[Any, Enum], bool]


def member_name(value: Any) -> Optional[str]:
    """Derive the comparison name of an input value.

    Args:
        value: Any input value.

    Returns:
        The member name if value is an Enum member, the value's string
        form otherwise, or None if value is None.

    Example:
        >>> member_name(Color.RED)
        'RED'
        >>> member_name(42)
        '42'
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.name
    return str(value)


def equals_ignore_case(left: str, right: str) -> bool:
    """Compare two names character by character, ignoring case.

    Characters are equal if they are identical or equal after upper-casing
    or lower-casing, so the string length never changes: "straße" does
    not equal "STRASSE", while the dotless "ı" equals "I".
    """
    if len(left) != len(right):
        return False
    return all(
        a == b or a.upper() == b.upper() or a.lower() == b.lower()
        for a, b in zip(left, right)
    )


def require_enum_type(target: Any) -> Type[Enum]:
    """Ensure target is an Enum subclass.

    Raises:
        InvalidConfigurationError: If target is None or not an Enum subclass.
    """
    if target is None:
        raise InvalidConfigurationError("A target enum type must be defined")
    if not (isinstance(target, type) and issubclass(target, Enum)):
        raise InvalidConfigurationError(
            f"The target must be an Enum subclass, got {target!r}"
        )
    return target


class MemberMatcher:
    """Returns the first member accepted by a predicate on the input and member.

    None input returns None without consulting the predicate. Members are
    scanned in definition order, so the earliest declared member wins.

    Attributes:
        target: The enum type to resolve into.
        predicate: Called as ``predicate(value, member)``.
        label: Short description used in reports.
    """

    def __init__(
        self,
        target: Type[Enum],
        predicate: MemberPredicate,
        label: str = "first_matching_member",
    ) -> None:
        self.target = require_enum_type(target)
        if predicate is None:
            raise InvalidConfigurationError("The predicate must be defined")
        self.predicate = predicate
        self.label = label

    def __call__(self, value: Any) -> Optional[Enum]:
        if value is None:
            return None
        for member in self.target:
            if self.predicate(value, member):
                return member
        return None

    def __repr__(self) -> str:
        return f"{self.label}({self.target.__name__})"


class MemberNameMatcher(MemberMatcher):
    """Returns the first member whose name satisfies a name predicate.

    The input's comparison name is computed once with ``name_of``; if it is
    None the matcher returns None without consulting the predicate.

    Attributes:
        name_predicate: Called as ``name_predicate(source_name, member_name)``.
        name_of: Name extraction function applied to the input.
    """

    def __init__(
        self,
        target: Type[Enum],
        predicate: NamePredicate,
        name_of: NameExtractor = member_name,
        label: str = "custom",
    ) -> None:
        if predicate is None:
            raise InvalidConfigurationError("The name predicate must be defined")
        if name_of is None:
            raise InvalidConfigurationError("The name extractor must be defined")
        super().__init__(
            target,
            lambda source_name, member: predicate(source_name, member.name),
            label=label,
        )
        self.name_predicate = predicate
        self.name_of = name_of

    def __call__(self, value: Any) -> Optional[Enum]:
        if value is None:
            return None
        return super().__call__(self.name_of(value))


class ExplicitMappingMatcher:
    """Looks the input up directly in a fixed input-to-member table."""

    def __init__(self, mapping: Mapping[Hashable, Enum]) -> None:
        if mapping is None:
            raise InvalidConfigurationError("The explicit mapping must be defined")
        # Later changes to the caller's dict must not leak into the matcher
        self.mapping: Dict[Hashable, Enum] = dict(mapping)

    def __call__(self, value: Any) -> Optional[Enum]:
        if value is None:
            return None
        try:
            return self.mapping.get(value)
        except TypeError:
            # Unhashable input cannot be a key
            return None

    def __repr__(self) -> str:
        return f"by_explicit_mapping({len(self.mapping)} entries)"


class SimilarNameMatcher:
    """Returns the member whose name is most similar to the input's name.

    Similarity is RapidFuzz ``fuzz.ratio`` on casefolded names, scaled to
    0.0-1.0. The best score must reach ``min_similarity``; equal scores
    resolve to the earliest declared member.

    Attributes:
        target: The enum type to resolve into.
        min_similarity: Minimum similarity threshold (0.0-1.0).
        name_of: Name extraction function applied to the input.
    """

    def __init__(
        self,
        target: Type[Enum],
        min_similarity: float = 0.85,
        name_of: NameExtractor = member_name,
    ) -> None:
        self.target = require_enum_type(target)
        if not 0.0 <= min_similarity <= 1.0:
            raise InvalidConfigurationError(
                f"min_similarity must be between 0.0 and 1.0, got {min_similarity}"
            )
        if name_of is None:
            raise InvalidConfigurationError("The name extractor must be defined")
        self.min_similarity = min_similarity
        self.name_of = name_of

    def __call__(self, value: Any) -> Optional[Enum]:
        if value is None:
            return None
        source_name = self.name_of(value)
        if not source_name:
            return None

        folded = source_name.casefold()
        best_member: Optional[Enum] = None
        best_score = -1.0
        for member in self.target:
            # RapidFuzz returns 0-100
            score = fuzz.ratio(folded, member.name.casefold()) / 100.0
            if score > best_score:
                best_member, best_score = member, score

        if best_member is None or best_score < self.min_similarity:
            return None
        return best_member

    def __repr__(self) -> str:
        return (
            f"by_similar_name({self.target.__name__}, "
            f">={self.min_similarity:.0%})"
        )


def first_matching_member(target: Type[Enum], predicate: MemberPredicate) -> Matcher:
    """Create a matcher returning the first member accepted by a predicate.

    The predicate receives the raw input and each member, so it can look at
    any member attribute.

    Args:
        target: The enum type to resolve into.
        predicate: Called as ``predicate(value, member)``.

    Returns:
        A matcher callable. None input never reaches the predicate.

    Raises:
        InvalidConfigurationError: If target is not an Enum subclass or
            predicate is missing.

    Example:
        >>> by_value_prefix = first_matching_member(
        ...     Status, lambda value, member: member.value.startswith(value)
        ... )
        >>> by_value_prefix("act")
        <Status.ACTIVE: 'active'>
    """
    return MemberMatcher(target, predicate)


def first_matching_against_members(
    target: Type[Enum],
    predicate: NamePredicate,
    name_of: NameExtractor = member_name,
) -> Matcher:
    """Create a matcher returning the first member accepted by a name predicate.

    Args:
        target: The enum type to resolve into.
        predicate: Called as ``predicate(source_name, member_name)``.
        name_of: Name extraction applied to the input. Defaults to
            member_name().

    Returns:
        A matcher callable.

    Raises:
        InvalidConfigurationError: If any argument is missing or target is
            not an Enum subclass.

    Example:
        >>> starts_with = first_matching_against_members(
        ...     Color, lambda source, name: name.startswith(source.upper())
        ... )
        >>> starts_with("gr")
        <Color.GREEN: 2>
    """
    return MemberNameMatcher(target, predicate, name_of)


def by_name(target: Type[Enum], name_of: NameExtractor = member_name) -> Matcher:
    """Create a matcher comparing the input name to member names exactly."""
    return MemberNameMatcher(
        target,
        lambda source_name, name: name == source_name,
        name_of,
        label="by_name",
    )


def by_name_ignoring_case(
    target: Type[Enum], name_of: NameExtractor = member_name
) -> Matcher:
    """Create a matcher comparing the input name to member names case-insensitively.

    This is the default matcher used by ``EnumConverter.to()``.
    """
    return MemberNameMatcher(
        target,
        lambda source_name, name: equals_ignore_case(name, source_name),
        name_of,
        label="by_name_ignoring_case",
    )


def by_explicit_mapping(mapping: Mapping[Hashable, Enum]) -> Matcher:
    """Create a matcher that looks the input up in a fixed table.

    Example:
        >>> matcher = by_explicit_mapping({A.A_VALUE: B.B_VALUE})
        >>> matcher(A.A_VALUE)
        <B.B_VALUE: 2>
    """
    return ExplicitMappingMatcher(mapping)


def by_similar_name(
    target: Type[Enum],
    min_similarity: float = 0.85,
    name_of: NameExtractor = member_name,
) -> Matcher:
    """Create a matcher tolerating small spelling differences in names.

    Example:
        >>> by_similar_name(Color)("GREN")
        <Color.GREEN: 2>
    """
    return SimilarNameMatcher(target, min_similarity, name_of)
