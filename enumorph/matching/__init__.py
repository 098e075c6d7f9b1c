"""Matcher package for enumorph.

This package contains the built-in matchers used to resolve an input value
into a member of a target enum.

Example:
    >>> from enumorph.matching import by_name, by_explicit_mapping
    >>> matcher = by_name(Color)
    >>> matcher("RED")
    <Color.RED: 1>
"""

from .name_matchers import (
    ExplicitMappingMatcher,
    Matcher,
    MemberMatcher,
    MemberNameMatcher,
    MemberPredicate,
    NameExtractor,
    SimilarNameMatcher,
    by_explicit_mapping,
    by_name,
    by_name_ignoring_case,
    by_similar_name,
    equals_ignore_case,
    first_matching_against_members,
    first_matching_member,
    member_name,
    require_enum_type,
)

__all__ = [
    "ExplicitMappingMatcher",
    "Matcher",
    "MemberMatcher",
    "MemberNameMatcher",
    "MemberPredicate",
    "NameExtractor",
    "SimilarNameMatcher",
    "by_explicit_mapping",
    "by_name",
    "by_name_ignoring_case",
    "by_similar_name",
    "equals_ignore_case",
    "first_matching_against_members",
    "first_matching_member",
    "member_name",
    "require_enum_type",
]
