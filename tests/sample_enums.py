"""Enum types shared by the test suite and importable by the CLI tests."""

from enum import Enum


class A(Enum):
    COMMON_VALUE = 1
    A_VALUE = 2


class B(Enum):
    COMMON_VALUE = 1
    B_VALUE = 2


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3
    CRIMSON = 1  # alias of RED, not iterated


class Tie(Enum):
    AB = "ab"
    AC = "ac"


class Status(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Spelling(Enum):
    STRASSE = 1
    TITLE = 2


class Palette:
    class Shade(Enum):
        LIGHT = 1
        DARK = 2


NOT_AN_ENUM = "just a string"
