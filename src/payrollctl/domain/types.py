"""Employment kinds, menu choices, and identifier grammars."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class EmploymentKind(StrEnum):
    """Compensation categories. The set is closed."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACTUAL = "contractual"


class MenuChoice(IntEnum):
    """Options offered by the session menu."""

    ADD_FULL_TIME = 1
    ADD_PART_TIME = 2
    ADD_CONTRACTUAL = 3
    REPORT = 4
    EXIT = 5


class IdGrammar(StrEnum):
    """Accepted spellings for employee identifiers."""

    ALPHANUMERIC = "alphanumeric"
    NUMERIC = "numeric"
