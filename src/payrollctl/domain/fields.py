"""Field grammars and single-attempt validation.

Each call to :func:`validate` checks one raw input line against one field
grammar and returns a :class:`FieldResult`.  Nothing here loops or reads
input: the console adapter owns the prompt/retry cycle.

Grammars:
- id: letters and digits (or digits only under the numeric grammar)
- name: ASCII letters separated by single spaces
- amount: ``digit+ ('.' digit+)?``
- count: ``digit+``, bounded by ``max_count``
- menu: exactly one digit
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from payrollctl.domain.types import IdGrammar

INT32_MAX = 2_147_483_647


class FieldKind(StrEnum):
    """Input fields collected by the console."""

    ID = "id"
    NAME = "name"
    AMOUNT = "amount"
    COUNT = "count"
    MENU = "menu"


class InputError(StrEnum):
    """Why an input attempt was rejected."""

    MALFORMED = "malformed"
    DUPLICATE = "duplicate"
    OUT_OF_RANGE = "out_of_range"


ID_PATTERNS: dict[IdGrammar, re.Pattern[str]] = {
    IdGrammar.ALPHANUMERIC: re.compile(r"[A-Za-z0-9]+"),
    IdGrammar.NUMERIC: re.compile(r"[0-9]+"),
}

NAME_PATTERN = re.compile(r"[A-Za-z]+(?: [A-Za-z]+)*")
AMOUNT_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")
COUNT_PATTERN = re.compile(r"[0-9]+")
MENU_PATTERN = re.compile(r"[0-9]")

DUPLICATE_ID_MESSAGE = "Duplicate ID! Try again."

MESSAGES: dict[tuple[FieldKind, InputError], str] = {
    (FieldKind.NAME, InputError.MALFORMED): (
        "Invalid name! Use letters and single spaces between names."
    ),
    (FieldKind.AMOUNT, InputError.MALFORMED): (
        "Invalid input! Use numbers with optional single decimal point."
    ),
    (FieldKind.AMOUNT, InputError.OUT_OF_RANGE): "Input out of range for a double.",
    (FieldKind.COUNT, InputError.MALFORMED): "Invalid input! Please enter whole numbers only.",
    (FieldKind.COUNT, InputError.OUT_OF_RANGE): "Input out of range for an integer.",
    (FieldKind.MENU, InputError.MALFORMED): "Invalid menu choice!",
    (FieldKind.ID, InputError.DUPLICATE): DUPLICATE_ID_MESSAGE,
}

ID_MESSAGES: dict[IdGrammar, str] = {
    IdGrammar.ALPHANUMERIC: "Invalid ID! Use only letters and numbers.",
    IdGrammar.NUMERIC: "Invalid ID! Use whole numbers only.",
}


@dataclass(frozen=True)
class FieldResult:
    """Outcome of validating one raw input line."""

    ok: bool
    value: Any = None
    error: InputError | None = None
    message: str = ""


def _reject(field: FieldKind, error: InputError, *, id_grammar: IdGrammar) -> FieldResult:
    if field is FieldKind.ID and error is InputError.MALFORMED:
        message = ID_MESSAGES[id_grammar]
    else:
        message = MESSAGES[(field, error)]
    return FieldResult(ok=False, error=error, message=message)


def is_valid_id(raw: str, id_grammar: IdGrammar = IdGrammar.ALPHANUMERIC) -> bool:
    """Check *raw* against the identifier grammar (no trimming)."""
    return ID_PATTERNS[id_grammar].fullmatch(raw) is not None


def is_valid_name(raw: str) -> bool:
    """Check *raw* against the name grammar (no trimming)."""
    return NAME_PATTERN.fullmatch(raw) is not None


def duplicate_id() -> FieldResult:
    """Rejection for an identifier that is already registered."""
    return FieldResult(ok=False, error=InputError.DUPLICATE, message=DUPLICATE_ID_MESSAGE)


def validate(
    field: FieldKind,
    raw: str,
    *,
    id_grammar: IdGrammar = IdGrammar.ALPHANUMERIC,
    max_count: int = INT32_MAX,
) -> FieldResult:
    """Validate a single input attempt for *field*.

    Leading and trailing whitespace is trimmed before checking.  Returns
    the parsed value on success: ``str`` for id/name, ``float`` for
    amounts, ``int`` for counts and menu selections.
    """
    text = raw.strip()

    def reject(error: InputError) -> FieldResult:
        return _reject(field, error, id_grammar=id_grammar)

    if field is FieldKind.ID:
        if not is_valid_id(text, id_grammar):
            return reject(InputError.MALFORMED)
        if id_grammar is IdGrammar.NUMERIC:
            # "007" and "7" name the same employee
            text = text.lstrip("0") or "0"
        return FieldResult(ok=True, value=text)

    if field is FieldKind.NAME:
        if not is_valid_name(text):
            return reject(InputError.MALFORMED)
        return FieldResult(ok=True, value=text)

    if field is FieldKind.AMOUNT:
        if not AMOUNT_PATTERN.fullmatch(text):
            return reject(InputError.MALFORMED)
        amount = float(text)
        if math.isinf(amount):
            return reject(InputError.OUT_OF_RANGE)
        return FieldResult(ok=True, value=amount)

    if field is FieldKind.COUNT:
        if not COUNT_PATTERN.fullmatch(text):
            return reject(InputError.MALFORMED)
        digits = text.lstrip("0") or "0"
        if len(digits) > len(str(max_count)) or int(digits) > max_count:
            return reject(InputError.OUT_OF_RANGE)
        return FieldResult(ok=True, value=int(digits))

    if field is FieldKind.MENU:
        if not MENU_PATTERN.fullmatch(text):
            return reject(InputError.MALFORMED)
        return FieldResult(ok=True, value=int(text))

    msg = f"Unknown field: {field!r}"
    raise ValueError(msg)
