"""FieldPrompter — the console side of field validation.

Validation itself is a pure, single-attempt call
(:func:`payrollctl.domain.fields.validate`).  This module owns the
prompt/retry cycle around it: print the prompt, read one line, validate,
and either return the parsed value or print the rejection message and
prompt again.  There is no cancel path; end of input aborts the process.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import click

from payrollctl.domain.fields import (
    INT32_MAX,
    FieldKind,
    FieldResult,
    duplicate_id,
    validate,
)
from payrollctl.domain.types import IdGrammar

logger = logging.getLogger(__name__)

ID_PROMPT = "Enter ID: "
NAME_PROMPT = "Enter Name: "


def read_line(prompt: str) -> str:
    """Print *prompt* and read one raw line (empty input allowed)."""
    return click.prompt(prompt, default="", show_default=False, prompt_suffix="")


class FieldPrompter:
    """Re-prompts until each field's grammar is satisfied."""

    def __init__(
        self,
        *,
        id_grammar: IdGrammar = IdGrammar.ALPHANUMERIC,
        max_count: int = INT32_MAX,
        is_id_unique: Callable[[str], bool] | None = None,
    ) -> None:
        self._id_grammar = id_grammar
        self._max_count = max_count
        self._is_id_unique = is_id_unique

    def check(self, field: FieldKind, raw: str) -> FieldResult:
        """Validate one attempt; identifiers are also checked for duplicates."""
        result = validate(field, raw, id_grammar=self._id_grammar, max_count=self._max_count)
        if (
            result.ok
            and field is FieldKind.ID
            and self._is_id_unique is not None
            and not self._is_id_unique(result.value)
        ):
            return duplicate_id()
        return result

    def read(self, field: FieldKind, prompt: str) -> FieldResult:
        """Prompt once and validate, without retrying."""
        return self.check(field, read_line(prompt))

    def ask(self, field: FieldKind, prompt: str) -> Any:
        """Prompt until the input is accepted and return the parsed value."""
        while True:
            result = self.read(field, prompt)
            if result.ok:
                return result.value
            logger.debug("Rejected %s input: %s", field, result.error)
            click.echo(result.message)

    def ask_id(self) -> str:
        return self.ask(FieldKind.ID, ID_PROMPT)

    def ask_name(self) -> str:
        return self.ask(FieldKind.NAME, NAME_PROMPT)

    def ask_amount(self, prompt: str) -> float:
        return self.ask(FieldKind.AMOUNT, prompt)

    def ask_count(self, prompt: str) -> int:
        return self.ask(FieldKind.COUNT, prompt)
