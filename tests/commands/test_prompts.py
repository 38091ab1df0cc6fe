"""Tests for FieldPrompter — the prompt/retry cycle."""

from __future__ import annotations

import pytest

from payrollctl.commands import _prompts
from payrollctl.commands._prompts import FieldPrompter
from payrollctl.domain.fields import FieldKind, InputError
from payrollctl.domain.types import IdGrammar


class ScriptedConsole:
    """Stands in for ``read_line``: returns queued lines, records prompts."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.lines.pop(0)


@pytest.fixture
def console(monkeypatch: pytest.MonkeyPatch) -> ScriptedConsole:
    scripted = ScriptedConsole()
    monkeypatch.setattr(_prompts, "read_line", scripted)
    return scripted


class TestCheck:
    def test_duplicate_id(self) -> None:
        prompter = FieldPrompter(is_id_unique=lambda employee_id: employee_id != "A1")
        result = prompter.check(FieldKind.ID, "A1")
        assert result.error is InputError.DUPLICATE
        assert result.message == "Duplicate ID! Try again."
        assert prompter.check(FieldKind.ID, "B2").ok

    def test_malformed_id_skips_duplicate_lookup(self) -> None:
        calls: list[str] = []

        def _unique(employee_id: str) -> bool:
            calls.append(employee_id)
            return True

        prompter = FieldPrompter(is_id_unique=_unique)
        assert prompter.check(FieldKind.ID, "A 1").error is InputError.MALFORMED
        assert calls == []

    def test_duplicate_lookup_uses_canonical_numeric_id(self) -> None:
        seen: list[str] = []

        def _unique(employee_id: str) -> bool:
            seen.append(employee_id)
            return True

        prompter = FieldPrompter(id_grammar=IdGrammar.NUMERIC, is_id_unique=_unique)
        assert prompter.check(FieldKind.ID, "0042").value == "42"
        assert seen == ["42"]

    def test_without_lookup_any_valid_id_passes(self) -> None:
        assert FieldPrompter().check(FieldKind.ID, "A1").ok

    def test_duplicate_check_only_applies_to_ids(self) -> None:
        prompter = FieldPrompter(is_id_unique=lambda employee_id: False)
        assert prompter.check(FieldKind.NAME, "Ann").ok


class TestAsk:
    def test_returns_first_valid_value(self, console: ScriptedConsole) -> None:
        console.lines.append("Ann")
        assert FieldPrompter().ask_name() == "Ann"
        assert console.prompts == ["Enter Name: "]

    def test_retries_with_message(
        self, console: ScriptedConsole, capsys: pytest.CaptureFixture[str]
    ) -> None:
        console.lines.extend(["", "12.5.6", "12.5"])
        assert FieldPrompter().ask_amount("Hourly Rate: $") == 12.5
        out = capsys.readouterr().out
        assert out.count("Invalid input! Use numbers with optional single decimal point.") == 2
        assert console.prompts == ["Hourly Rate: $"] * 3

    def test_ask_id_reprompts_on_duplicate(
        self, console: ScriptedConsole, capsys: pytest.CaptureFixture[str]
    ) -> None:
        console.lines.extend(["A1", "A2"])
        prompter = FieldPrompter(is_id_unique=lambda employee_id: employee_id != "A1")
        assert prompter.ask_id() == "A2"
        assert "Duplicate ID! Try again." in capsys.readouterr().out
        assert console.prompts == ["Enter ID: "] * 2

    def test_ask_count_respects_max(
        self, console: ScriptedConsole, capsys: pytest.CaptureFixture[str]
    ) -> None:
        console.lines.extend(["169", "168"])
        assert FieldPrompter(max_count=168).ask_count("Hours Worked: ") == 168
        assert "Input out of range for an integer." in capsys.readouterr().out

    def test_read_does_not_retry(self, console: ScriptedConsole) -> None:
        console.lines.extend(["12", "4"])
        result = FieldPrompter().read(FieldKind.MENU, "Selection: ")
        assert not result.ok
        assert console.lines == ["4"]
