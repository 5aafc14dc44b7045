"""Tests for GitHub Actions workflow commands."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from openai_costs import actions
from openai_costs.config import RunnerSettings
from openai_costs.log import REDACTED, redact_secrets


class TestSetOutput:
    def test_appends_heredoc_block_to_output_file(self, tmp_path: Path) -> None:
        out = tmp_path / "github_output"
        out.write_text("previous=1\n")
        actions.set_output("costs", '{"a":1}', runner=RunnerSettings(output=str(out)))
        content = out.read_text()
        assert content.startswith("previous=1\n")
        match = re.fullmatch(
            r'previous=1\ncosts<<(ghadelimiter_[0-9a-f-]+)\n\{"a":1\}\n\1\n',
            content,
        )
        assert match is not None

    def test_reads_output_path_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        out = tmp_path / "github_output"
        monkeypatch.setenv("GITHUB_OUTPUT", str(out))
        actions.set_output("costs", "x")
        assert out.read_text().startswith("costs<<ghadelimiter_")

    def test_falls_back_to_set_output_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        actions.set_output("costs", '{"a":1}', runner=RunnerSettings())
        assert capsys.readouterr().out == '::set-output name=costs::{"a":1}\n'


class TestCommands:
    def test_add_mask(self, capsys: pytest.CaptureFixture[str]) -> None:
        actions.add_mask("sk-secret")
        assert capsys.readouterr().out == "::add-mask::sk-secret\n"

    def test_add_mask_registers_secret_for_logs(self) -> None:
        actions.add_mask("sk-secret")
        event = redact_secrets(None, "info", {"event": "url has sk-secret in it"})
        assert event["event"] == f"url has {REDACTED} in it"

    def test_add_mask_ignores_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        actions.add_mask("")
        assert capsys.readouterr().out == ""

    def test_set_failed_escapes_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        actions.set_failed("Action failed: 100% broken\nsecond line")
        assert capsys.readouterr().out == "::error::Action failed: 100%25 broken%0Asecond line\n"

    def test_escape_property(self) -> None:
        assert actions.escape_property("a:b,c%") == "a%3Ab%2Cc%25"
