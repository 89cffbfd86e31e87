"""Tests for the ``check`` command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from casework.cli import cli

WriteStudy = Callable[..., Path]


@pytest.mark.usefixtures("_isolated_site")
class TestCheck:
    def test_clean(self, cli_runner: CliRunner, write_study: WriteStudy) -> None:
        write_study("alpha")
        write_study("beta")
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "2 case studies, no issues found." in result.output

    def test_reports_every_invalid_file(
        self, cli_runner: CliRunner, write_study: WriteStudy
    ) -> None:
        write_study("good")
        write_study("no-outcomes", outcomes=[])
        write_study("no-title", title=None)
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 1
        assert "no-outcomes.mdx" in result.output
        assert "no-title.mdx" in result.output
        assert "2 errors, 0 warnings" in result.output

    def test_json_failure(
        self, cli_runner: CliRunner, write_study: WriteStudy, content_dir: Path
    ) -> None:
        write_study("good")
        (content_dir / "plain.mdx").write_text("No front-matter here.")
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "CHECK_FAILED"
        assert data["error"]["detail"]["checked"] == 2
        assert data["error"]["detail"]["valid"] == 1

    def test_slug_mismatch_is_a_warning(
        self, cli_runner: CliRunner, write_study: WriteStudy
    ) -> None:
        write_study("file-name", slug="declared")
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert len(data["warnings"]) == 1

    def test_duplicate_slugs(self, cli_runner: CliRunner, write_study: WriteStudy) -> None:
        write_study("one", slug="shared")
        write_study("two", slug="shared")
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 1
        assert "Slug 'shared' is also declared by" in result.output

    def test_duplicates_allowed_by_config(
        self,
        cli_runner: CliRunner,
        write_study: WriteStudy,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("CASEWORK_CONTENT__UNIQUE_SLUGS", "false")
        write_study("one", slug="shared")
        write_study("two", slug="shared")
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["checked"] == 2

    def test_undecodable_file_reported(
        self, cli_runner: CliRunner, write_study: WriteStudy, content_dir: Path
    ) -> None:
        write_study("good")
        (content_dir / "binary.mdx").write_bytes(b"---\ntitle: \xff\xfe\n---\nBody")
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "binary.mdx" in result.output
        assert "not valid UTF-8" in result.output
