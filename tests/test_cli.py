"""
Integration tests for the Typer app.
"""

import pytest
from typer.testing import CliRunner

import cli.main
from cli.main import app
from core.services.walkthroughs import run_single_responsibility

pytestmark = pytest.mark.cli

runner = CliRunner()

try:
    split_runner = CliRunner(mix_stderr=False)
except TypeError:  # click >= 8.2 always keeps stderr apart
    split_runner = CliRunner()


class TestLiskovCommand:

    def test_output(self):
        result = runner.invoke(app, ["--no-banner", "liskov"])
        assert result.exit_code == 0, result.output
        assert "10x20" in result.output
        assert "10x5" in result.output
        assert "area 100" in result.output
        assert "Expected area: 400" in result.output
        assert "Actual area: 1600" in result.output
        assert "Substitution broken for" in result.output


class TestSingleResponsibilityCommand:

    def test_saves_to_default_path(self, isolated_env):
        result = runner.invoke(app, ["--no-banner", "single-responsibility"])
        assert result.exit_code == 0, result.output
        assert "1: Today was a great day!" in result.output
        saved = (isolated_env / "journal.txt").read_text(encoding="utf-8")
        assert saved == "1: Today was a great day!\n2: I made a new friend today"

    def test_output_option(self, isolated_env):
        result = runner.invoke(app, ["--no-banner", "single-responsibility", "-o", "notes/j.txt"])
        assert result.exit_code == 0, result.output
        assert (isolated_env / "notes" / "j.txt").exists()

    def test_path_from_env(self, isolated_env, monkeypatch):
        monkeypatch.setenv("SOLID_D2_JOURNAL_PATH", "env.txt")
        result = runner.invoke(app, ["--no-banner", "single-responsibility"])
        assert result.exit_code == 0, result.output
        assert (isolated_env / "env.txt").exists()

    def test_write_failure_exits_1(self, isolated_env):
        (isolated_env / "taken").mkdir()
        result = runner.invoke(app, ["--no-banner", "single-responsibility", "-o", "taken"])
        assert result.exit_code == 1
        assert "Could not save journal" in result.output

    def test_entries_printed_verbatim(self, monkeypatch):
        def with_markup(path):
            return run_single_responsibility(path, entries=("[bold]not a tag[/bold]", "[red]"))

        monkeypatch.setattr(cli.main, "run_single_responsibility", with_markup)
        result = runner.invoke(app, ["--no-banner", "single-responsibility"])
        assert result.exit_code == 0, result.output
        assert "1: [bold]not a tag[/bold]" in result.output
        assert "2: [red]" in result.output


class TestOpenClosedCommand:

    def test_output(self):
        result = runner.invoke(app, ["--no-banner", "open-closed"])
        assert result.exit_code == 0, result.output
        assert "Red products" in result.output
        assert "Green products based on the new filter" in result.output
        assert "Surfboard" in result.output


class TestAppOptions:

    def test_banner_shown_by_default(self):
        result = runner.invoke(app, ["liskov"])
        assert result.exit_code == 0, result.output
        assert "SOLID-D2" in result.output

    def test_all(self, isolated_env):
        result = runner.invoke(app, ["--no-banner", "all"])
        assert result.exit_code == 0, result.output
        assert "Actual area: 1600" in result.output
        assert (isolated_env / "journal.txt").exists()
        assert "Surfboard" in result.output

    def test_bad_log_level(self):
        result = runner.invoke(app, ["--log-level", "loud", "liskov"])
        assert result.exit_code == 2

    def test_bad_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("SOLID_D2_LOG_LEVEL", "loud")
        result = runner.invoke(app, ["--no-banner", "liskov"])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_bad_setting_not_blamed_on_log_level(self, monkeypatch):
        monkeypatch.setenv("SOLID_D2_HTTP_TIMEOUT_SECONDS", "0")
        result = runner.invoke(app, ["--no-banner", "liskov"])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output
        assert "http_timeout_seconds" in result.output
        assert "--log-level" not in result.output

    def test_valid_log_level_logs_to_stderr_only(self):
        result = split_runner.invoke(app, ["--no-banner", "--log-level", "DEBUG", "open-closed"])
        assert result.exit_code == 0, result.output
        assert "Surfboard" in result.stdout
        assert "filter step" not in result.stdout
        assert "filter step" in result.stderr
