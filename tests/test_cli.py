"""
Tests for the Drush CLI, the runner and the console script entry point
"""
import json

import pytest
from click.testing import CliRunner

from drush.cli.main import cli, main
from drush.core.errors import VersionMetadataError
from drush.core.facade import facade
from drush.core.runner import Runner, RunnerState


@pytest.fixture(autouse=True)
def clean_facade(monkeypatch):
    """Version from the shipped drush.info (no git lookups) and no leftover container"""
    monkeypatch.setattr("drush.core.version.git_describe", lambda path: None)
    facade.reset_version_cache()
    facade.unset_container()
    yield
    facade.unset_container()
    facade.reset_version_cache()


def _json_line(output: str) -> dict:
    line = next(line for line in output.splitlines() if line.startswith("{"))
    return json.loads(line)


class TestCommands:
    """Commands invoked through click's test runner"""

    def test_version(self):
        result = CliRunner().invoke(cli, ["version"])
        assert result.exit_code == 0, result.output
        assert "Drush version : 9.7.2" in result.output

    def test_version_json(self):
        result = CliRunner().invoke(cli, ["version", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert _json_line(result.output) == {"drush-version": "9.7.2", "major": "9", "minor": "7"}

    def test_container_is_unset_after_command(self):
        result = CliRunner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert facade.has_container() is False

    def test_status_flags(self):
        result = CliRunner().invoke(cli, ["--simulate", "-vv", "status"])
        assert result.exit_code == 0, result.output
        assert "Bootstrap     : empty" in result.output
        assert "Simulated     : yes" in result.output
        assert "Verbose       : yes" in result.output
        assert "Debug         : no" in result.output

    def test_status_defaults(self):
        result = CliRunner().invoke(cli, ["status"])
        assert result.exit_code == 0, result.output
        assert "Simulated     : no" in result.output
        assert "Verbose       : no" in result.output
        assert "Drush root    : -" in result.output

    def test_status_with_root(self, tmp_path):
        result = CliRunner().invoke(cli, ["--root", str(tmp_path), "status"])
        assert result.exit_code == 0, result.output
        assert str(tmp_path) in result.output

    def test_quiet_status_prints_nothing(self):
        result = CliRunner().invoke(cli, ["-q", "status"])
        assert result.exit_code == 0
        assert "Bootstrap" not in result.output

    def test_config(self):
        result = CliRunner().invoke(cli, ["--simulate", "config"])
        assert result.exit_code == 0, result.output
        assert "options.simulate = True" in result.output
        assert "runtime.debug" in result.output

    def test_unknown_command(self):
        result = CliRunner().invoke(cli, ["no-such-command"])
        assert result.exit_code == 2


class TestRunner:
    """Runner dispatches argv to the click application"""

    def test_run_returns_zero(self, capsys):
        runner = Runner()
        assert runner.state == RunnerState.IDLE
        assert runner.run(["version"]) == 0
        assert runner.state == RunnerState.FINISHED
        assert runner.runs == 1
        assert "9.7.2" in capsys.readouterr().out

    def test_run_usage_error(self, capsys):
        assert Runner().run(["no-such-command"]) == 2
        assert "No such command" in capsys.readouterr().err

    def test_help_exits_cleanly(self, capsys):
        assert Runner().run(["--help"]) == 0
        assert "version" in capsys.readouterr().out

    def test_facade_runner_is_reused(self):
        assert facade.runner() is facade.runner()


class TestMain:
    """Console script entry point"""

    def test_main_exits_with_runner_code(self, monkeypatch):
        class StubRunner:
            def run(self):
                return 3

        monkeypatch.setattr(facade, "runner", lambda: StubRunner())
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 3

    def test_main_reports_drush_errors(self, monkeypatch, capsys):
        class FailingRunner:
            def run(self):
                raise VersionMetadataError("drush.info is missing")

        monkeypatch.setattr(facade, "runner", lambda: FailingRunner())
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "drush.info is missing" in capsys.readouterr().err
