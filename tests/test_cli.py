"""Tests for the command line interface."""

# Third-party imports
import pytest
from click.testing import CliRunner

# Local/package imports
from hushrun import __version__
from hushrun.cli import build_configuration, cli
from hushrun.config import CompletionBehavior


@pytest.fixture
def runner():
    return CliRunner()


def test_success(runner):
    result = runner.invoke(cli, ["true"])

    assert result.exit_code == 0
    assert result.stdout == "  [SUCCESS] true\n"


def test_status_line_leaves_nothing_behind_when_not_a_terminal(runner):
    result = runner.invoke(cli, ["--show-time", "true"])

    assert result.exit_code == 0
    assert result.output == "  [SUCCESS] true\n"


def test_success_with_message(runner):
    result = runner.invoke(cli, ["-m", "Doing nothing", "true"])

    assert result.exit_code == 0
    assert result.stdout == "  [SUCCESS] Doing nothing\n"


def test_show_time_does_not_change_report(runner):
    result = runner.invoke(cli, ["--show-time", "true"])

    assert result.exit_code == 0
    assert result.stdout == "  [SUCCESS] true\n"


def test_failure_mirrors_exit_code(runner):
    result = runner.invoke(cli, ["echo hello; exit 2"])

    assert result.exit_code == 2
    assert "  [FAILURE] echo hello; exit 2\n" in result.output
    assert "  [ERROR CODE] 2\n  [STDOUT]\nhello\n" in result.output
    assert "  [STDERR] Empty\n" in result.output


def test_false_with_custom_labels(runner):
    result = runner.invoke(
        cli,
        ["--success-message", "OK", "--failure-message", "KO", "false"],
    )

    assert result.exit_code == 1
    assert result.stdout.startswith("  [KO] false\n  [ERROR CODE] 1\n")


def test_arguments_are_joined_and_not_parsed_as_options(runner):
    result = runner.invoke(cli, ["echo", "--success-message", "x", "&&", "exit", "4"])

    assert result.exit_code == 4
    assert "  [FAILURE] echo --success-message x && exit 4\n" in result.output
    assert "--success-message x\n" in result.output


def test_missing_command(runner):
    result = runner.invoke(cli, [])

    assert result.exit_code == 1
    assert "No command to run" in result.output
    assert "[SUCCESS]" not in result.output
    assert "[FAILURE]" not in result.output


def test_unknown_shell(runner):
    result = runner.invoke(cli, ["--shell", "/nonexistent/shell", "true"])

    assert result.exit_code == 71
    assert "SPAWN_ERROR" in result.output
    assert "[SUCCESS]" not in result.output


def test_environment_defaults(runner):
    result = runner.invoke(cli, ["true"], env={"HUSHRUN_SUCCESS_LABEL": "DONE"})

    assert result.exit_code == 0
    assert result.stdout == "  [DONE] true\n"


def test_flags_override_environment(runner):
    result = runner.invoke(
        cli,
        ["--success-message", "YES", "true"],
        env={"HUSHRUN_SUCCESS_LABEL": "DONE"},
    )

    assert result.stdout == "  [YES] true\n"


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_log_dir_creates_log_file(runner, tmp_path):
    log_dir = tmp_path / "logs"
    result = runner.invoke(cli, ["--debug", "--log-dir", str(log_dir), "true"])

    assert result.exit_code == 0
    assert list(log_dir.glob("hushrun-*.log"))


def test_build_configuration():
    config = build_configuration(
        ("git", "status"),
        message="Status",
        show_time=True,
        running_message="BUSY",
        shell="/bin/sh",
    )

    assert config.command == "git status"
    assert config.message == "Status"
    assert config.show_elapsed_time is True
    assert config.running_label == "BUSY"
    assert config.success_label == "SUCCESS"
    assert config.shell == "/bin/sh"
    assert config.on_completion is CompletionBehavior.TERMINATE_PROCESS
