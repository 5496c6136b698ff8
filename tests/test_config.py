"""Tests for run configuration."""

# Third-party imports
import pytest

# Local/package imports
from hushrun.config import CompletionBehavior, Configuration
from hushrun.exceptions import ConfigurationError


def test_default_config():
    config = Configuration()

    assert config.command == ""
    assert config.message == ""
    assert config.running_label == "RUNNING"
    assert config.success_label == "SUCCESS"
    assert config.failure_label == "FAILURE"
    assert config.show_elapsed_time is False
    assert config.on_completion is CompletionBehavior.TERMINATE_PROCESS
    assert config.shell


def test_setters_chain_on_the_same_object():
    config = Configuration()
    chained = (
        config.set_command("make test")
        .set_message("Testing")
        .set_running_message("BUSY")
        .set_success_message("OK")
        .set_failure_message("KO")
        .set_shell("/bin/sh")
        .show_time()
        .return_exit_code()
    )

    assert chained is config
    assert config.command == "make test"
    assert config.message == "Testing"
    assert config.running_label == "BUSY"
    assert config.success_label == "OK"
    assert config.failure_label == "KO"
    assert config.shell == "/bin/sh"
    assert config.show_elapsed_time is True
    assert config.on_completion is CompletionBehavior.RETURN_CODE


def test_raise_on_failure_behavior():
    config = Configuration().raise_on_failure()
    assert config.on_completion is CompletionBehavior.RAISE_ON_FAILURE


def test_message_defaults_to_command():
    config = Configuration().set_command("ls -la | wc -l")
    assert config.resolved_message() == "ls -la | wc -l"

    config.set_message("Counting")
    assert config.resolved_message() == "Counting"


def test_empty_labels_fall_back_to_defaults():
    config = Configuration().set_success_message("").set_running_message("")
    labels = config.resolved_labels()

    assert labels.success == "SUCCESS"
    assert labels.running == "RUNNING"
    assert labels.failure == "FAILURE"


def test_setters_do_not_validate():
    # An empty command is only rejected when validated
    config = Configuration().set_command("")
    with pytest.raises(ConfigurationError) as exc_info:
        config.validate()
    assert exc_info.value.error_code == "CONFIG_ERROR"
    assert exc_info.value.exit_code == 1


@pytest.mark.parametrize("command", ["", "   ", "\t\n"])
def test_blank_command_is_invalid(command):
    with pytest.raises(ConfigurationError):
        Configuration().set_command(command).validate()


def test_valid_command_passes():
    Configuration().set_command("true").validate()


class TestFromEnv:
    """Loading defaults from HUSHRUN_* variables."""

    def test_without_variables(self):
        config = Configuration.from_env({})
        assert config.running_label == "RUNNING"
        assert config.show_elapsed_time is False

    def test_labels_and_shell(self):
        config = Configuration.from_env(
            {
                "HUSHRUN_RUNNING_LABEL": "BUSY",
                "HUSHRUN_SUCCESS_LABEL": "DONE  # trailing comment",
                "HUSHRUN_FAILURE_LABEL": "OOPS",
                "HUSHRUN_SHELL": "/bin/sh",
            }
        )
        assert config.running_label == "BUSY"
        assert config.success_label == "DONE"
        assert config.failure_label == "OOPS"
        assert config.shell == "/bin/sh"

    @pytest.mark.parametrize(
        "value, expected",
        [("true", True), ("1", True), ("Yes", True), ("on", True), ("false", False), ("0", False)],
    )
    def test_show_elapsed_time(self, value, expected):
        config = Configuration.from_env({"HUSHRUN_SHOW_ELAPSED_TIME": value})
        assert config.show_elapsed_time is expected

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("HUSHRUN_FAILURE_LABEL", "BROKEN")
        assert Configuration.from_env().failure_label == "BROKEN"

    def test_command_is_not_read(self):
        config = Configuration.from_env({"HUSHRUN_COMMAND": "rm -rf /tmp/x"})
        assert config.command == ""
