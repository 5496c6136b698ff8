"""
Run configuration for hushrun.
"""

import os
import shutil
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, Mapping, Optional

from .exceptions import ConfigurationError

ENV_PREFIX = "HUSHRUN_"

DEFAULT_RUNNING_LABEL = "RUNNING"
DEFAULT_SUCCESS_LABEL = "SUCCESS"
DEFAULT_FAILURE_LABEL = "FAILURE"

# Fields that may be set through HUSHRUN_* environment variables
ENV_FIELDS = (
    "running_label",
    "success_label",
    "failure_label",
    "show_elapsed_time",
    "shell",
)


def default_shell() -> str:
    """Return bash when it is on PATH, the POSIX shell otherwise."""
    return shutil.which("bash") or "/bin/sh"


class CompletionBehavior(Enum):
    """What the runner does once the command has finished."""

    TERMINATE_PROCESS = "terminate_process"
    RETURN_CODE = "return_code"
    RAISE_ON_FAILURE = "raise_on_failure"


@dataclass
class Labels:
    """Status words shown in the live line and the report."""

    running: str
    success: str
    failure: str


@dataclass
class Configuration:
    """Configuration for a single command run.

    Every setter returns the configuration itself so calls can be chained::

        Configuration().set_command("make test").set_message("Testing").show_time()

    Attributes:
        command: Shell command line to execute
        message: Text shown next to the spinner, defaults to the command
        running_label: Status word while running
        success_label: Status word for a zero exit code
        failure_label: Status word for any other outcome
        show_elapsed_time: Show a live timer instead of the running label
        on_completion: Whether to exit, return the code or raise on failure
        shell: Shell executable that interprets the command
    """

    command: str = ""
    message: str = ""
    running_label: str = DEFAULT_RUNNING_LABEL
    success_label: str = DEFAULT_SUCCESS_LABEL
    failure_label: str = DEFAULT_FAILURE_LABEL
    show_elapsed_time: bool = False
    on_completion: CompletionBehavior = CompletionBehavior.TERMINATE_PROCESS
    shell: str = field(default_factory=default_shell)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        """Build a configuration with defaults overridden by HUSHRUN_* variables.

        Args:
            environ: Mapping to read from, ``os.environ`` when omitted

        Returns:
            Configuration: The new configuration

        Raises:
            ConfigurationError: If a variable cannot be converted
        """
        environ = os.environ if environ is None else environ
        config = cls()
        field_types: Dict[str, type] = {f.name: f.type for f in fields(cls)}

        for field_name in ENV_FIELDS:
            env_key = f"{ENV_PREFIX}{field_name.upper()}"
            env_value = environ.get(env_key)
            if env_value is None:
                continue

            # Strip any comments and whitespace
            env_value = env_value.split("#")[0].strip()

            field_type = field_types[field_name]
            if field_type in (bool, "bool"):
                value = env_value.lower() in ("true", "1", "yes", "on")
            elif field_type in (str, "str"):
                value = env_value
            else:
                raise ConfigurationError(
                    f"Cannot read {env_key} from the environment", field=field_name
                )
            setattr(config, field_name, value)

        return config

    def set_command(self, command: str) -> "Configuration":
        """Define the command that will be run."""
        self.command = command
        return self

    def set_message(self, message: str) -> "Configuration":
        """Define the message displayed while the command runs."""
        self.message = message
        return self

    def set_running_message(self, running_message: str) -> "Configuration":
        """Status word for a running command. Ignored when show_time() is set."""
        self.running_label = running_message
        return self

    def set_success_message(self, success_message: str) -> "Configuration":
        self.success_label = success_message
        return self

    def set_failure_message(self, failure_message: str) -> "Configuration":
        self.failure_label = failure_message
        return self

    def set_shell(self, shell: str) -> "Configuration":
        self.shell = shell
        return self

    def show_time(self, enabled: bool = True) -> "Configuration":
        """Show the time since the command started instead of the running label."""
        self.show_elapsed_time = enabled
        return self

    def set_on_completion(self, behavior: CompletionBehavior) -> "Configuration":
        self.on_completion = behavior
        return self

    def return_exit_code(self) -> "Configuration":
        """Return the command's exit code rather than exiting the program."""
        return self.set_on_completion(CompletionBehavior.RETURN_CODE)

    def raise_on_failure(self) -> "Configuration":
        """Raise CommandFailure when the command does not exit with 0."""
        return self.set_on_completion(CompletionBehavior.RAISE_ON_FAILURE)

    def resolved_message(self) -> str:
        """Message to display, falling back to the command itself."""
        return self.message or self.command

    def resolved_labels(self) -> Labels:
        return Labels(
            running=self.running_label or DEFAULT_RUNNING_LABEL,
            success=self.success_label or DEFAULT_SUCCESS_LABEL,
            failure=self.failure_label or DEFAULT_FAILURE_LABEL,
        )

    def validate(self) -> None:
        """Check the configuration can be run.

        Raises:
            ConfigurationError: If no command was given
        """
        if not self.command or not self.command.strip():
            raise ConfigurationError("No command to run", field="command")
        if not self.shell:
            raise ConfigurationError("No shell to run the command with", field="shell")
