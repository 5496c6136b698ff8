"""
Custom exceptions for hushrun.
"""

from typing import Optional, Any, Dict

# sysexits.h EX_OSERR, the shell could not be started
SPAWN_ERROR_EXIT_CODE = 71
CONFIGURATION_ERROR_EXIT_CODE = 1


class HushrunError(Exception):
    """Base exception for all hushrun errors."""

    exit_code = 1

    def __init__(
        self,
        message: str,
        *args: Any,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code or "HUSHRUN_ERROR"
        self.context = context or {}
        super().__init__(message, *args)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(HushrunError):
    """Raised when the configuration cannot be run, e.g. no command was given."""

    exit_code = CONFIGURATION_ERROR_EXIT_CODE

    def __init__(self, message: str, *args: Any, field: Optional[str] = None):
        super().__init__(
            message,
            *args,
            error_code="CONFIG_ERROR",
            context={"field": field} if field else None,
        )


class SpawnError(HushrunError):
    """Raised when the shell process could not be launched."""

    exit_code = SPAWN_ERROR_EXIT_CODE

    def __init__(self, command: str, shell: str, cause: Optional[Exception] = None):
        """Initialize with launch details.

        Args:
            command: The command line that was meant to run
            shell: The shell executable that failed to start
            cause: The underlying OS error
        """
        self.command = command
        self.shell = shell
        self.cause = cause

        message = f"Could not start shell '{shell}'"
        if cause is not None:
            message = f"{message}: {cause}"

        super().__init__(
            message,
            error_code="SPAWN_ERROR",
            context={"command": command, "shell": shell},
        )


class CommandFailure(HushrunError):
    """Raised to the caller when a command exits non-zero and the runner
    was asked to raise on failure."""

    def __init__(self, command: str, result: Any):
        self.command = command
        self.result = result
        self.exit_code = result.returncode

        super().__init__(
            f"Command failed with exit code {result.returncode}",
            error_code="COMMAND_FAILURE",
            context={
                "command": command,
                "exit_code": result.exit_code,
                "signal_number": result.signal_number,
            },
        )
