"""
Command execution for hushrun.
"""

import subprocess
import time
from dataclasses import dataclass
from typing import Dict, Optional, Any

from ..exceptions import SpawnError

# Exit status reported for a signal kill, as POSIX shells do
SIGNAL_EXIT_BASE = 128


@dataclass
class ExecutionResult:
    """Result of a command execution."""

    exit_code: Optional[int] = None
    signal_number: Optional[int] = None
    stdout: bytes = b""
    stderr: bytes = b""
    start_time: Optional[float] = None
    end_time: Optional[float] = None

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def returncode(self) -> int:
        """Exit code, or 128 + signal number when killed by a signal."""
        if self.exit_code is not None:
            return self.exit_code
        if self.signal_number is not None:
            return SIGNAL_EXIT_BASE + self.signal_number
        return SIGNAL_EXIT_BASE

    @property
    def duration(self) -> Optional[float]:
        """Get execution duration in seconds."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return None

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")

    @property
    def has_invalid_text(self) -> bool:
        """Whether stdout or stderr is not valid UTF-8."""
        for data in (self.stdout, self.stderr):
            try:
                data.decode("utf-8")
            except UnicodeDecodeError:
                return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "exit_code": self.exit_code,
            "signal_number": self.signal_number,
            "returncode": self.returncode,
            "success": self.success,
            "stdout": self.stdout_text,
            "stderr": self.stderr_text,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "duration": self.duration,
        }


class CommandExecutor:
    """Runs a command line through a shell and captures its output."""

    def __init__(self, shell: str):
        self.shell = shell

    def execute(self, command: str) -> ExecutionResult:
        """Run ``command`` with ``<shell> -c`` and wait for it to finish.

        Stdin is /dev/null, stdout and stderr are kept in memory.

        Args:
            command: The command line, tokenized by the shell

        Returns:
            ExecutionResult: Exit status and captured output

        Raises:
            SpawnError: If the shell cannot be launched
        """
        result = ExecutionResult()
        result.start_time = time.monotonic()

        try:
            completed = subprocess.run(
                [self.shell, "-c", command],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            raise SpawnError(command=command, shell=self.shell, cause=e) from e
        finally:
            result.end_time = time.monotonic()

        if completed.returncode < 0:
            result.signal_number = -completed.returncode
        else:
            result.exit_code = completed.returncode
        result.stdout = completed.stdout or b""
        result.stderr = completed.stderr or b""
        return result
