"""
Final report printed once the command has finished.
"""

import signal
from typing import Optional

import click

from .config import Labels
from .execution import ExecutionResult
from .logging import HushrunLogger


def _signal_name(signal_number: int) -> str:
    try:
        return signal.Signals(signal_number).name
    except ValueError:
        return f"signal {signal_number}"


class Reporter:
    """Prints the outcome of a run to stdout.

    A success is a single line. A failure also shows the exit code and the
    captured output of both streams.
    """

    def __init__(self, labels: Labels, message: str):
        self.labels = labels
        self.message = message
        self.logger = HushrunLogger().get_context_logger(
            reporter_class=self.__class__.__name__
        )

    def report(self, result: ExecutionResult) -> None:
        if result.success:
            self.report_success()
        else:
            self.report_failure(result)

    def report_success(self) -> None:
        status = click.style(self.labels.success, fg="green", bold=True)
        click.echo(f"  [{status}] {self.message}")

    def report_failure(self, result: ExecutionResult) -> None:
        status = click.style(self.labels.failure, fg="red", bold=True)
        click.echo(f"  [{status}] {self.message}")

        error_code = click.style("ERROR CODE", fg="red", bold=True)
        line = f"  [{error_code}] {result.returncode}"
        if result.exit_code is None and result.signal_number is not None:
            line += f" (terminated by {_signal_name(result.signal_number)})"
        click.echo(line)

        if result.has_invalid_text:
            self.logger.warning(
                "Captured output is not valid UTF-8, invalid bytes were replaced",
                extra={"message": self.message},
            )

        self._echo_stream("STDOUT", result.stdout_text)
        self._echo_stream("STDERR", result.stderr_text)

    def _echo_stream(self, name: str, text: Optional[str]) -> None:
        header = click.style(name, fg="white", bold=True)
        if not text:
            click.echo(f"  [{header}] Empty")
            return
        click.echo(f"  [{header}]")
        # Captured text keeps its own escape sequences, even when piped
        click.echo(text, nl=not text.endswith("\n"), color=True)
