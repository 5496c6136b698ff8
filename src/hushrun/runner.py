"""
Runs one command behind a status line and reports the outcome.
"""

import sys
import threading
from dataclasses import replace
from typing import Callable, List, NoReturn

import click
from rich.progress import ProgressColumn

from .config import CompletionBehavior, Configuration
from .exceptions import (
    CommandFailure,
    ConfigurationError,
    HushrunError,
    SpawnError,
)
from .execution import CommandExecutor, ExecutionResult
from .logging import HushrunLogger
from .renderer import StatusRenderer, build_columns
from .report import Reporter


class Runner:
    """Runs the command of a Configuration, quietly unless it fails.

    Example:
        code = Runner(
            Configuration()
            .set_command("ls /tmp && sleep 2")
            .set_message("Listing tmp")
            .show_time()
            .return_exit_code()
        ).run()

    A runner handles one run at a time. Use separate runners to run commands
    from several threads.
    """

    def __init__(
        self,
        config: Configuration,
        renderer_factory: Callable[..., StatusRenderer] = StatusRenderer,
        executor_factory: Callable[[str], CommandExecutor] = CommandExecutor,
    ):
        self.config = config
        self.renderer_factory = renderer_factory
        self.executor_factory = executor_factory
        self.logger = HushrunLogger().get_context_logger(
            runner_class=self.__class__.__name__
        )
        self._lock = threading.Lock()

    def build_template(self, config: Configuration) -> List[ProgressColumn]:
        labels = config.resolved_labels()
        return build_columns(labels.running, config.show_elapsed_time)

    def run(self) -> int:
        """Run the command and resolve the completion behavior.

        Returns:
            int: The command's exit code (only for RETURN_CODE and RAISE_ON_FAILURE)

        Raises:
            ConfigurationError: If no command was given and the runner does not
                terminate the process
            SpawnError: If the shell could not be started, same condition
            CommandFailure: If the command failed under RAISE_ON_FAILURE
            HushrunError: If the runner is already running
        """
        if not self._lock.acquire(blocking=False):
            raise HushrunError("Runner is already running", error_code="RUNNER_BUSY")
        try:
            config = replace(self.config)
            try:
                config.validate()
                result = self._execute(config)
            except (ConfigurationError, SpawnError) as e:
                self._abort(config, e)

            Reporter(config.resolved_labels(), config.resolved_message()).report(result)
            return self._complete(config, result)
        finally:
            self._lock.release()

    def _execute(self, config: Configuration) -> ExecutionResult:
        message = config.resolved_message()
        renderer = self.renderer_factory(self.build_template(config), message)
        executor = self.executor_factory(config.shell)

        self.logger.info(
            "Running command: %s",
            config.command,
            extra={"shell": config.shell, "display_message": message},
        )

        renderer.start()
        try:
            result = executor.execute(config.command)
        finally:
            renderer.stop()

        self.logger.debug(
            "Command finished with status %s",
            result.returncode,
            extra={"command": config.command, "duration": result.duration},
        )
        return result

    def _complete(self, config: Configuration, result: ExecutionResult) -> int:
        code = result.returncode
        behavior = config.on_completion

        if not result.success:
            self.logger.info(
                "Command failed with status %s",
                code,
                extra={"command": config.command, "signal_number": result.signal_number},
            )

        if behavior is CompletionBehavior.TERMINATE_PROCESS:
            sys.exit(code)
        if behavior is CompletionBehavior.RAISE_ON_FAILURE and not result.success:
            raise CommandFailure(config.command, result)
        return code

    def _abort(self, config: Configuration, error: HushrunError) -> NoReturn:
        """Report an error of hushrun itself, never a failure of the command."""
        self.logger.debug(
            "Run aborted: %s",
            error.message,
            extra={"error_code": error.error_code, "context": error.context},
        )
        click.secho(f"✗ {error}", fg="red", err=True)
        if config.on_completion is CompletionBehavior.TERMINATE_PROCESS:
            sys.exit(error.exit_code)
        raise error
