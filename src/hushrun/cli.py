"""
CLI entry point.
"""

from typing import Optional, Tuple

import click

from . import __version__
from .config import CompletionBehavior, Configuration
from .exceptions import HushrunError
from .logging import HushrunLogger
from .runner import Runner

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


def build_configuration(
    command: Tuple[str, ...],
    message: Optional[str] = None,
    show_time: bool = False,
    running_message: Optional[str] = None,
    success_message: Optional[str] = None,
    failure_message: Optional[str] = None,
    shell: Optional[str] = None,
) -> Configuration:
    """Environment defaults first, then whatever was given on the command line."""
    config = Configuration.from_env().set_command(" ".join(command))
    if message is not None:
        config.set_message(message)
    if show_time:
        config.show_time()
    if running_message is not None:
        config.set_running_message(running_message)
    if success_message is not None:
        config.set_success_message(success_message)
    if failure_message is not None:
        config.set_failure_message(failure_message)
    if shell is not None:
        config.set_shell(shell)
    return config.set_on_completion(CompletionBehavior.TERMINATE_PROCESS)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-m",
    "--message",
    type=str,
    help="The message displayed while the command runs (defaults to the command)",
)
@click.option(
    "-s",
    "--show-time",
    is_flag=True,
    help="Show the elapsed time instead of the running message",
)
@click.option("--running-message", type=str, help="Status shown while running")
@click.option("--success-message", type=str, help="Status shown on success")
@click.option("--failure-message", type=str, help="Status shown on failure")
@click.option("--shell", type=str, help="Shell used to run the command")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-dir", type=str, help="Directory for log files")
@click.version_option(__version__, prog_name="hushrun")
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def cli(
    command: Tuple[str, ...],
    message: Optional[str] = None,
    show_time: bool = False,
    running_message: Optional[str] = None,
    success_message: Optional[str] = None,
    failure_message: Optional[str] = None,
    shell: Optional[str] = None,
    verbose: bool = False,
    debug: bool = False,
    log_dir: Optional[str] = None,
):
    """Run COMMAND quietly, showing its output only if it fails.

    Chained commands can be quoted:

        hushrun "git fetch -p origin && git merge origin/master"
    """
    HushrunLogger().setup(verbose=verbose, debug=debug, log_dir=log_dir)

    try:
        config = build_configuration(
            command,
            message=message,
            show_time=show_time,
            running_message=running_message,
            success_message=success_message,
            failure_message=failure_message,
            shell=shell,
        )
    except HushrunError as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        raise click.exceptions.Exit(e.exit_code) from e

    # Exits with the command's code
    Runner(config).run()


def main():
    """Console script entry point."""
    cli(prog_name="hushrun")


if __name__ == "__main__":
    main()
