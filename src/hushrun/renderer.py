"""Live status line shown while a command runs."""

from typing import List, Optional

from rich.console import Console
from rich.progress import Progress, ProgressColumn, SpinnerColumn, Task, TextColumn
from rich.text import Text

DEFAULT_REFRESH_INTERVAL = 0.05


def format_seconds_to_hhmmss(seconds: float) -> str:
    """Convert seconds to HH:MM:SS format."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    seconds = int(seconds % 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class ElapsedColumn(ProgressColumn):
    """Time since the task started, as ``[HH:MM:SS]``."""

    def render(self, task: Task) -> Text:
        elapsed = task.elapsed or 0.0
        return Text(f"[{format_seconds_to_hhmmss(elapsed)}]", style="bold")


class LabelColumn(ProgressColumn):
    """Fixed status word, as ``[RUNNING]``."""

    def __init__(self, label: str, style: str = "bold cyan"):
        self.label = label
        self.style = style
        super().__init__()

    def render(self, task: Task) -> Text:
        return Text(f"[{self.label}]", style=self.style)


def build_columns(running_label: str, show_elapsed_time: bool) -> List[ProgressColumn]:
    """Build the status line template, left to right.

    Spinner first, then the elapsed timer or the running label, then the message.
    """
    columns: List[ProgressColumn] = [SpinnerColumn(style="bold cyan")]
    if show_elapsed_time:
        columns.append(ElapsedColumn())
    else:
        columns.append(LabelColumn(running_label))
    columns.append(TextColumn("{task.description}", markup=False))
    return columns


class StatusRenderer:
    """Spinner line redrawn from a background thread until stopped.

    The line is drawn on stderr and removed on stop, so nothing of it is left
    when the report is printed. Nothing is drawn on a console that is not an
    interactive terminal.
    """

    def __init__(
        self,
        columns: List[ProgressColumn],
        message: str,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL,
        console: Optional[Console] = None,
    ):
        self.message = message
        self.refresh_interval = refresh_interval
        self.console = console or Console(stderr=True)
        self._progress = Progress(
            *columns,
            console=self.console,
            transient=True,
            refresh_per_second=1 / refresh_interval,
        )
        self._progress.add_task(message, total=None)
        self._active = False
        self._drawing = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        if self._active:
            return
        # Progress.stop() ends with a bare newline on non-interactive consoles
        if self.console.is_interactive:
            self._progress.start()
            self._drawing = True
        self._active = True

    def stop(self) -> None:
        """Stop redrawing and clear the line. Returns once the line is gone."""
        if not self._active:
            return
        self._active = False
        if self._drawing:
            self._drawing = False
            self._progress.stop()

    def __enter__(self) -> "StatusRenderer":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
