"""ProgressRunObserver — renders a Rich progress bar for batch runs on stderr."""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressRunObserver:
    """Shows one bar per batch, with a running count of errored items.

    Only batch_started, batch_item_completed and batch_completed produce
    output; all other events are no-ops.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from RunObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self._done = 0
        self._errored = 0

    @property
    def done(self) -> int:
        return self._done

    @property
    def errored(self) -> int:
        return self._errored

    def run_started(self, kind: str, name: str) -> None:
        pass

    def run_completed(
        self, kind: str, name: str, errored: bool, correct: bool | None
    ) -> None:
        pass

    def run_rejected(self, kind: str) -> None:
        pass

    def run_item_failed(self, kind: str, name: str, reason: str) -> None:
        pass

    def batch_started(self, run_id: str, total: int, max_concurrent: int) -> None:
        # Reset state from any previous batch.
        self._done = 0
        self._errored = 0
        self._progress = None
        self._task_id = None
        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("[bold]Batch[/bold] {task.fields[short_id]}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TextColumn("[red]{task.fields[errored]} errored[/red]"),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description="batch",
            total=float(total),
            short_id=run_id[:8],
            errored=0,
        )
        self._progress.start()

    def batch_item_completed(
        self, run_id: str, index: int, name: str, errored: bool
    ) -> None:
        self._done += 1
        if errored:
            self._errored += 1
        if self._progress is not None and self._task_id is not None:
            self._progress.update(
                self._task_id, completed=self._done, errored=self._errored
            )

    def batch_completed(
        self, run_id: str, total: int, error_count: int, elapsed_seconds: float
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
