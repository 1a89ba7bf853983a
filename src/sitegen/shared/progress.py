"""Rich progress display for website generation jobs."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from sitegen.schemas.job import JobSnapshot, JobStatus

console = Console()


class GenerationProgress:
    """Renders job snapshots as a single progress bar with the stage label."""

    def __init__(self, business_id: str) -> None:
        self.business_id = business_id
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.percentage:>3.0f}%"),
            TimeElapsedColumn(),
            console=console,
        )
        self._task_id: int | None = None
        self._last_status: JobStatus | None = None

    def __enter__(self) -> "GenerationProgress":
        self._progress.__enter__()
        self._task_id = self._progress.add_task(f"[cyan]{self.business_id}[/]", total=100)
        return self

    def __exit__(self, *args: object) -> None:
        self._progress.__exit__(*args)

    def update(self, snapshot: JobSnapshot) -> None:
        """Apply a snapshot; stage changes also get a persistent log line."""
        if self._task_id is None:
            return

        if snapshot.status is JobStatus.FAILED:
            description = f"[red]✗ {snapshot.step}: {snapshot.error or snapshot.message}[/]"
        elif snapshot.status is JobStatus.COMPLETED:
            description = f"[green]✓ {snapshot.step}[/]"
        else:
            description = f"[cyan]{snapshot.step}[/] — {snapshot.message}"

        self._progress.update(self._task_id, description=description, completed=snapshot.progress)

        if snapshot.status is not self._last_status:
            self._last_status = snapshot.status
            self._progress.console.print(f"  [dim]{snapshot.status.value}:[/] {snapshot.message}")

    def print_phase(self, label: str) -> None:
        """Print a phase header outside the progress display."""
        self._progress.console.print(Panel(f"[bold]{label}[/bold]", style="blue"))
