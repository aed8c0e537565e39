"""Rich renderables for the task list and the completion chart."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from checkmark.chart import ChartSegment, category_breakdown
from checkmark.models import Summary, Task

MAX_TEXT_WIDTH = 50


def toggle_label(show_hidden: bool) -> str:
    """Name of the action that flips the show-hidden filter."""
    return "Hide Completed Tasks" if show_hidden else "Show Completed Tasks"


def completion_caption(summary: Summary) -> str:
    return f"{summary.completed} of {summary.total} tasks completed"


def task_table(tasks: Sequence[Task], title: str = "To-Do List") -> Table:
    """Build the task table.

    Args:
        tasks: Tasks to show, already filtered for visibility.
        title: Table title.
    """
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("", width=1)
    table.add_column("Task", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Date", style="dim")
    table.add_column("Time", style="dim")

    for task in tasks:
        mark = "[green]✓[/green]" if task.completed else "[dim]○[/dim]"
        text = task.text
        if len(text) > MAX_TEXT_WIDTH:
            text = text[: MAX_TEXT_WIDTH - 3] + "..."
        text = escape(text)
        if task.completed:
            text = f"[strike]{text}[/strike]"

        table.add_row(
            str(task.id),
            mark,
            text,
            task.category,
            task.date.isoformat() if task.date else "",
            task.time or "",
        )

    return table


def summary_panel(
    summary: Summary,
    segments: Sequence[ChartSegment],
    tooltip_limit: int | None = None,
) -> Panel:
    """Build the completion panel: progress bar, caption and segment tooltips."""
    lines: list[Text | ProgressBar] = []

    lines.append(
        ProgressBar(
            total=max(summary.total, 1),
            completed=summary.completed,
            width=40,
            complete_style="green",
            finished_style="green bold",
        )
    )

    caption = Text()
    caption.append(completion_caption(summary), style="bold")
    lines.append(caption)

    for segment in segments:
        line = Text()
        line.append("■ ", style=segment.color)
        line.append(segment.tooltip(total=summary.total, limit=tooltip_limit))
        lines.append(line)

    return Panel(
        Group(*lines),
        title="[bold]Task Completion[/bold]",
        border_style="dim",
    )


def category_table(tasks: Sequence[Task]) -> Table:
    """Build the per-category completion table."""
    table = Table(title="By Category", show_header=True)
    table.add_column("Category", style="magenta")
    table.add_column("Done", style="green", justify="right")
    table.add_column("Total", style="white", justify="right")

    for category, summary in category_breakdown(tasks).items():
        table.add_row(category, str(summary.completed), str(summary.total))

    return table
