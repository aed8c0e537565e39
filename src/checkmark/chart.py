"""Completion chart data.

The chart itself is a rendering sink: it only needs `(label, value, color)`
triples plus the text shown when hovering a segment. Everything here is
derived from the task list and its summary.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from checkmark.config import ChartConfig
from checkmark.models import CATEGORIES, Summary, Task, summarize


@dataclass(frozen=True)
class ChartSegment:
    """One slice of the completion doughnut."""

    label: str
    value: int
    color: str
    hover_color: str
    tasks: tuple[str, ...] = field(default_factory=tuple)
    """Texts of the tasks counted in this slice, for tooltips."""

    def tooltip(self, total: int | None = None, limit: int | None = None) -> str:
        """Hover text for the slice.

        Without a total this is the plain `"<label>: <value>"` form. With a
        total the share is added, and with a limit up to that many task
        texts are listed after it.
        """
        text = f"{self.label}: {self.value}"
        if total is None:
            return text

        share = round(100 * self.value / total) if total else 0
        text = f"{text} of {total} ({share}%)"

        if limit and self.tasks:
            shown = list(self.tasks[:limit])
            hidden_count = len(self.tasks) - len(shown)
            if hidden_count > 0:
                shown.append(f"+{hidden_count} more")
            text = f"{text}\n" + "\n".join(f"  • {name}" for name in shown)

        return text


def completion_segments(
    tasks: Sequence[Task],
    config: ChartConfig | None = None,
) -> list[ChartSegment]:
    """Build the Completed / Remaining segments for a task list."""
    if config is None:
        config = ChartConfig()

    done = tuple(task.text for task in tasks if task.completed)
    remaining = tuple(task.text for task in tasks if not task.completed)

    return [
        ChartSegment(
            label="Completed",
            value=len(done),
            color=config.completed_color,
            hover_color=config.completed_hover_color,
            tasks=done,
        ),
        ChartSegment(
            label="Remaining",
            value=len(remaining),
            color=config.remaining_color,
            hover_color=config.remaining_hover_color,
            tasks=remaining,
        ),
    ]


def category_breakdown(tasks: Sequence[Task]) -> dict[str, Summary]:
    """Summarize each category, in category order."""
    return {
        category: summarize(task for task in tasks if task.category == category)
        for category in CATEGORIES
    }
