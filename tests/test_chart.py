"""Tests for checkmark.chart module."""

from __future__ import annotations

from checkmark.chart import ChartSegment, category_breakdown, completion_segments
from checkmark.config import ChartConfig
from checkmark.models import Summary, Task


def _tasks() -> list[Task]:
    return [
        Task(id=0, text="Essay", completed=True, category="school"),
        Task(id=1, text="Report", category="work"),
        Task(id=2, text="Slides", category="work", completed=True),
        Task(id=3, text="Climbing", category="leisure"),
    ]


class TestCompletionSegments:
    """Tests for completion_segments."""

    def test_labels_values_colors(self) -> None:
        """Test the two segments and their default colours."""
        completed, remaining = completion_segments(_tasks())
        assert (completed.label, completed.value, completed.color) == ("Completed", 2, "#4CAF50")
        assert (remaining.label, remaining.value, remaining.color) == ("Remaining", 2, "#ddd")
        assert completed.hover_color == "#66BB6A"
        assert remaining.hover_color == "#ccc"

    def test_values_match_summary(self) -> None:
        """Test segment values add up to the summary."""
        segments = completion_segments(_tasks())
        assert sum(s.value for s in segments) == 4

    def test_segment_tasks(self) -> None:
        """Test each segment lists its task texts."""
        completed, remaining = completion_segments(_tasks())
        assert completed.tasks == ("Essay", "Slides")
        assert remaining.tasks == ("Report", "Climbing")

    def test_configured_colors(self) -> None:
        """Test colours come from the chart config."""
        config = ChartConfig(completed_color="green", remaining_color="grey")
        completed, remaining = completion_segments([], config)
        assert completed.color == "green"
        assert remaining.color == "grey"
        assert completed.value == remaining.value == 0


class TestTooltip:
    """Tests for ChartSegment.tooltip."""

    def test_plain_tooltip(self) -> None:
        """Test the plain label: value form."""
        segment = ChartSegment("Completed", 2, "#4CAF50", "#66BB6A")
        assert segment.tooltip() == "Completed: 2"

    def test_tooltip_with_share(self) -> None:
        """Test the share of the total is added."""
        segment = ChartSegment("Completed", 1, "#4CAF50", "#66BB6A")
        assert segment.tooltip(total=4) == "Completed: 1 of 4 (25%)"

    def test_tooltip_empty_total(self) -> None:
        """Test an empty list does not divide by zero."""
        segment = ChartSegment("Remaining", 0, "#ddd", "#ccc")
        assert segment.tooltip(total=0) == "Remaining: 0 of 0 (0%)"

    def test_tooltip_lists_tasks(self) -> None:
        """Test task texts are listed up to the limit."""
        segment = ChartSegment("Remaining", 3, "#ddd", "#ccc", tasks=("a", "b", "c"))
        tooltip = segment.tooltip(total=3, limit=2)
        assert tooltip.splitlines() == [
            "Remaining: 3 of 3 (100%)",
            "  • a",
            "  • b",
            "  • +1 more",
        ]


class TestCategoryBreakdown:
    """Tests for category_breakdown."""

    def test_breakdown(self) -> None:
        """Test each category gets its own summary."""
        breakdown = category_breakdown(_tasks())
        assert list(breakdown) == ["school", "work", "leisure"]
        assert breakdown["school"] == Summary(1, 1)
        assert breakdown["work"] == Summary(1, 2)
        assert breakdown["leisure"] == Summary(0, 1)

    def test_breakdown_empty(self) -> None:
        """Test empty categories report zero."""
        breakdown = category_breakdown([])
        assert all(summary == (0, 0) for summary in breakdown.values())
