"""Markdown export of the task list."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from jinja2 import BaseLoader, Environment

from checkmark.config import ExportConfig
from checkmark.models import SchemaVersion, Summary, Task

DEFAULT_TEMPLATE = """\
# To-Do List

{% if tasks -%}
{% for task in tasks -%}
- [{{ "x" if task.completed else " " }}] {{ task.text }}
{%- if schema != "v1" %} _({{ task.category }})_
{%- if task.date %} 📅 {{ task.date.isoformat() }}{% endif %}
{%- if task.time %} {{ task.time }}{% endif %}
{%- endif %}
{% endfor -%}
{% else -%}
No tasks.
{% endif %}
{{ summary.completed }} of {{ summary.total }} tasks completed
"""


def render_markdown(
    tasks: Sequence[Task],
    summary: Summary,
    template: str | None = None,
    schema: SchemaVersion = "v2",
) -> str:
    """Render tasks as a markdown checklist.

    Category and schedule columns are left out for the v1 schema, which does
    not store them.
    """
    env = Environment(loader=BaseLoader())
    compiled = env.from_string(template or DEFAULT_TEMPLATE)
    return compiled.render(tasks=tasks, summary=summary, schema=schema)


def get_template(config: ExportConfig) -> str:
    """Get the template string based on config."""
    if config.template_path:
        custom_path = Path(config.template_path)
        if custom_path.exists():
            return custom_path.read_text()

    return DEFAULT_TEMPLATE
