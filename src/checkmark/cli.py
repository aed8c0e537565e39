"""CLI interface for checkmark."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from checkmark import __version__
from checkmark.config import CONFIG_FILE, CheckmarkConfig
from checkmark.log import configure_logging
from checkmark.models import CATEGORIES, Summary, Task
from checkmark.session import run_session
from checkmark.store import TodoStore

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="checkmark")
@click.option("--verbose", "-v", is_flag=True, help="Log store activity to stderr")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """checkmark - a to-do list for the terminal.

    \b
    Examples:
      checkmark add "Buy milk"
      checkmark add "Essay draft" -c school -d 2026-10-20 -t 09:30
      checkmark toggle 0
      checkmark list --all
      checkmark summary
    """
    ctx.ensure_object(dict)
    config = CheckmarkConfig.load()
    ctx.obj["config"] = config

    configure_logging("DEBUG" if verbose else config.logging.level)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
@click.option(
    "--schema",
    type=click.Choice(["v1", "v2"]),
    default="v2",
    show_default=True,
    help="Record layout for persisted tasks",
)
@click.option(
    "--backend",
    type=click.Choice(["sync", "async"]),
    default="sync",
    show_default=True,
    help="Storage write mode",
)
def init(force: bool, schema: str, backend: str) -> None:
    """Write a default config to .checkmark/config.json."""
    if CONFIG_FILE.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {CONFIG_FILE}")
        console.print("[dim]Use --force to overwrite.[/dim]")
        return

    config = CheckmarkConfig()
    config.storage.schema_version = schema  # type: ignore[assignment]
    config.storage.backend = backend  # type: ignore[assignment]
    config.save()

    console.print(
        Panel.fit(
            f"[green]Initialised checkmark[/green]\n\n"
            f"  Config: {CONFIG_FILE}\n"
            f"  Tasks: {Path(config.storage.directory) / config.storage.key}.json\n"
            f"  Schema: {schema}, backend: {backend}",
            title="checkmark",
        )
    )


@main.command()
@click.argument("text")
@click.option(
    "--category",
    "-c",
    type=click.Choice(CATEGORIES),
    default="school",
    show_default=True,
    help="Task category",
)
@click.option("--date", "-d", "due_date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Scheduled date (YYYY-MM-DD)")
@click.option("--time", "-t", "due_time", help="Scheduled time (HH:MM)")
@click.pass_context
def add(
    ctx: click.Context,
    text: str,
    category: str,
    due_date: datetime | None,
    due_time: str | None,
) -> None:
    """Add a task."""
    config: CheckmarkConfig = ctx.obj["config"]

    def _add(store: TodoStore) -> Task | None:
        return store.add(
            text,
            category=category,  # type: ignore[arg-type]
            date=due_date.date() if due_date else None,
            time=due_time,
        )

    task = run_session(config, _add)

    if task is None:
        if not text.strip():
            console.print("[yellow]Nothing to add:[/yellow] task text is blank.")
        else:
            console.print("[red]Task not added:[/red] check the category, date and time.")
        return

    console.print(f"[green]Added:[/green] [cyan]{task.id}[/cyan] {escape(task.text)}")


@main.command()
@click.argument("task_id", type=int)
@click.pass_context
def toggle(ctx: click.Context, task_id: int) -> None:
    """Mark a task complete, or incomplete again."""
    config: CheckmarkConfig = ctx.obj["config"]

    task = run_session(config, lambda store: store.toggle_complete(task_id))

    if task is None:
        console.print(f"[dim]No task with id {task_id}.[/dim]")
    elif task.completed:
        console.print(f"[green]Completed:[/green] {escape(task.text)}")
    else:
        console.print(f"[yellow]Reopened:[/yellow] {escape(task.text)}")


@main.command()
@click.argument("task_id", type=int)
@click.pass_context
def delete(ctx: click.Context, task_id: int) -> None:
    """Delete a task permanently."""
    config: CheckmarkConfig = ctx.obj["config"]

    removed = run_session(config, lambda store: store.delete(task_id))

    if removed:
        console.print(f"[green]Deleted task:[/green] {task_id}")
    else:
        console.print(f"[dim]No task with id {task_id}.[/dim]")


@main.command("list")
@click.option("--all", "-a", "show_all", is_flag=True, help="Include completed tasks")
@click.pass_context
def list_tasks(ctx: click.Context, show_all: bool) -> None:
    """Show tasks. Completed tasks are hidden unless --all is given."""
    from checkmark.render import task_table, toggle_label

    config: CheckmarkConfig = ctx.obj["config"]

    def _visible(store: TodoStore) -> tuple[list[Task], Summary]:
        store.set_show_hidden(show_all)
        return store.visible_tasks(), store.summary()

    tasks, summary = run_session(config, _visible)

    if not summary.total:
        console.print('[dim]No tasks yet.[/dim] Use [cyan]checkmark add "..."[/cyan]')
        return

    console.print(task_table(tasks))

    hidden_count = summary.total - len(tasks)
    command = "checkmark list" if show_all else "checkmark list --all"
    console.print(f"[dim]{toggle_label(show_all)}:[/dim] [cyan]{command}[/cyan]")
    if hidden_count:
        console.print(f"[dim]{hidden_count} completed task(s) hidden.[/dim]")


@main.command()
@click.pass_context
def summary(ctx: click.Context) -> None:
    """Show the completion chart."""
    from checkmark.chart import completion_segments
    from checkmark.render import category_table, summary_panel

    config: CheckmarkConfig = ctx.obj["config"]

    tasks, totals = run_session(config, lambda store: (store.tasks, store.summary()))
    segments = completion_segments(tasks, config.chart)

    console.print(summary_panel(totals, segments, tooltip_limit=config.chart.tooltip_limit))

    if config.storage.schema_version == "v2" and tasks:
        console.print(category_table(tasks))


@main.command()
@click.option("--all", "-a", "show_all", is_flag=True, help="Include completed tasks")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write to file instead of stdout")
@click.pass_context
def export(ctx: click.Context, show_all: bool, output: str | None) -> None:
    """Export tasks as a markdown checklist."""
    from checkmark.export import get_template, render_markdown

    config: CheckmarkConfig = ctx.obj["config"]

    def _export(store: TodoStore) -> tuple[list[Task], Summary]:
        store.set_show_hidden(show_all or config.export.include_completed)
        return store.visible_tasks(), store.summary()

    tasks, totals = run_session(config, _export)

    content = render_markdown(
        tasks,
        totals,
        template=get_template(config.export),
        schema=config.storage.schema_version,
    )

    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content + "\n")
        console.print(f"[green]Exported {len(tasks)} task(s):[/green] {output}")
    else:
        click.echo(content)


if __name__ == "__main__":
    main()
