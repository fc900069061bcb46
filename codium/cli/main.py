"""Command-line entry point for browsing and linting lesson content."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from codium.console.widgets import ConsoleScreen
from codium.core.content import load_course
from codium.core.events import LoadReport
from codium.core.logging_setup import configure_logging
from codium.core.store import CourseStore
from codium.validators.base import Verdict
from codium.validators.lint import validate_course
from codium.viewer.bootstrap import bootstrap_viewer

app = typer.Typer(help="Browse and lint interactive coding lessons.")
console = Console()


def _issues_table(title: str, errors: list[str], warnings: list[str]) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("Severity", justify="center")
    table.add_column("Message")
    for issue in errors:
        table.add_row("error", issue, style="bold red")
    for issue in warnings:
        table.add_row("warning", issue, style="yellow")
    return table


def _load_or_exit(course_file: Path):
    try:
        return load_course(course_file)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


@app.command()
def validators(
    config: Optional[Path] = typer.Option(None, "--config", help="Viewer config YAML."),
) -> None:
    """List the registered validators."""
    ctx = bootstrap_viewer(config)
    table = Table(title="Validators", show_header=True)
    table.add_column("Name")
    table.add_column("Description")
    for name, description in ctx.registry.describe().items():
        table.add_row(name, description)
    console.print(table)


@app.command()
def check(
    course_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    fail_on_warning: bool = typer.Option(False, "--fail-on-warning", help="Exit non-zero when warnings are present."),
    config: Optional[Path] = typer.Option(None, "--config", help="Viewer config YAML."),
) -> None:
    """Lint a course file for validator references and caret markers."""
    ctx = bootstrap_viewer(config)
    course = _load_or_exit(course_file)
    errors, warnings = validate_course(course, ctx.registry, sentinel=ctx.config.caret_sentinel)
    console.print(_issues_table(f"Course check: {course.title}", errors, warnings))

    if errors or (fail_on_warning and warnings):
        raise typer.Exit(code=1)

    console.print("[green]Course looks good![/green]")


@app.command()
def show(
    course_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    view: int = typer.Option(1, "--view", "-v", min=1, help="1-based lesson number."),
    solution: bool = typer.Option(False, "--solution", help="Reveal the solution code (asks first)."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Answer yes to confirmation prompts."),
    config: Optional[Path] = typer.Option(None, "--config", help="Viewer config YAML."),
    event_log: Optional[Path] = typer.Option(None, "--event-log", help="Append viewer events to this JSONL file."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level."),
) -> None:
    """Render one lesson of a course to the terminal."""
    ctx = bootstrap_viewer(config, log_level=log_level, event_log_path=event_log)
    configure_logging(ctx.config.log_level, console=console)
    course = _load_or_exit(course_file)

    store = CourseStore([course])
    store.select(course, view - 1)
    screen = ConsoleScreen(console, auto_answer=True if yes else None)
    loader = screen.build_loader(store, config=ctx.config, registry=ctx.registry, event_log=ctx.event_log)

    if store.current_view is None:
        report = loader.load_course_view_data(course, view - 1)
        console.print(_issues_table("Load issues", [], [issue.message for issue in report.warnings]))
        raise typer.Exit(code=1)

    report = loader.load_current_course_view() or LoadReport(view_index=view - 1)
    if solution:
        loader.show_solution()

    screen.render(current_index=loader.view_index)
    if loader.validator is not None:
        verdict = loader.evaluate()
        style = "green" if verdict is Verdict.PASSED else "yellow"
        console.print(f"[{style}]Validator verdict: {verdict.value}[/{style}]")
    if report.issues:
        console.print(
            _issues_table(
                "Load issues",
                [issue.message for issue in report.errors],
                [issue.message for issue in report.warnings],
            )
        )
    loader.close()
    if report.errors:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
