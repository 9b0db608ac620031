"""
Command-line interface for Task Tracker.

Each invocation builds one TaskManager, runs one operation and prints a
status line.
"""

from pathlib import Path
from typing import List, Optional

import pydantic
import typer
from rich.console import Console

from ..config import get_config
from ..errors import (
    LoadError,
    PathResolutionError,
    TaskTrackerError,
)
from ..models import Task, TaskManager, TaskStatus
from ..utils.daily_logger import get_cli_logger, setup_daily_logger

app = typer.Typer(
    name="task-cli",
    help="Track short text tasks in a local JSON file.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)
logger = get_cli_logger()


def _echo(message: str, style: Optional[str] = None, err: bool = False) -> None:
    """Print plain text; task descriptions are never treated as markup."""
    target = err_console if err else console
    target.print(
        message, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def _fail(message: str, code: int = 1) -> None:
    _echo(message, style="red", err=True)
    raise typer.Exit(code=code)


def _format_task(task: Task) -> str:
    return f"ID: {task.id}, Description: {task.description}, Status: {task.status.value}"


def _get_manager(ctx: typer.Context) -> TaskManager:
    """Construct the task manager for the configured backing file."""
    file_path = ctx.obj["file"]
    try:
        return TaskManager(file_path)
    except (PathResolutionError, LoadError) as e:
        logger.error("Error creating task manager", extra={"json_data": {"error": str(e)}})
        _fail(f"Error creating task manager: {e}")


def _run(ctx: typer.Context, command: str, operation) -> None:
    """Run one manager operation, turning task errors into an exit code."""
    manager = _get_manager(ctx)
    logger.info("Running command", extra={"json_data": {"command": command}})
    try:
        operation(manager)
    except TaskTrackerError as e:
        logger.warning(
            "Command failed",
            extra={"json_data": {"command": command, "error": str(e)}},
        )
        _fail(f"Error: {e}")


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Task file path (default: TASK_TRACKER_FILE or tasks.json)"
    ),
):
    """Track short text tasks in a local JSON file."""
    try:
        settings = get_config()
    except pydantic.ValidationError as e:
        _fail(f"Error loading configuration: {e}")
    if settings.log_dir is not None:
        level = settings.log_level_number
        setup_daily_logger("manager", settings.log_dir, level)
        setup_daily_logger("cli", settings.log_dir, level)
    ctx.obj = {"file": file if file is not None else settings.file}


@app.command()
def add(
    ctx: typer.Context,
    description: List[str] = typer.Argument(..., help="Task description"),
):
    """Add a new task."""

    def operation(manager: TaskManager) -> None:
        task = manager.add_task(" ".join(description))
        _echo(f"Task added successfully (ID: {task.id})", style="green")

    _run(ctx, "add", operation)


@app.command()
def update(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
    description: List[str] = typer.Argument(..., help="New task description"),
):
    """Change a task's description."""

    def operation(manager: TaskManager) -> None:
        manager.update_task(task_id, " ".join(description))
        _echo("Task updated successfully", style="green")

    _run(ctx, "update", operation)


@app.command()
def delete(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
):
    """Delete a task."""

    def operation(manager: TaskManager) -> None:
        manager.delete_task(task_id)
        _echo("Task deleted successfully", style="green")

    _run(ctx, "delete", operation)


@app.command("list")
def list_tasks(
    ctx: typer.Context,
    status: Optional[str] = typer.Argument(
        None, help="Only show tasks with this status (todo, in-progress, done)"
    ),
):
    """List all tasks, or only those with a given status."""
    if status is not None and status not in TaskStatus.values():
        _fail(
            "invalid filtering input. Valid inputs are: "
            f"{', '.join(TaskStatus.values())}\nUsage: list [status]"
        )

    def operation(manager: TaskManager) -> None:
        if not manager.tasks:
            _echo("No tasks found.")
            return

        if status is None:
            tasks = manager.list_tasks()
        else:
            tasks = manager.list_filter_by_status(status)
            if not tasks:
                _echo(f"No tasks found with status '{status}'.")
                return

        for task in tasks:
            _echo(_format_task(task))

    _run(ctx, "list", operation)


@app.command()
def mark_in_progress(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
):
    """Mark a task as in progress."""

    def operation(manager: TaskManager) -> None:
        manager.mark_task_in_progress(task_id)
        _echo("Task marked as in progress successfully", style="green")

    _run(ctx, "mark-in-progress", operation)


@app.command()
def mark_done(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
):
    """Mark a task as done."""

    def operation(manager: TaskManager) -> None:
        manager.mark_task_done(task_id)
        _echo("Task marked as done successfully", style="green")

    _run(ctx, "mark-done", operation)


if __name__ == "__main__":
    app()
