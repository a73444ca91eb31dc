"""
Main CLI entry point using Typer.

LEARNING NOTES:
- Typer builds a Click command group from type-hinted functions
- `mm "Buy milk"` has no subcommand name, so a small TyperGroup subclass
  routes any unknown first word to the hidden `add` command
- Collaborators (config store, prompt, HTTP client) travel in ctx.obj, so
  tests can pass their own with CliRunner.invoke(app, args, obj=...)

This module defines the command-line interface:
- `mm "<title>"` - Add a task
- `mm list [--all]` - List tasks (incomplete only by default)
- `mm config [--set-user-id ID | --show | --reset]` - Manage local config

The CLI orchestrates:
1. Resolving the user id (prompting on first run)
2. Calling the task API
3. Formatting and printing the result
"""

import locale
import logging
from dataclasses import dataclass
from typing import Annotated, Optional

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperGroup

from . import __version__
from .api import TaskApiError, TaskClient
from .config import get_settings
from .formatters import format_response, format_task_list
from .identity import IdentityError, resolve_user_id
from .logging_setup import setup_logging
from .prompts import RESET_QUESTION, ConsoleInput, InputSource, is_confirmation
from .storage import ConfigStore, default_store

logger = logging.getLogger(__name__)


# ============================================================================
# Wiring
# ============================================================================

@dataclass
class AppContext:
    """Everything a command needs from the outside world."""

    store: ConfigStore
    ask: InputSource
    client: TaskClient

    @classmethod
    def default(cls) -> "AppContext":
        settings = get_settings()
        return cls(
            store=default_store(),
            ask=ConsoleInput(),
            client=TaskClient.from_settings(settings),
        )


class DefaultCommandGroup(TyperGroup):
    """
    Command group that treats an unknown first word as a task title.

    `mm "Buy milk"` becomes `mm add "Buy milk"`; `mm list` is left alone.
    """

    default_command = "add"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        for index, arg in enumerate(args):
            if arg.startswith("-"):
                # Group options are all flags, so none of them eat a value
                continue
            if arg not in self.commands:
                args = [*args[:index], self.default_command, *args[index:]]
            break
        return super().parse_args(ctx, args)


# ============================================================================
# Create the Typer App
# ============================================================================

app = typer.Typer(
    name="mm",
    cls=DefaultCommandGroup,
    help='CLI tool for Minimado task management. Add a task with: mm "Buy milk"',
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]mm[/bold] version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit."
        )
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="Log HTTP and config activity to stderr."
        )
    ] = False,
) -> None:
    """CLI tool for Minimado task management."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        # Absolute dates use the user's locale (%x)
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        logger.debug("Could not apply the user's LC_TIME locale", exc_info=True)

    if ctx.obj is None:
        ctx.obj = AppContext.default()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# ============================================================================
# Error Handling Helpers
# ============================================================================

def _require_user_id(app_ctx: AppContext) -> str:
    """Resolve the user id or end the process with a non-zero exit code."""
    try:
        return resolve_user_id(app_ctx.store, app_ctx.ask, console)
    except IdentityError as e:
        err_console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user.[/yellow]")
        raise typer.Exit(130)  # Standard exit code for SIGINT


def _report_api_error(action: str, error: TaskApiError) -> None:
    """
    Print a failed API call to stderr.

    Shows the HTTP status and server payload when the server answered,
    otherwise the transport error text. The exit code is left untouched.
    """
    err_console.print(f"[red bold]❌ {action}[/red bold]")

    if error.status_code is not None:
        err_console.print(f"Status: {error.status_code}")
        detail = error.body if error.body is not None else error.message
        err_console.print(f"Error: {format_response(detail)}", markup=False, highlight=False)
    else:
        err_console.print(f"Error: {error.message}", markup=False, highlight=False)


# ============================================================================
# Commands
# ============================================================================

@app.command(name="add", hidden=True)
def add(
    ctx: typer.Context,
    title: Annotated[
        str,
        typer.Argument(help="Task title to add.")
    ],
) -> None:
    """Add a task."""
    app_ctx: AppContext = ctx.obj
    user_id = _require_user_id(app_ctx)

    try:
        with console.status(f'Adding task: "{escape(title)}"'):
            body = app_ctx.client.add_task(title, user_id)
    except TaskApiError as e:
        _report_api_error("Failed to add task", e)
        return

    console.print("[green]✅ Task added successfully![/green]")
    console.print(f"Response: {format_response(body)}", markup=False, highlight=False, soft_wrap=True)


@app.command(name="list")
def list_tasks(
    ctx: typer.Context,
    show_all: Annotated[
        bool,
        typer.Option(
            "--all", "-a",
            help="Show all tasks (including completed)."
        )
    ] = False,
) -> None:
    """List all incomplete tasks."""
    app_ctx: AppContext = ctx.obj
    user_id = _require_user_id(app_ctx)

    try:
        with console.status("Fetching tasks..."):
            tasks = app_ctx.client.list_tasks(user_id)
    except TaskApiError as e:
        _report_api_error("Failed to fetch tasks", e)
        return

    console.print(format_task_list(tasks, show_all=show_all), markup=False, highlight=False, soft_wrap=True)


@app.command()
def config(
    ctx: typer.Context,
    set_user_id: Annotated[
        Optional[str],
        typer.Option(
            "--set-user-id",
            metavar="USER_ID",
            help="Set your Clerk User ID."
        )
    ] = None,
    show: Annotated[
        bool,
        typer.Option("--show", help="Show current configuration.")
    ] = False,
    reset: Annotated[
        bool,
        typer.Option("--reset", help="Reset all configuration.")
    ] = False,
) -> None:
    """Manage configuration."""
    app_ctx: AppContext = ctx.obj
    store = app_ctx.store

    if sum([set_user_id is not None, show, reset]) > 1:
        raise typer.BadParameter("--set-user-id, --show and --reset are mutually exclusive.")

    if set_user_id is not None:
        if not set_user_id.strip():
            raise typer.BadParameter("User ID cannot be empty.", param_hint="--set-user-id")

        user_config = store.load()
        user_config.user_id = set_user_id.strip()
        if store.save(user_config):
            console.print("[green]✅ User ID updated successfully![/green]")
        else:
            err_console.print("[red]❌ Failed to save configuration.[/red]")

    elif show:
        user_config = store.load()
        console.print("📋 Current configuration:")
        console.print(f"User ID: {user_config.user_id or 'Not set'}", markup=False, soft_wrap=True)
        console.print(f"Config file: {store.path}", markup=False, highlight=False, soft_wrap=True)

    elif reset:
        try:
            answer = app_ctx.ask.ask(RESET_QUESTION)
        except KeyboardInterrupt:
            console.print("\n[yellow]Cancelled by user.[/yellow]")
            raise typer.Exit(130)

        if not is_confirmation(answer):
            console.print("Configuration reset cancelled.")
            return

        try:
            store.reset()
        except OSError as e:
            err_console.print(f"[red]❌ Failed to reset configuration:[/red] {escape(str(e))}")
            return
        console.print("[green]✅ Configuration reset successfully![/green]")

    else:
        console.print("Use --help to see available config options")


# ============================================================================
# Entry Point
# ============================================================================

if __name__ == "__main__":
    app()
