"""
Typer CLI for quiz-cli.

Commands:
    quiz-cli                - Launch the interactive quiz menu
    quiz-cli menu           - Same as above
    quiz-cli version        - Show the installed version

Usage:
    quiz-cli --help
    quiz-cli --log-level DEBUG --log-file logs/quiz.log
    quiz-cli --no-clear menu
"""

from __future__ import annotations

import sys
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console

from quizcli import __version__
from quizcli.cli.menu import QuizManager
from quizcli.config import get_settings
from quizcli.delivery.prompts import Prompter

app = typer.Typer(
    name="quiz-cli",
    help="Console quiz authoring and administration",
    no_args_is_help=False,  # Running without args opens the menu
    invoke_without_command=True,
    rich_markup_mode="rich",
)

console = Console()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str, log_file: str | None = None) -> None:
    """Route loguru to stderr (and optionally a file) at the given level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if log_file:
        logger.add(log_file, level="DEBUG", rotation="1 MB", retention=3)


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: Annotated[
        str | None, typer.Option("--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR")
    ] = None,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Also write logs to this file")
    ] = None,
    no_clear: Annotated[
        bool, typer.Option("--no-clear", help="Don't clear the screen between menus")
    ] = False,
) -> None:
    """
    Quiz management CLI.

    Run without arguments to open the interactive menu.
    """
    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
    configure_logging(level, log_file or settings.log_file)
    ctx.obj = {"clear_screen": settings.clear_screen and not no_clear}

    if ctx.invoked_subcommand is None:
        _run_menu(ctx.obj["clear_screen"])


@app.command()
def menu(ctx: typer.Context) -> None:
    """Open the interactive quiz menu."""
    _run_menu(ctx.obj["clear_screen"])


@app.command()
def version() -> None:
    """Show the installed version."""
    console.print(f"quiz-cli [bold cyan]{__version__}[/bold cyan]")


def _run_menu(clear_screen: bool) -> None:
    settings = get_settings()
    prompter = Prompter(console, pause_enabled=settings.pause_between_screens)
    QuizManager(console=console, prompter=prompter, clear_screen=clear_screen).run()


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
