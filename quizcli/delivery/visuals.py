"""
Rendering helpers for the quiz console.

Panels, prompt styling and the results summary. Question bodies render
themselves (see ``quizcli.questions``); everything around them lives here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from quizcli.core.quiz import Quiz, Scorable
    from quizcli.session import SessionResult


PROMPT_PREFIXES = {
    "menu": ">_ SELECT",
    "multiple_choice": ">_ YOUR ANSWER",
    "true_false": ">_ YOUR ANSWER",
    "short_answer": ">_ YOUR ANSWER",
    "default": ">_",
}

MAIN_MENU = [
    ("1", "Create New Quiz"),
    ("2", "Add Questions"),
    ("3", "Delete Question"),
    ("4", "View Quiz"),
    ("5", "Take Quiz"),
    ("6", "Clear Quiz"),
    ("0", "Exit"),
]

QUESTION_TYPE_MENU = [
    ("1", "Multiple Choice"),
    ("2", "True/False"),
    ("3", "Short Answer"),
    ("0", "Back"),
]


def get_prompt(kind: str, label: str) -> str:
    """
    Styled prompt text for a prompt kind.

    Args:
        kind: Prompt kind ("menu", a question type value, ...)
        label: Text shown after the prefix

    Returns:
        Prompt string with rich markup
    """
    prefix = PROMPT_PREFIXES.get(kind, PROMPT_PREFIXES["default"])
    return f"[cyan]{prefix}[/cyan] {label}"


def screen_header(console: Console, title: str) -> None:
    """Print the banner at the top of a screen."""
    console.print(
        Panel(
            Text(title, justify="center", style="bold cyan"),
            border_style="blue",
            box=box.DOUBLE,
        )
    )


def menu_table(options: list[tuple[str, str]]) -> Table:
    table = Table(box=box.MINIMAL, show_header=False)
    table.add_column("Key", style="cyan", justify="right", width=4)
    table.add_column("Option", style="white")
    for key, label in options:
        table.add_row(f"{key}.", label)
    return table


def question_heading(console: Console, number: int) -> None:
    console.print(f"\n[bold]Question {number}:[/bold]")


def question_list(console: Console, quiz: Quiz) -> None:
    """Numbered one-line listing of the quiz, 1-based."""
    for number, question in enumerate(quiz.snapshot(), start=1):
        console.print(Text(f"{number}. {question.short_label()}"))


def points_footer(console: Console, scores: Scorable) -> None:
    """Total available points, printed under an answer key."""
    console.print(f"[bold]Total points: {scores.total_possible_points()}[/bold]")


def results_panel(console: Console, result: SessionResult) -> None:
    """Summary shown after a take-quiz pass."""
    lines = Text()
    lines.append("Score: ", style="bold")
    lines.append(result.summary(), style="bold green" if not result.wrong_questions else "bold yellow")
    lines.append(f"  ({result.percentage:.0f}%)", style="dim")
    if result.wrong_questions:
        lines.append("\nWrong questions: ", style="bold")
        lines.append(", ".join(str(number) for number in result.wrong_questions), style="red")

    console.print(
        Panel(
            lines,
            title="[bold]RESULTS[/bold]",
            border_style="green" if not result.wrong_questions else "yellow",
            box=box.ROUNDED,
            padding=(1, 2),
        )
    )
