"""
True/False question.

Binary choice. The operator answers a/t for True; anything else counts
as False.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import QuestionType, register
from .base import TRUE_INPUTS, first_char


@register(QuestionType.TRUE_FALSE)
@dataclass
class TrueFalseQuestion:
    """A statement that is either true or false."""

    question_text: str
    correct_answer: bool
    points: int

    question_type: ClassVar[QuestionType]

    def render(self, console: Console) -> None:
        """Display the statement with the two fixed options."""
        console.print(
            Panel(
                Text(self.question_text),
                title="[bold cyan]TRUE OR FALSE[/bold cyan]",
                border_style="cyan",
                box=box.HEAVY,
                padding=(0, 2),
            )
        )
        console.print(Text.assemble(("a: ", "bold cyan"), "True"))
        console.print(Text.assemble(("b: ", "bold cyan"), "False"))

    def check_answer(self, raw: str | None) -> bool:
        """Compare the answer's truth value with the stored one."""
        char = first_char(raw)
        if char is None:
            return False
        return (char in TRUE_INPUTS) == self.correct_answer

    def canonical_answer_text(self) -> str:
        return "True" if self.correct_answer else "False"

    def short_label(self) -> str:
        return f"{self.question_text} ({self.points})"
