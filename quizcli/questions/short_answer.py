"""
Short answer question.

Exact string match grading, case-insensitive. The operator's answer is
trimmed before comparison; stored answers are only lowercased.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import QuestionType, register
from .base import normalize_answer


@register(QuestionType.SHORT_ANSWER)
@dataclass
class ShortAnswerQuestion:
    """A free-text question with a canonical answer and optional alternatives."""

    question_text: str
    correct_answer: str
    points: int
    acceptable_answers: set[str] = field(default_factory=set)

    question_type: ClassVar[QuestionType]

    def __post_init__(self) -> None:
        self.correct_answer = self.correct_answer.lower()
        if isinstance(self.acceptable_answers, str):
            self.acceptable_answers = {self.acceptable_answers}
        accepted = {answer.lower() for answer in self.acceptable_answers}
        accepted.add(self.correct_answer)
        self.acceptable_answers = accepted

    def render(self, console: Console) -> None:
        """Display the prompt only."""
        console.print(
            Panel(
                Text(self.question_text),
                title="[bold cyan]SHORT ANSWER[/bold cyan]",
                border_style="cyan",
                box=box.HEAVY,
                padding=(0, 2),
            )
        )

    def check_answer(self, raw: str | None) -> bool:
        if not raw:
            return False
        return normalize_answer(raw) in self.acceptable_answers

    def canonical_answer_text(self) -> str:
        return self.correct_answer

    def short_label(self) -> str:
        return f"{self.question_text} ({self.points})"
