"""
Multiple choice question.

- Presents a prompt with up to four options labelled a-d by position.
- The answer is graded on its first letter only, case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from quizcli.core.exceptions import InvalidQuestionError

from . import QuestionType, register
from .base import CHOICE_LETTERS, first_char


@register(QuestionType.MULTIPLE_CHOICE)
@dataclass
class MultipleChoiceQuestion:
    """A question with lettered options and a single correct letter."""

    question_text: str
    choices: list[str]
    correct_answer: str
    points: int

    question_type: ClassVar[QuestionType]

    def __post_init__(self) -> None:
        # Independent of the caller's list
        self.choices = list(self.choices)
        letter = str(self.correct_answer).lower()
        allowed = self.available_letters()
        if letter not in allowed:
            raise InvalidQuestionError(
                f"Correct answer {self.correct_answer!r} must be one of: {', '.join(allowed) or 'none'}"
            )
        self.correct_answer = letter

    def available_letters(self) -> tuple[str, ...]:
        """Letters that label a displayed choice."""
        return CHOICE_LETTERS[: min(len(self.choices), len(CHOICE_LETTERS))]

    def render(self, console: Console) -> None:
        """Display the prompt followed by the lettered options."""
        console.print(
            Panel(
                Text(self.question_text),
                title="[bold cyan]MULTIPLE CHOICE[/bold cyan]",
                border_style="cyan",
                box=box.HEAVY,
                padding=(0, 2),
            )
        )
        for letter, choice in zip(CHOICE_LETTERS, self.choices):
            console.print(Text.assemble((f"{letter}: ", "bold cyan"), choice))

    def check_answer(self, raw: str | None) -> bool:
        """Any answer whose first letter matches is correct ("B", "bxyz")."""
        return first_char(raw) == self.correct_answer

    def canonical_answer_text(self) -> str:
        return self.correct_answer

    def short_label(self) -> str:
        return f"{self.question_text} ({self.points})"
