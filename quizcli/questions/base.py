"""
Base protocol and helpers for quiz question types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from rich.console import Console

if TYPE_CHECKING:
    from . import QuestionType


# Positional labels for multiple choice options; only the first four are shown
CHOICE_LETTERS = ("a", "b", "c", "d")

# First characters that read as "True" on a true/false question
TRUE_INPUTS = {"a", "t"}


def first_char(raw: str | None) -> str | None:
    """Lowercased first character of a raw answer, or None when empty."""
    if not raw:
        return None
    return raw[0].lower()


def normalize_answer(raw: str) -> str:
    """Case-fold and trim a short answer for comparison."""
    return raw.lower().strip()


class Question(Protocol):
    """Protocol shared by every question type."""

    question_type: QuestionType
    question_text: str
    points: int

    def render(self, console: Console) -> None:
        """Display the question (and its options, if any)."""
        ...

    def check_answer(self, raw: str | None) -> bool:
        """Return True if the raw answer is correct. Never raises."""
        ...

    def canonical_answer_text(self) -> str:
        """The correct answer as display text."""
        ...

    def short_label(self) -> str:
        """One-line summary used in listings."""
        ...
