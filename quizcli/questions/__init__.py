"""
Question types for quiz-cli.

Each question type (multiple choice, true/false, short answer) has its own
module with:
- render(): Display the question to the operator
- check_answer(): Grade a raw textual answer (fails closed)
- canonical_answer_text(): Report the correct answer for display
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum


class QuestionType(str, Enum):
    """Supported question types."""
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    SHORT_ANSWER = "short_answer"


def register(question_type: QuestionType):
    """Decorator to tag a question class with its type."""
    def decorator(cls):
        cls.question_type = question_type
        return cls
    return decorator


from .base import Question  # noqa: E402

# Import question modules so each class is tagged with its type
from . import multiple_choice  # noqa: E402
from . import true_false  # noqa: E402
from . import short_answer  # noqa: E402

from .multiple_choice import MultipleChoiceQuestion  # noqa: E402
from .short_answer import ShortAnswerQuestion  # noqa: E402
from .true_false import TrueFalseQuestion  # noqa: E402


# =============================================================================
# Factories
# =============================================================================


def new_multiple_choice(
    text: str,
    choices: Sequence[str],
    correct_letter: str,
    points: int,
) -> MultipleChoiceQuestion:
    """Build a multiple choice question. Raises InvalidQuestionError on a bad letter."""
    return MultipleChoiceQuestion(text, list(choices), correct_letter, points)


def new_true_false(text: str, correct: bool, points: int) -> TrueFalseQuestion:
    """Build a true/false question."""
    return TrueFalseQuestion(text, correct, points)


def new_short_answer(
    text: str,
    correct: str,
    points: int,
    acceptable: Iterable[str] | None = None,
) -> ShortAnswerQuestion:
    """
    Build a short answer question.

    Without ``acceptable`` only the canonical answer is accepted. With it,
    each entry is accepted as well (case-insensitively).
    A single string counts as one entry.
    """
    if acceptable is None:
        return ShortAnswerQuestion(text, correct, points)
    if isinstance(acceptable, str):
        acceptable = [acceptable]
    return ShortAnswerQuestion(text, correct, points, acceptable_answers=set(acceptable))


__all__ = [
    "QuestionType",
    "Question",
    "MultipleChoiceQuestion",
    "TrueFalseQuestion",
    "ShortAnswerQuestion",
    "register",
    "new_multiple_choice",
    "new_true_false",
    "new_short_answer",
]

