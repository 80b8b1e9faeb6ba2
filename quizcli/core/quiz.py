"""
Quiz container and score aggregation.

A Quiz is an ordered, capacity-bounded list of questions plus a title.
Bounded operations never raise: append past capacity, and remove/get out
of range, report failure with False/None and leave the quiz unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from loguru import logger

from quizcli.core.exceptions import InvalidCapacityError

if TYPE_CHECKING:
    from quizcli.questions.base import Question


@runtime_checkable
class Scorable(Protocol):
    """Point aggregation over a set of questions."""

    def achieved_score(self) -> int:
        ...

    def total_possible_points(self) -> int:
        ...


class Quiz(Scorable):
    """
    Ordered collection of questions with a fixed capacity.

    Positions are 0-based here; the menu shows them 1-based.
    """

    def __init__(self, title: str, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(f"Quiz capacity must be a positive integer, got {capacity!r}")
        self.title = title
        self._capacity = capacity
        self._questions: list[Question] = []

    def __repr__(self) -> str:
        return f"Quiz(title={self.title!r}, count={len(self._questions)}, capacity={self._capacity})"

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.snapshot())

    @property
    def capacity(self) -> int:
        return self._capacity

    # ========================================
    # Mutators
    # ========================================

    def append(self, question: Question) -> bool:
        """Add a question at the end. Returns False if the quiz is full."""
        if self.is_full():
            logger.debug(f"Quiz '{self.title}' is full ({self._capacity}); question rejected")
            return False
        self._questions.append(question)
        logger.debug(f"Added question {len(self._questions)}/{self._capacity} to '{self.title}'")
        return True

    def remove_at(self, index: int) -> bool:
        """Remove the question at a 0-based position, shifting later ones down."""
        if not 0 <= index < len(self._questions):
            logger.debug(f"Remove at {index} ignored; quiz has {len(self._questions)} questions")
            return False
        del self._questions[index]
        logger.debug(f"Removed question at {index} from '{self.title}'")
        return True

    # ========================================
    # Readers
    # ========================================

    def get(self, index: int) -> Question | None:
        """Question at a 0-based position, or None when out of range."""
        if not 0 <= index < len(self._questions):
            return None
        return self._questions[index]

    def snapshot(self) -> list[Question]:
        """Copy of the questions in their current order."""
        return list(self._questions)

    def count(self) -> int:
        return len(self._questions)

    def is_full(self) -> bool:
        return len(self._questions) >= self._capacity

    # ========================================
    # Scoring
    # ========================================

    def achieved_score(self) -> int:
        """
        Sum of the point values of every question in the quiz.

        This does not look at any answers. The score for a particular
        attempt is computed by ``quizcli.session.grade_answers``.
        """
        return sum(question.points for question in self._questions)

    def total_possible_points(self) -> int:
        """Maximum score obtainable; the denominator of a score display."""
        return sum(question.points for question in self._questions)
