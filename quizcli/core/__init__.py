"""
Core Module - quiz container, scoring and errors.

Components:
- quiz: Capacity-bounded Quiz container with point aggregation
- exceptions: Construction errors (QuizError and subclasses)
"""

from quizcli.core.exceptions import InvalidCapacityError, InvalidQuestionError, QuizError
from quizcli.core.quiz import Quiz, Scorable

__all__ = [
    "Quiz",
    "Scorable",
    "QuizError",
    "InvalidCapacityError",
    "InvalidQuestionError",
]
