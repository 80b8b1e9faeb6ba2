"""
Exceptions raised by the quiz core.

Only construction can fail. Answer checking and the bounded container
operations report failure through booleans and ``None`` instead.
"""


class QuizError(Exception):
    """Base class for quiz construction errors."""
    pass


class InvalidCapacityError(QuizError, ValueError):
    """Raised when a quiz is created with a non-positive capacity."""
    pass


class InvalidQuestionError(QuizError, ValueError):
    """Raised when a question cannot be built from the supplied fields."""
    pass
