"""
Take-quiz flow: the authoritative scoring path.

Each answer is graded with the question's own check_answer(); the points of
correctly answered questions add up to the session score. This is separate
from ``Quiz.achieved_score()``, which sums every question regardless of
answers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger
from rich.console import Console
from rich.markup import escape

from quizcli.core.quiz import Quiz
from quizcli.delivery import visuals as ui
from quizcli.delivery.prompts import Prompter
from quizcli.questions import QuestionType
from quizcli.questions.base import CHOICE_LETTERS, Question


@dataclass
class AnswerResult:
    """Outcome of one question in a session."""
    number: int  # 1-based position in the quiz
    correct: bool
    user_answer: str | None
    correct_answer: str
    points_awarded: int = 0


@dataclass
class SessionResult:
    """Outcome of a full take-quiz pass."""
    results: list[AnswerResult] = field(default_factory=list)
    score: int = 0
    total_possible: int = 0

    @property
    def wrong_questions(self) -> list[int]:
        return [r.number for r in self.results if not r.correct]

    @property
    def answered(self) -> int:
        return len(self.results)

    @property
    def percentage(self) -> float:
        if self.total_possible == 0:
            return 0.0
        return 100.0 * self.score / self.total_possible

    def summary(self) -> str:
        return f"{self.score}/{self.total_possible}"


def grade_question(number: int, question: Question, answer: str | None) -> AnswerResult:
    """Grade a single answer."""
    correct = question.check_answer(answer)
    return AnswerResult(
        number=number,
        correct=correct,
        user_answer=answer,
        correct_answer=question.canonical_answer_text(),
        points_awarded=question.points if correct else 0,
    )


def grade_answers(quiz: Quiz, answers: Sequence[str | None]) -> SessionResult:
    """
    Grade one answer per question, in quiz order.

    Questions without a matching answer (a short ``answers`` list) are
    graded as unanswered, which is incorrect.
    """
    result = SessionResult(total_possible=quiz.total_possible_points())
    for index, question in enumerate(quiz.snapshot()):
        answer = answers[index] if index < len(answers) else None
        outcome = grade_question(index + 1, question, answer)
        result.results.append(outcome)
        result.score += outcome.points_awarded

    logger.debug(f"Graded '{quiz.title}': {result.summary()}, wrong={result.wrong_questions}")
    return result


class QuizSession:
    """
    Interactive pass over a quiz.

    Presents each question, collects an answer through the prompter and
    reports correctness immediately, then shows the results panel.
    """

    def __init__(self, quiz: Quiz, console: Console, prompter: Prompter):
        self.quiz = quiz
        self.console = console
        self.prompter = prompter

    def run(self) -> SessionResult:
        result = SessionResult(total_possible=self.quiz.total_possible_points())

        for number, question in enumerate(self.quiz.snapshot(), start=1):
            ui.question_heading(self.console, number)
            question.render(self.console)

            answer = self._ask(question)
            outcome = grade_question(number, question, answer)
            result.results.append(outcome)
            result.score += outcome.points_awarded

            if outcome.correct:
                self.console.print(f"[bold green]Correct![/bold green] +{question.points} points")
            else:
                self.console.print(
                    f"[bold red]Incorrect![/bold red] Correct answer: [bold]{escape(outcome.correct_answer)}[/bold]"
                )

        logger.info(f"Session finished for '{self.quiz.title}': {result.summary()}")
        self.console.print()
        ui.results_panel(self.console, result)
        return result

    def _ask(self, question: Question) -> str:
        kind = question.question_type.value
        if question.question_type is QuestionType.MULTIPLE_CHOICE:
            return self.prompter.ask_choice("Your answer", CHOICE_LETTERS, kind=kind)
        if question.question_type is QuestionType.TRUE_FALSE:
            return self.prompter.ask_choice("Your answer", ("t", "f"), kind=kind)
        return self.prompter.ask_text("Your answer", kind=kind)
