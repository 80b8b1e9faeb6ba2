"""
Interactive quiz management menu.

The operator creates a quiz, adds and deletes questions, views the answer
key and takes the quiz. At most one quiz is held at a time, in
``QuizManager.current_quiz``.
"""
from __future__ import annotations

from loguru import logger
from rich.console import Console
from rich.markup import escape

from quizcli.core.exceptions import QuizError
from quizcli.core.quiz import Quiz
from quizcli.delivery import visuals as ui
from quizcli.delivery.prompts import Prompter
from quizcli.questions import (
    new_multiple_choice,
    new_short_answer,
    new_true_false,
)
from quizcli.questions.base import CHOICE_LETTERS, Question
from quizcli.session import QuizSession


class QuizManager:
    """Menu-driven quiz authoring and administration."""

    def __init__(
        self,
        console: Console | None = None,
        prompter: Prompter | None = None,
        clear_screen: bool = True,
    ):
        self.console = console or Console()
        self.prompter = prompter or Prompter(self.console)
        self.clear_screen = clear_screen
        self.current_quiz: Quiz | None = None

    # ========================================
    # Main loop
    # ========================================

    def run(self) -> None:
        """Show the main menu until the operator exits or input ends."""
        try:
            while self._dispatch_main_menu():
                pass
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed; leaving menu")
        self.console.print("\n[dim]Goodbye![/dim]")

    def _dispatch_main_menu(self) -> bool:
        self._clear()
        ui.screen_header(self.console, "QUIZ MANAGEMENT SYSTEM")
        self.console.print(ui.menu_table(ui.MAIN_MENU))

        choice = self.prompter.ask_int("Choose option", kind="menu")
        actions = {
            1: self.create_quiz,
            2: self.add_questions,
            3: self.delete_question,
            4: self.view_quiz,
            5: self.take_quiz,
            6: self.clear_quiz,
        }
        if choice == 0:
            return False
        action = actions.get(choice)
        if action is None:
            self._notify("[red]Invalid choice![/red]")
        else:
            action()
        return True

    # ========================================
    # Actions
    # ========================================

    def create_quiz(self) -> None:
        self._clear()
        ui.screen_header(self.console, "CREATE NEW QUIZ")
        title = self.prompter.ask_text("Enter quiz title")
        capacity = self.prompter.ask_positive_int("Enter max number of questions")

        self.current_quiz = Quiz(title, capacity)
        logger.info(f"Created quiz '{title}' with capacity {capacity}")
        self._notify("[green]Quiz created![/green]")

    def add_questions(self) -> None:
        if self.current_quiz is None:
            self._notify("[yellow]Create a quiz first![/yellow]")
            return

        while True:
            self._clear()
            ui.screen_header(self.console, "ADD QUESTIONS")
            self.console.print(ui.menu_table(ui.QUESTION_TYPE_MENU))
            kind = self.prompter.ask_int("Choose", kind="menu")
            if kind == 0:
                return
            if kind not in (1, 2, 3):
                self._notify("[red]Invalid choice![/red]")
                continue

            text = self.prompter.ask_text("Enter question text")
            points = self.prompter.ask_positive_int("Enter points")

            try:
                question = self._build_question(kind, text, points)
            except QuizError as e:
                self.console.print(f"[red]Could not create question:[/red] {e}")
            else:
                if self.current_quiz.append(question):
                    self.console.print("[green]Question added![/green]")
                else:
                    self.console.print(
                        f"[red]Quiz is full![/red] ({self.current_quiz.capacity} questions max)"
                    )

            another = self.prompter.ask_int("Add another? (1 yes, 0 no)")
            if another == 0:
                return

    def delete_question(self) -> None:
        if self.current_quiz is None or self.current_quiz.count() == 0:
            self._notify("[yellow]No questions to delete![/yellow]")
            return

        self._clear()
        ui.question_list(self.console, self.current_quiz)

        number = self.prompter.ask_int("Delete question number (0 cancel)")
        if number == 0:
            return
        if self.current_quiz.remove_at(number - 1):
            self._notify("[green]Question deleted![/green]")
        else:
            self._notify("[red]Invalid question![/red]")

    def view_quiz(self) -> None:
        if self.current_quiz is None:
            self._notify("[yellow]No quiz created yet![/yellow]")
            return

        quiz = self.current_quiz
        self._clear()
        ui.screen_header(self.console, f"QUIZ: {quiz.title}")
        for number, question in enumerate(quiz.snapshot(), start=1):
            ui.question_heading(self.console, number)
            question.render(self.console)
            self.console.print(f"[dim]Correct answer:[/dim] {escape(question.canonical_answer_text())}")

        self.console.print(f"\n[bold]{quiz.count()}/{quiz.capacity} questions[/bold]")
        ui.points_footer(self.console, quiz)
        self._notify("")

    def take_quiz(self) -> None:
        if self.current_quiz is None or self.current_quiz.count() == 0:
            self._notify("[yellow]No quiz available![/yellow]")
            return

        self._clear()
        QuizSession(self.current_quiz, self.console, self.prompter).run()
        self._notify("")

    def clear_quiz(self) -> None:
        self.current_quiz = None
        logger.info("Cleared current quiz")
        self._notify("[green]Quiz cleared![/green]")

    # ========================================
    # Question builders
    # ========================================

    def _build_question(self, kind: int, text: str, points: int) -> Question:
        if kind == 1:
            return self._build_multiple_choice(text, points)
        if kind == 2:
            return self._build_true_false(text, points)
        return self._build_short_answer(text, points)

    def _build_multiple_choice(self, text: str, points: int) -> Question:
        choices = [self.prompter.ask_text(f"Enter choice {letter}") for letter in CHOICE_LETTERS]
        correct = self.prompter.ask_choice("Correct answer", CHOICE_LETTERS)
        return new_multiple_choice(text, choices, correct, points)

    def _build_true_false(self, text: str, points: int) -> Question:
        answer = self.prompter.ask_choice("Correct answer", ("t", "f"))
        return new_true_false(text, answer == "t", points)

    def _build_short_answer(self, text: str, points: int) -> Question:
        correct = self.prompter.ask_text("Correct answer")
        alternatives = self.prompter.ask_text("Alternative answers (comma separated, optional)")
        if not alternatives.strip():
            return new_short_answer(text, correct, points)
        acceptable = [alt.strip() for alt in alternatives.split(",") if alt.strip()]
        return new_short_answer(text, correct, points, acceptable=acceptable)

    # ========================================
    # Helpers
    # ========================================

    def _clear(self) -> None:
        if self.clear_screen:
            self.console.clear()

    def _notify(self, message: str) -> None:
        if message:
            self.console.print(message)
        self.prompter.pause()
