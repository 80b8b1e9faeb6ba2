"""
Unit tests for quiz question types.

Tests check_answer(), canonical_answer_text() and render() of each type.
"""

import pytest

from quizcli.core.exceptions import InvalidQuestionError
from quizcli.questions import (
    MultipleChoiceQuestion,
    QuestionType,
    ShortAnswerQuestion,
    TrueFalseQuestion,
    new_multiple_choice,
    new_short_answer,
    new_true_false,
)


class TestQuestionTypes:
    """Test the type tag stamped by @register."""

    def test_each_class_is_tagged(self):
        assert MultipleChoiceQuestion.question_type is QuestionType.MULTIPLE_CHOICE
        assert TrueFalseQuestion.question_type is QuestionType.TRUE_FALSE
        assert ShortAnswerQuestion.question_type is QuestionType.SHORT_ANSWER

    def test_type_values(self):
        assert [t.value for t in QuestionType] == ["multiple_choice", "true_false", "short_answer"]

    def test_instances_carry_their_type(self, capital_question, sky_question, cat_question):
        assert capital_question.question_type is QuestionType.MULTIPLE_CHOICE
        assert sky_question.question_type is QuestionType.TRUE_FALSE
        assert cat_question.question_type is QuestionType.SHORT_ANSWER


class TestMultipleChoiceQuestion:
    """Test multiple choice grading."""

    @pytest.fixture
    def question(self):
        return new_multiple_choice("Which layer routes packets?", ["Data link", "Network", "Transport"], "B", 4)

    def test_stores_letter_lowercased(self, question):
        assert question.correct_answer == "b"
        assert question.canonical_answer_text() == "b"

    @pytest.mark.parametrize("answer", ["b", "B", "Bxyz", "b) Network"])
    def test_first_letter_decides(self, question, answer):
        assert question.check_answer(answer) is True

    @pytest.mark.parametrize("answer", ["a", "c", "network", " b"])
    def test_wrong_first_letter(self, question, answer):
        assert question.check_answer(answer) is False

    def test_empty_and_missing_answers_fail_closed(self, question):
        assert question.check_answer("") is False
        assert question.check_answer(None) is False

    def test_choices_are_copied(self):
        choices = ["yes", "no"]
        question = new_multiple_choice("Ready?", choices, "a", 1)
        choices.append("maybe")

        assert question.choices == ["yes", "no"]

    def test_rejects_letter_beyond_supplied_choices(self):
        with pytest.raises(InvalidQuestionError):
            new_multiple_choice("Pick one", ["first", "second"], "d", 1)

    @pytest.mark.parametrize("letter", ["e", "", "ab", "1"])
    def test_rejects_non_positional_letters(self, letter):
        with pytest.raises(InvalidQuestionError):
            new_multiple_choice("Pick one", ["w", "x", "y", "z"], letter, 1)

    def test_invalid_question_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            new_multiple_choice("Pick one", [], "a", 1)

    def test_render_lists_lettered_choices(self, question, console, output):
        question.render(console)
        text = output()

        assert "Which layer routes packets?" in text
        assert "a: Data link" in text
        assert "b: Network" in text
        assert "c: Transport" in text
        assert "d:" not in text

    def test_render_shows_at_most_four_choices(self, console, output):
        question = new_multiple_choice("Pick", ["one", "two", "three", "four", "five"], "d", 1)
        question.render(console)
        text = output()

        assert "d: four" in text
        assert "five" not in text

    def test_points_and_text_are_mutable(self, question):
        question.points = 7
        question.question_text = "Which OSI layer routes packets?"

        assert question.short_label() == "Which OSI layer routes packets? (7)"


class TestTrueFalseQuestion:
    """Test true/false grading."""

    @pytest.fixture
    def true_question(self):
        return new_true_false("Water boils at 100C at sea level.", True, 2)

    @pytest.fixture
    def false_question(self):
        return new_true_false("The moon is a planet.", False, 2)

    @pytest.mark.parametrize("answer", ["t", "T", "true", "a", "A"])
    def test_true_inputs_on_true_question(self, true_question, answer):
        assert true_question.check_answer(answer) is True

    @pytest.mark.parametrize("answer", ["f", "false", "b", "no"])
    def test_false_inputs_on_true_question(self, true_question, answer):
        assert true_question.check_answer(answer) is False

    def test_anything_else_reads_as_false(self, false_question):
        assert false_question.check_answer("f") is True
        assert false_question.check_answer("nope") is True
        assert false_question.check_answer("t") is False

    def test_empty_and_missing_answers_fail_closed(self, true_question, false_question):
        assert true_question.check_answer("") is False
        assert true_question.check_answer(None) is False
        assert false_question.check_answer("") is False
        assert false_question.check_answer(None) is False

    def test_canonical_answer_text(self, true_question, false_question):
        assert true_question.canonical_answer_text() == "True"
        assert false_question.canonical_answer_text() == "False"

    def test_render_shows_fixed_options(self, true_question, console, output):
        true_question.render(console)
        text = output()

        assert "Water boils at 100C at sea level." in text
        assert "a: True" in text
        assert "b: False" in text


class TestShortAnswerQuestion:
    """Test short answer grading."""

    @pytest.fixture
    def paris(self):
        return new_short_answer("Capital of France?", "Paris", 5)

    def test_canonical_answer_is_lowercased(self, paris):
        assert paris.correct_answer == "paris"
        assert paris.canonical_answer_text() == "paris"

    def test_default_accepts_only_canonical(self, paris):
        assert paris.acceptable_answers == {"paris"}

    @pytest.mark.parametrize("answer", ["paris", "Paris", "  PARIS  ", "\tparis\n"])
    def test_case_and_surrounding_whitespace_ignored(self, paris, answer):
        assert paris.check_answer(answer) is True

    @pytest.mark.parametrize("answer", ["pari", "paris france", "p aris"])
    def test_near_misses_are_wrong(self, paris, answer):
        assert paris.check_answer(answer) is False

    def test_empty_and_missing_answers_fail_closed(self, paris):
        assert paris.check_answer("") is False
        assert paris.check_answer(None) is False
        assert paris.check_answer("   ") is False

    def test_alternatives_are_accepted(self, cat_question):
        assert cat_question.check_answer("Kitty") is True
        assert cat_question.check_answer("FELINE") is True

    def test_canonical_kept_alongside_alternatives(self, cat_question):
        assert cat_question.acceptable_answers == {"cat", "feline", "kitty"}
        assert cat_question.check_answer("cat") is True
        assert cat_question.check_answer("dog") is False

    def test_stored_alternatives_are_not_trimmed(self):
        question = new_short_answer("Padded?", "x", 1, acceptable=[" spaced "])

        assert " spaced " in question.acceptable_answers
        assert question.check_answer(" spaced ") is False

    def test_render_shows_prompt_only(self, paris, console, output):
        paris.render(console)
        text = output()

        assert "Capital of France?" in text
        assert "a:" not in text
        assert "paris" not in text

    def test_single_string_alternative_is_one_entry(self):
        question = new_short_answer("Pet?", "cat", 1, acceptable="kitty")

        assert question.acceptable_answers == {"cat", "kitty"}
        assert question.check_answer("kitty") is True
        for letter in ("k", "i", "t", "y"):
            assert question.check_answer(letter) is False

    def test_direct_construction_with_string_alternative(self):
        question = ShortAnswerQuestion("Pet?", "cat", 1, acceptable_answers="Kitty")

        assert question.acceptable_answers == {"cat", "kitty"}
        assert question.check_answer("k") is False
