"""
Tests for answer scoring.
"""

import pytest

from backend.mathlogic.table import (
    ScoringSummary,
    TruthTable,
    check_answers,
    generate_table,
)


@pytest.fixture
def conjunction_table():
    """Truth table of (p∧q): results T, F, F, F."""
    return generate_table("(p∧q)")


class TestCheckAnswers:
    """Tests for check_answers."""

    def test_partial_submission(self, conjunction_table):
        summary = check_answers(conjunction_table, {0: True, 1: True})
        assert summary.correct == 1
        assert summary.answered == 2
        assert summary.total == 4
        assert summary.is_complete is False
        assert summary.score == 25.0
        assert summary.score_display == "25.0"

    def test_all_correct(self, conjunction_table):
        answers = {0: True, 1: False, 2: False, 3: False}
        summary = check_answers(conjunction_table, answers)
        assert summary.correct == 4
        assert summary.is_complete is True
        assert summary.is_perfect is True
        assert summary.score_display == "100.0"

    def test_no_answers(self, conjunction_table):
        summary = check_answers(conjunction_table, {})
        assert summary.answered == 0
        assert summary.score == 0
        assert summary.unanswered == 4

    def test_per_row_results(self, conjunction_table):
        summary = check_answers(conjunction_table, {1: True})
        first, second = summary.results[0], summary.results[1]
        assert first.user_answer is None
        assert first.correct_answer is True
        assert first.is_correct is False
        assert second.user_answer is True
        assert second.correct_answer is False
        assert second.is_correct is False

    def test_statistics(self, conjunction_table):
        summary = check_answers(conjunction_table, {0: True, 1: True, 2: False})
        assert summary.correct == 2
        assert summary.incorrect == 1
        assert summary.unanswered == 1

    def test_rounding(self):
        table = generate_table("p∨q∨r")
        summary = check_answers(table, {0: True})
        assert summary.score == 12.5
        summary = check_answers(generate_table("p"), {0: True})
        assert summary.score_display == "50.0"

    def test_halves_round_up_on_sixteen_rows(self):
        """Test that exact halves round away from zero like toFixed."""
        table = generate_table("p∧q∧r∧s")
        assert len(table) == 16
        summary = check_answers(table, {0: True})
        assert summary.score == 6.3
        assert summary.score_display == "6.3"

        answers = {i: table.rows[i].result for i in range(5)}
        summary = check_answers(table, answers)
        assert summary.correct == 5
        assert summary.score_display == "31.3"

    def test_exact_scores_unchanged(self):
        table = generate_table("p")
        summary = check_answers(table, {0: True}, precision=1)
        assert summary.score_display == "50.0"
        summary = check_answers(generate_table("p∧q"), {0: True, 1: False, 2: False})
        assert summary.score_display == "75.0"

    def test_precision(self):
        table = generate_table("p∧q∧r")
        summary = check_answers(table, {0: True}, precision=2)
        assert summary.score_display == "12.50"

    @pytest.mark.parametrize("value", [1, 0, "true", None])
    def test_non_bool_answers_ignored(self, conjunction_table, value):
        summary = check_answers(conjunction_table, {0: value})
        assert summary.answered == 0
        assert summary.correct == 0
        assert summary.results[0].user_answer is None

    def test_out_of_range_answers_ignored(self, conjunction_table):
        summary = check_answers(conjunction_table, {7: True, -1: False})
        assert summary.answered == 0

    def test_does_not_mutate_table(self, conjunction_table):
        check_answers(conjunction_table, {0: False, 1: True})
        assert all(row.user_answer is None for row in conjunction_table.rows)

    def test_repeatable(self, conjunction_table):
        answers = {0: True, 3: True}
        first = check_answers(conjunction_table, answers)
        second = check_answers(conjunction_table, answers)
        assert first.to_dict() == second.to_dict()

    @pytest.mark.parametrize("answers", [{}, {0: True}, {0: False, 1: False, 2: True, 3: False}])
    def test_count_invariant(self, conjunction_table, answers):
        summary = check_answers(conjunction_table, answers)
        assert summary.correct <= summary.answered <= summary.total

    def test_empty_table_scores_zero(self):
        summary = check_answers(TruthTable("", (), ()), {})
        assert summary.total == 0
        assert summary.score == 0

    def test_missing_table(self):
        summary = check_answers(None, {0: True})
        assert summary.total == 0
        assert summary.score == 0


class TestScoringSummary:
    """Tests for ScoringSummary."""

    def test_to_dict(self, conjunction_table):
        data = check_answers(conjunction_table, {0: True, 1: True}).to_dict()
        assert data["score"] == "25.0"
        assert data["incorrect"] == 1
        assert len(data["results"]) == 4
        assert data["results"][0]["is_correct"] is True

    def test_not_perfect_when_empty(self):
        assert ScoringSummary().is_perfect is False
