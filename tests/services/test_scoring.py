import pytest
from types import SimpleNamespace

from preppulse.services.exam_attempt import grade_answers, score_percentage


def _question(id, correct_answer, points=1):
    return SimpleNamespace(id=id, correct_answer=correct_answer, points=points)


class TestScorePercentage:
    def test_full_and_empty(self):
        assert score_percentage(10, 10) == 100
        assert score_percentage(0, 10) == 0

    def test_rounds_half_up(self):
        assert score_percentage(1, 8) == 13  # 12.5
        assert score_percentage(1, 3) == 33
        assert score_percentage(2, 3) == 67

    def test_zero_total_is_rejected(self):
        with pytest.raises(ValueError):
            score_percentage(0, 0)


class TestGradeAnswers:
    def test_counts_exact_matches(self):
        questions = [_question(1, "A"), _question(2, "B")]
        graded = grade_answers(questions, {"1": "A", "2": "C"})

        assert graded.correct_answers == 1
        assert graded.total_questions == 2
        assert graded.earned_points == 1
        assert graded.total_points == 2
        assert graded.score == 50

    def test_comparison_is_case_sensitive(self):
        graded = grade_answers([_question(1, "A")], {"1": "a"})
        assert graded.correct_answers == 0
        assert graded.responses[0]["is_correct"] is False

    def test_unanswered_questions_are_wrong_and_recorded(self):
        graded = grade_answers([_question(1, "A"), _question(2, "D")], {"1": "A"})

        assert [r["question_id"] for r in graded.responses] == [1, 2]
        assert graded.responses[1] == {"question_id": 2, "user_answer": None, "is_correct": False}

    def test_missing_points_default_to_one(self):
        graded = grade_answers([_question(1, "A", points=None), _question(2, "B", points=3)], {"1": "A"})
        assert graded.total_points == 4
        assert graded.earned_points == 1
        assert graded.score == 25

    def test_zero_point_question_counts_as_correct_but_earns_nothing(self):
        graded = grade_answers([_question(1, "A", points=0), _question(2, "B", points=2)], {"1": "A"})
        assert graded.correct_answers == 1
        assert graded.earned_points == 0
        assert graded.score == 0

    def test_answers_for_other_questions_are_ignored(self):
        graded = grade_answers([_question(5, "C")], {"5": "C", "999": "A"})
        assert graded.total_questions == 1
        assert graded.score == 100
