import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from preppulse.core.constants import DEFAULT_QUESTION_POINTS
from preppulse.crud.exam import exam as crud_exam
from preppulse.crud.exam_attempt import exam_attempt as crud_exam_attempt
from preppulse.crud.question import question as crud_question
from preppulse.models.question import Question
from preppulse.models.user import User
from preppulse.schemas.exam_attempt import (
    ExamAttemptHistoryItem, ExamAttemptResult, ExamSubmission, ExamSubmissionResult, QuestionResponse
)
from preppulse.utils.permission import PermissionHelper as permission_helper

logger = logging.getLogger(__name__)


@dataclass
class GradedSubmission:
    total_points: int = 0
    earned_points: int = 0
    correct_answers: int = 0
    responses: List[dict] = field(default_factory=list)

    @property
    def total_questions(self) -> int:
        return len(self.responses)

    @property
    def score(self) -> int:
        return score_percentage(self.earned_points, self.total_points)


def score_percentage(earned_points: int, total_points: int) -> int:
    """Percentage rounded half up, so 12.5 becomes 13 rather than banker's 12."""
    if total_points <= 0:
        raise ValueError("total_points must be positive")
    return (200 * earned_points + total_points) // (2 * total_points)


def grade_answers(questions: Iterable[Question], answers: Dict[str, Optional[str]]) -> GradedSubmission:
    """Grade every question of the exam; unanswered questions count as wrong."""
    graded = GradedSubmission()
    for question in questions:
        points = DEFAULT_QUESTION_POINTS if question.points is None else question.points
        graded.total_points += points

        user_answer = answers.get(str(question.id))
        is_correct = user_answer is not None and user_answer == question.correct_answer
        if is_correct:
            graded.correct_answers += 1
            graded.earned_points += points

        graded.responses.append({
            "question_id": question.id,
            "user_answer": user_answer or None,
            "is_correct": is_correct,
        })
    return graded


class ExamAttemptService:

    def _require_submitter_matches(self, current_user: User, submission: ExamSubmission):
        if submission.user_id is not None and submission.user_id != current_user.id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only submit exams for yourself."
            )

    def submit_exam(self, db: Session, exam_id: int, submission: ExamSubmission, current_user: User) -> ExamSubmissionResult:
        self._require_submitter_matches(current_user, submission)

        exam = crud_exam.get(db, id=exam_id)
        if not exam:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exam not found")

        questions = crud_question.get_by_exam(db, exam_id=exam.id)
        graded = grade_answers(questions, submission.answers)

        if graded.total_points <= 0:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Exam has no gradable questions"
            )

        score = graded.score
        passed = score >= exam.passing_score
        completed_at = datetime.utcnow()

        try:
            attempt = crud_exam_attempt.create_with_responses(
                db,
                obj_in={
                    "user_id": current_user.id,
                    "exam_id": exam.id,
                    "score": score,
                    "total_questions": graded.total_questions,
                    "correct_answers": graded.correct_answers,
                    "time_spent": submission.time_spent,
                    "passed": passed,
                    "answers": submission.answers,
                    "started_at": completed_at - timedelta(seconds=submission.time_spent),
                    "completed_at": completed_at,
                },
                responses=graded.responses,
            )
            attempt_id = attempt.id
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(f"Submit exam failed for exam {exam_id}, user {current_user.id}: {exc}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={"message": "Failed to submit exam", "error": type(exc).__name__}
            )

        logger.info(
            f"Attempt {attempt_id} graded: exam={exam.id} user={current_user.id} "
            f"score={score} correct={graded.correct_answers}/{graded.total_questions} passed={passed}"
        )

        return ExamSubmissionResult(
            attempt_id=attempt_id,
            score=score,
            correct_answers=graded.correct_answers,
            total_questions=graded.total_questions,
            passed=passed,
            time_spent=submission.time_spent,
        )

    def get_result(self, db: Session, exam_id: int, attempt_id: Optional[int], current_user: User) -> ExamAttemptResult:
        if attempt_id is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Attempt ID is required")

        attempt = crud_exam_attempt.get(db, id=attempt_id)
        if not attempt or attempt.exam_id != exam_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Results not found")

        permission_helper.require_owner_or_admin(
            current_user, attempt.user_id, detail="You can only view your own results."
        )

        exam = attempt.exam
        return ExamAttemptResult(
            attempt_id=attempt.id,
            exam_id=exam.id,
            score=attempt.score,
            correct_answers=attempt.correct_answers,
            total_questions=attempt.total_questions,
            time_spent=attempt.time_spent,
            passed=attempt.passed,
            passing_score=exam.passing_score,
            exam_title=exam.title,
            subject=exam.subject,
            completed_at=attempt.completed_at,
            responses=[QuestionResponse.model_validate(r) for r in attempt.responses],
        )

    def get_user_attempts(self, db: Session, user_id: Optional[int], current_user: User) -> List[ExamAttemptHistoryItem]:
        target_user_id = permission_helper.resolve_target_user_id(current_user, user_id)
        attempts = crud_exam_attempt.get_all_by_user(db, user_id=target_user_id)
        return [
            ExamAttemptHistoryItem(
                id=a.id,
                exam_id=a.exam_id,
                score=a.score,
                total_questions=a.total_questions,
                correct_answers=a.correct_answers,
                time_spent=a.time_spent,
                passed=a.passed,
                started_at=a.started_at,
                completed_at=a.completed_at,
                exam_title=a.exam.title,
                exam_description=a.exam.description,
                passing_score=a.exam.passing_score,
            )
            for a in attempts
        ]


exam_attempt_service = ExamAttemptService()
