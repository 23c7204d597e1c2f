import logging
from typing import List
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from preppulse.crud.exam import exam as crud_exam
from preppulse.crud.question import question as crud_question
from preppulse.models.exam import Exam as ExamModel
from preppulse.models.user import User
from preppulse.schemas.exam import ExamCreate, Exam, ExamSummary, ExamWithQuestions
from preppulse.schemas.question import QuestionPublic

logger = logging.getLogger(__name__)


class ExamService:

    def _get_exam_or_404(self, db: Session, exam_id: int) -> ExamModel:
        exam = crud_exam.get(db, id=exam_id)
        if not exam:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exam not found")
        return exam

    def list_active_exams(self, db: Session) -> List[ExamSummary]:
        rows = crud_exam.get_active_with_question_counts(db)
        return [
            ExamSummary(**Exam.model_validate(exam).model_dump(), question_count=question_count or 0)
            for exam, question_count in rows
        ]

    def get_exam_for_taking(self, db: Session, exam_id: int) -> ExamWithQuestions:
        exam = self._get_exam_or_404(db, exam_id)
        questions = crud_question.get_by_exam(db, exam_id=exam.id)
        # QuestionPublic has no correct_answer or explanation field, so they never leave the server.
        return ExamWithQuestions(
            exam=Exam.model_validate(exam),
            questions=[QuestionPublic.model_validate(q) for q in questions],
        )

    def create_exam(self, db: Session, exam_in: ExamCreate, current_user: User) -> ExamModel:
        new_exam = crud_exam.create(
            db,
            obj_in={**exam_in.model_dump(), "created_by": current_user.id, "is_active": True},
        )
        logger.info(f"Exam {new_exam.id} created by user {current_user.id}")
        return crud_exam.get(db, id=new_exam.id)

    def delete_exam(self, db: Session, exam_id: int, current_user: User) -> ExamModel:
        exam = self._get_exam_or_404(db, exam_id)
        deactivated = crud_exam.deactivate(db, db_obj=exam)
        logger.info(f"Exam {exam_id} deactivated by user {current_user.id}")
        return deactivated


exam_service = ExamService()
