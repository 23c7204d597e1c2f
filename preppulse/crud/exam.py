from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from sqlalchemy import func

from preppulse.crud.base import CRUDBase
from preppulse.models.exam import Exam
from preppulse.models.question import Question
from preppulse.schemas.exam import ExamCreate


class CRUDExam(CRUDBase[Exam, ExamCreate, ExamCreate]):

    def _query_with_relationships(self, db: Session):
        return db.query(Exam).options(selectinload(Exam.creator))

    def get(self, db: Session, id: int) -> Optional[Exam]:
        return self._query_with_relationships(db).filter(Exam.id == id).first()

    def get_active_with_question_counts(self, db: Session):
        """Active exams, newest first, paired with the number of attached questions."""
        question_count = (
            db.query(func.count(Question.id))
            .filter(Question.exam_id == Exam.id)
            .correlate(Exam)
            .scalar_subquery()
        )
        return (
            self._query_with_relationships(db)
            .add_columns(question_count.label("question_count"))
            .filter(Exam.is_active.is_(True))
            .order_by(Exam.created_at.desc(), Exam.id.desc())
            .all()
        )

    def count_active(self, db: Session) -> int:
        return db.query(Exam).filter(Exam.is_active.is_(True)).count()

    def get_recent_with_question_counts(self, db: Session, *, limit: int = 10) -> List:
        return (
            db.query(
                Exam.id,
                Exam.title,
                Exam.subject,
                Exam.difficulty,
                Exam.created_at,
                Exam.is_active,
                func.count(Question.id).label("question_count"),
            )
            .outerjoin(Question, Question.exam_id == Exam.id)
            .group_by(Exam.id, Exam.title, Exam.subject, Exam.difficulty, Exam.created_at, Exam.is_active)
            .order_by(Exam.created_at.desc(), Exam.id.desc())
            .limit(limit)
            .all()
        )

    def deactivate(self, db: Session, *, db_obj: Exam) -> Exam:
        return self.update(db, db_obj=db_obj, obj_in={"is_active": False})

exam = CRUDExam(Exam)
