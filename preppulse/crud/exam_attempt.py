from datetime import datetime
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from preppulse.crud.base import CRUDBase
from preppulse.models.exam_attempt import ExamAttempt
from preppulse.models.question_response import QuestionResponse

class CRUDExamAttempt(CRUDBase[ExamAttempt, ExamAttempt, ExamAttempt]):

    def _query_with_relationships(self, db: Session):
        return db.query(ExamAttempt).options(
            selectinload(ExamAttempt.exam),
            selectinload(ExamAttempt.responses),
        )

    def get(self, db: Session, id: int) -> Optional[ExamAttempt]:
        return self._query_with_relationships(db).filter(ExamAttempt.id == id).first()

    def create_with_responses(self, db: Session, *, obj_in: dict, responses: List[dict]) -> ExamAttempt:
        """Stage an attempt and its responses on the session. The caller owns the commit."""
        attempt = ExamAttempt(**obj_in)
        db.add(attempt)
        db.flush()  # Populate ID
        db.add_all(QuestionResponse(attempt_id=attempt.id, **response) for response in responses)
        db.flush()
        return attempt

    def get_all_by_user(self, db: Session, user_id: int, limit: Optional[int] = None) -> List[ExamAttempt]:
        query = (
            self._query_with_relationships(db)
            .filter(ExamAttempt.user_id == user_id)
            .order_by(ExamAttempt.completed_at.desc(), ExamAttempt.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_user_totals(self, db: Session, user_id: int):
        return (
            db.query(
                func.count(ExamAttempt.id).label("total_attempts"),
                func.sum(ExamAttempt.correct_answers).label("total_correct"),
                func.sum(ExamAttempt.total_questions).label("total_questions"),
                func.max(ExamAttempt.score).label("best_score"),
                func.avg(ExamAttempt.score).label("avg_score"),
                func.sum(ExamAttempt.time_spent).label("total_time_seconds"),
            )
            .filter(ExamAttempt.user_id == user_id)
            .one()
        )

    def count_active_days_since(self, db: Session, user_id: int, since: datetime) -> int:
        return (
            db.query(func.count(func.distinct(func.date(ExamAttempt.completed_at))))
            .filter(ExamAttempt.user_id == user_id)
            .filter(ExamAttempt.completed_at >= since)
            .scalar()
        ) or 0

    def count_distinct_users_since(self, db: Session, since: datetime) -> int:
        return (
            db.query(func.count(func.distinct(ExamAttempt.user_id)))
            .filter(ExamAttempt.completed_at >= since)
            .scalar()
        ) or 0

exam_attempt = CRUDExamAttempt(ExamAttempt)
