from datetime import datetime
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from preppulse.crud.base import CRUDBase
from preppulse.models.question import Question
from preppulse.schemas.question import QuestionCreate, QuestionUpdate

class CRUDQuestion(CRUDBase[Question, QuestionCreate, QuestionUpdate]):
    def get_by_exam(self, db: Session, *, exam_id: int) -> List[Question]:
        return (
            db.query(self.model)
            .filter(self.model.exam_id == exam_id)
            .order_by(self.model.id)
            .all()
        )

    def get_filtered(
        self,
        db: Session,
        *,
        subject: Optional[str] = None,
        topic: Optional[str] = None,
        difficulty: Optional[str] = None,
    ) -> List[Question]:
        query = db.query(self.model)
        if subject:
            query = query.filter(self.model.subject == subject)
        if topic:
            query = query.filter(self.model.topic.like(f"%{topic}%"))
        if difficulty:
            query = query.filter(self.model.difficulty == difficulty)
        return query.order_by(self.model.created_at.desc(), self.model.id.desc()).all()

    def count_created_since(self, db: Session, *, since: datetime) -> int:
        return db.query(self.model).filter(self.model.created_at >= since).count()

    def count_distinct_subjects(self, db: Session) -> int:
        return db.query(func.count(func.distinct(self.model.subject))).scalar() or 0

    def get_subject_distribution(self, db: Session) -> List:
        count = func.count(self.model.id)
        return (
            db.query(self.model.subject, count.label("total"))
            .group_by(self.model.subject)
            .order_by(count.desc(), self.model.subject)
            .all()
        )

question = CRUDQuestion(Question)
