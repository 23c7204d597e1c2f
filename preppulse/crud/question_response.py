from typing import List
from sqlalchemy.orm import Session

from preppulse.crud.base import CRUDBase
from preppulse.models.question_response import QuestionResponse

class CRUDQuestionResponse(CRUDBase[QuestionResponse, QuestionResponse, QuestionResponse]):
    def get_all_by_attempt(self, db: Session, *, attempt_id: int) -> List[QuestionResponse]:
        return (
            db.query(self.model)
            .filter(self.model.attempt_id == attempt_id)
            .order_by(self.model.id)
            .all()
        )

    def count_correct_by_attempt(self, db: Session, *, attempt_id: int) -> int:
        return (
            db.query(self.model)
            .filter(self.model.attempt_id == attempt_id, self.model.is_correct.is_(True))
            .count()
        )

question_response = CRUDQuestionResponse(QuestionResponse)
