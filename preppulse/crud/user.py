from datetime import datetime
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from preppulse.crud.base import CRUDBase
from preppulse.models.user import User
from preppulse.models.exam_attempt import ExamAttempt
from preppulse.schemas.user import UserCreate, UserRoleUpdate

class CRUDUser(CRUDBase[User, UserCreate, UserRoleUpdate]):
    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email.lower()).first()

    def count_created_since(self, db: Session, *, since: datetime) -> int:
        return db.query(User).filter(User.created_at >= since).count()

    def get_recent_with_attempt_summary(self, db: Session, *, limit: int = 10):
        """Newest users with their best score and attempt count."""
        return (
            db.query(
                User.id,
                User.name,
                User.email,
                User.role,
                User.created_at,
                func.coalesce(func.max(ExamAttempt.score), 0).label("best_score"),
                func.count(ExamAttempt.id).label("attempts_count"),
            )
            .outerjoin(ExamAttempt, ExamAttempt.user_id == User.id)
            .group_by(User.id, User.name, User.email, User.role, User.created_at)
            .order_by(User.created_at.desc(), User.id.desc())
            .limit(limit)
            .all()
        )

    def get_daily_signups_since(self, db: Session, *, since: datetime) -> List:
        day = func.date(User.created_at)
        return (
            db.query(day.label("date"), func.count(User.id).label("signups"))
            .filter(User.created_at >= since)
            .group_by(day)
            .order_by(day)
            .all()
        )

user = CRUDUser(User)
