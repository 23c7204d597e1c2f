from typing import List
from sqlalchemy.orm import Session

from preppulse.crud.base import CRUDBase
from preppulse.models.topic_progress import TopicProgress

class CRUDTopicProgress(CRUDBase[TopicProgress, TopicProgress, TopicProgress]):

    def get_recent_by_user(self, db: Session, user_id: int, limit: int = 10) -> List[TopicProgress]:
        return (
            db.query(TopicProgress)
            .filter(TopicProgress.user_id == user_id)
            .order_by(TopicProgress.last_practiced.desc(), TopicProgress.id.desc())
            .limit(limit)
            .all()
        )

topic_progress = CRUDTopicProgress(TopicProgress)
