import logging
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session

from preppulse.core.constants import (
    ACTIVE_SESSION_WINDOW_HOURS, ADMIN_RECENT_LIMIT, RECENT_SESSIONS_LIMIT,
    STREAK_WINDOW_DAYS, TOPIC_PROGRESS_LIMIT, USER_GROWTH_WINDOW_DAYS
)
from preppulse.crud.exam import exam as crud_exam
from preppulse.crud.exam_attempt import exam_attempt as crud_exam_attempt
from preppulse.crud.question import question as crud_question
from preppulse.crud.topic_progress import topic_progress as crud_topic_progress
from preppulse.crud.user import user as crud_user
from preppulse.models.user import User
from preppulse.schemas.stats import (
    AdminStats, AdminStatsSummary, QuestionDistributionItem, RecentExam, RecentSession,
    RecentUser, TopicProgressItem, UserGrowthPoint, UserStats, UserStatsSummary
)
from preppulse.utils.permission import PermissionHelper as permission_helper

logger = logging.getLogger(__name__)


def _round_half_up(value) -> int:
    return int(value + 0.5)


def _percent(part, whole) -> int:
    if not whole:
        return 0
    return _round_half_up(100 * part / whole)


def _day(value):
    return value.date() if isinstance(value, datetime) else value


class StatsService:
    """Read-only dashboard aggregates. Nothing here writes."""

    def get_user_stats(self, db: Session, user_id: Optional[int], current_user: User) -> UserStats:
        target_user_id = permission_helper.resolve_target_user_id(current_user, user_id)
        now = datetime.utcnow()

        totals = crud_exam_attempt.get_user_totals(db, user_id=target_user_id)
        total_questions = int(totals.total_questions or 0)
        total_correct = int(totals.total_correct or 0)

        summary = UserStatsSummary(
            questions_answered=total_questions,
            correct_answers=total_correct,
            accuracy=_percent(total_correct, total_questions),
            study_time=_round_half_up(float(totals.total_time_seconds or 0) / 3600),
            current_streak=crud_exam_attempt.count_active_days_since(
                db, user_id=target_user_id, since=now - timedelta(days=STREAK_WINDOW_DAYS)
            ),
            best_score=int(totals.best_score or 0),
            avg_score=_round_half_up(float(totals.avg_score or 0)),
            total_attempts=int(totals.total_attempts or 0),
        )

        recent_sessions = [
            RecentSession(
                id=attempt.id,
                topic=attempt.exam.title,
                subject=attempt.exam.subject,
                score=attempt.score,
                questions=attempt.total_questions,
                correct=attempt.correct_answers,
                time=f"{_round_half_up(attempt.time_spent / 60)} min",
                date=_day(attempt.completed_at),
            )
            for attempt in crud_exam_attempt.get_all_by_user(db, user_id=target_user_id, limit=RECENT_SESSIONS_LIMIT)
        ]

        topic_progress = [
            TopicProgressItem(
                subject=row.subject,
                topic=row.topic,
                questions=row.questions_attempted,
                correct=row.questions_correct,
                progress=_percent(row.questions_correct, row.questions_attempted),
                last_practiced=row.last_practiced,
            )
            for row in crud_topic_progress.get_recent_by_user(db, user_id=target_user_id, limit=TOPIC_PROGRESS_LIMIT)
        ]

        return UserStats(stats=summary, recent_sessions=recent_sessions, topic_progress=topic_progress)

    def get_admin_stats(self, db: Session) -> AdminStats:
        now = datetime.utcnow()
        start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)

        total_questions = crud_question.count(db)
        summary = AdminStatsSummary(
            total_users=crud_user.count(db),
            new_users_today=crud_user.count_created_since(db, since=start_of_today),
            total_exams=crud_exam.count_active(db),
            total_questions=total_questions,
            questions_added_today=crud_question.count_created_since(db, since=start_of_today),
            total_topics=crud_question.count_distinct_subjects(db),
            active_sessions=crud_exam_attempt.count_distinct_users_since(
                db, since=now - timedelta(hours=ACTIVE_SESSION_WINDOW_HOURS)
            ),
        )

        recent_users = [
            RecentUser(
                id=row.id,
                name=row.name,
                email=row.email,
                role=getattr(row.role, "value", row.role),
                joined=_day(row.created_at),
                status="Active" if row.attempts_count > 0 else "Inactive",
                score=int(row.best_score or 0),
            )
            for row in crud_user.get_recent_with_attempt_summary(db, limit=ADMIN_RECENT_LIMIT)
        ]

        recent_exams = [
            RecentExam(
                id=row.id,
                topic=row.title,
                subject=row.subject,
                difficulty=row.difficulty or "Medium",
                status="Published" if row.is_active else "Draft",
                created=_day(row.created_at),
                question_count=row.question_count,
            )
            for row in crud_exam.get_recent_with_question_counts(db, limit=ADMIN_RECENT_LIMIT)
        ]

        question_distribution = [
            QuestionDistributionItem(
                subject=row.subject,
                count=row.total,
                percentage=_percent(row.total, total_questions),
            )
            for row in crud_question.get_subject_distribution(db)
        ]

        user_growth = [
            UserGrowthPoint(date=row.date, count=row.signups)
            for row in crud_user.get_daily_signups_since(db, since=now - timedelta(days=USER_GROWTH_WINDOW_DAYS))
        ]

        logger.debug(f"Admin stats computed: {summary.model_dump()}")
        return AdminStats(
            stats=summary,
            recent_users=recent_users,
            recent_exams=recent_exams,
            question_distribution=question_distribution,
            user_growth=user_growth,
        )


stats_service = StatsService()
