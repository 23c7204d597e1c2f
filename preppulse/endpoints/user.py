from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from preppulse.models.user import User
from preppulse.schemas.exam_attempt import ExamAttemptHistoryItem
from preppulse.schemas.response import APIResponse
from preppulse.schemas.stats import UserStats
from preppulse.services.exam_attempt import exam_attempt_service
from preppulse.services.stats import stats_service
from preppulse.utils import deps

router = APIRouter()

@router.get("/stats", response_model=APIResponse[UserStats])
def get_user_stats(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
    user_id: Optional[int] = Query(None)
):
    stats = stats_service.get_user_stats(db, user_id=user_id, current_user=current_user)
    return APIResponse(message="User statistics retrieved successfully", data=stats)


@router.get("/attempts", response_model=APIResponse[List[ExamAttemptHistoryItem]])
def get_user_attempts(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
    user_id: Optional[int] = Query(None)
):
    attempts = exam_attempt_service.get_user_attempts(db, user_id=user_id, current_user=current_user)
    return APIResponse(message="User attempts retrieved successfully", data=attempts)
