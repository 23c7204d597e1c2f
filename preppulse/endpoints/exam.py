from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from preppulse.models.user import User
from preppulse.schemas.response import APIResponse
from preppulse.schemas.exam import Exam, ExamCreate, ExamSummary, ExamWithQuestions
from preppulse.schemas.exam_attempt import ExamAttemptResult, ExamSubmission, ExamSubmissionResult
from preppulse.services.exam import exam_service
from preppulse.services.exam_attempt import exam_attempt_service
from preppulse.utils import deps

router = APIRouter()

@router.get("", response_model=APIResponse[List[ExamSummary]])
def get_active_exams(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    exams = exam_service.list_active_exams(db)
    return APIResponse(message="Exams retrieved successfully", data=exams)


@router.post("", response_model=APIResponse[Exam], status_code=status.HTTP_201_CREATED)
def create_exam(
    *,
    db: Session = Depends(deps.get_db),
    exam_in: ExamCreate,
    current_user: User = Depends(deps.require_admin)
):
    new_exam = exam_service.create_exam(db, exam_in=exam_in, current_user=current_user)
    return APIResponse(message="Exam created successfully", data=Exam.model_validate(new_exam))


@router.get("/{exam_id}", response_model=APIResponse[ExamWithQuestions])
def get_exam(
    *,
    db: Session = Depends(deps.get_db),
    exam_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    exam = exam_service.get_exam_for_taking(db, exam_id=exam_id)
    return APIResponse(message="Exam retrieved successfully", data=exam)


@router.delete("/{exam_id}", response_model=APIResponse[Exam])
def delete_exam(
    *,
    db: Session = Depends(deps.get_db),
    exam_id: int,
    current_user: User = Depends(deps.require_admin)
):
    deleted_exam = exam_service.delete_exam(db, exam_id=exam_id, current_user=current_user)
    return APIResponse(message="Exam deleted successfully", data=Exam.model_validate(deleted_exam))


@router.post("/{exam_id}/submit", response_model=APIResponse[ExamSubmissionResult], status_code=status.HTTP_201_CREATED)
def submit_exam(
    *,
    db: Session = Depends(deps.get_db),
    exam_id: int,
    submission: ExamSubmission,
    current_user: User = Depends(deps.get_current_user)
):
    result = exam_attempt_service.submit_exam(db, exam_id=exam_id, submission=submission, current_user=current_user)
    return APIResponse(message="Exam submitted successfully", data=result)


@router.get("/{exam_id}/results", response_model=APIResponse[ExamAttemptResult])
def get_exam_results(
    *,
    db: Session = Depends(deps.get_db),
    exam_id: int,
    attempt_id: Optional[int] = Query(None),
    current_user: User = Depends(deps.get_current_user)
):
    result = exam_attempt_service.get_result(db, exam_id=exam_id, attempt_id=attempt_id, current_user=current_user)
    return APIResponse(message="Results retrieved successfully", data=result)
