from typing import Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from preppulse.core.constants import DifficultyEnum
from preppulse.models.user import User
from preppulse.schemas.question import Question, QuestionCreate, QuestionList, QuestionUpdate
from preppulse.schemas.response import APIResponse
from preppulse.services.question import question_service
from preppulse.utils import deps

router = APIRouter()

@router.get("", response_model=APIResponse[QuestionList])
def get_questions(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.require_admin),
    subject: Optional[str] = Query(None),
    topic: Optional[str] = Query(None),
    difficulty: Optional[DifficultyEnum] = Query(None)
):
    questions = question_service.list_questions(
        db,
        subject=subject,
        topic=topic,
        difficulty=difficulty.value if difficulty else None
    )
    data = QuestionList(questions=[Question.model_validate(q) for q in questions], count=len(questions))
    return APIResponse(message="Questions retrieved successfully", data=data)


@router.post("", response_model=APIResponse[Question], status_code=status.HTTP_201_CREATED)
def create_question(
    *,
    db: Session = Depends(deps.get_db),
    question_in: QuestionCreate,
    current_user: User = Depends(deps.require_admin)
):
    new_question = question_service.create_question(db, question_in=question_in, current_user=current_user)
    return APIResponse(message="Question created successfully", data=Question.model_validate(new_question))


@router.put("/{question_id}", response_model=APIResponse[Question])
def update_question(
    *,
    db: Session = Depends(deps.get_db),
    question_id: int,
    question_in: QuestionUpdate,
    current_user: User = Depends(deps.require_admin)
):
    updated_question = question_service.update_question(db, question_id=question_id, question_in=question_in, current_user=current_user)
    return APIResponse(message="Question updated successfully", data=Question.model_validate(updated_question))


@router.delete("/{question_id}", response_model=APIResponse[Question])
def delete_question(
    *,
    db: Session = Depends(deps.get_db),
    question_id: int,
    current_user: User = Depends(deps.require_admin)
):
    deleted_question = question_service.delete_question(db, question_id=question_id, current_user=current_user)
    return APIResponse(message="Question deleted successfully", data=deleted_question)
