from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict
from datetime import datetime

from preppulse.core.constants import MAX_TIME_SPENT_SECONDS

class ExamSubmission(BaseModel):
    # Identity comes from the bearer token; user_id is only cross-checked.
    user_id: Optional[int] = None
    answers: Dict[str, Optional[str]]
    time_spent: int = Field(default=0, ge=0, le=MAX_TIME_SPENT_SECONDS)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "answers": {"1": "A", "2": "C"},
                "time_spent": 1260
            }
        }
    )

class ExamSubmissionResult(BaseModel):
    attempt_id: int
    score: int
    correct_answers: int
    total_questions: int
    passed: bool
    time_spent: int

class QuestionResponse(BaseModel):
    question_id: Optional[int] = None
    user_answer: Optional[str] = None
    is_correct: bool

    model_config = ConfigDict(from_attributes=True)

class ExamAttemptResult(BaseModel):
    attempt_id: int
    exam_id: int
    score: int
    correct_answers: int
    total_questions: int
    time_spent: int
    passed: bool
    passing_score: int
    exam_title: str
    subject: Optional[str] = None
    completed_at: Optional[datetime] = None
    responses: List[QuestionResponse] = []

class ExamAttemptHistoryItem(BaseModel):
    id: int
    exam_id: int
    score: int
    total_questions: int
    correct_answers: int
    time_spent: int
    passed: bool
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    exam_title: str
    exam_description: Optional[str] = None
    passing_score: int
