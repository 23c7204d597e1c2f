from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

from preppulse.schemas.question import QuestionPublic

class ExamBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    duration: int = Field(..., gt=0)
    total_questions: int = Field(..., gt=0)
    passing_score: int = Field(..., ge=0, le=100)
    subject: Optional[str] = None
    difficulty: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Digital SAT Practice Test",
                "description": "A comprehensive practice test covering mathematics and reading",
                "duration": 90,
                "total_questions": 10,
                "passing_score": 70,
                "subject": "SAT Prep"
            }
        }
    )

class ExamCreate(ExamBase):
    pass

class Exam(ExamBase):
    id: int
    is_active: bool
    created_by: Optional[int] = None
    creator_name: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class ExamSummary(Exam):
    question_count: int = 0

class ExamWithQuestions(BaseModel):
    exam: Exam
    questions: List[QuestionPublic] = []
