from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime

from preppulse.core.constants import DifficultyEnum, QuestionTypeEnum

class QuestionCreate(BaseModel):
    """Authoring payload; choices are positional and the answer is an index into them."""
    type: Optional[QuestionTypeEnum] = None
    subject: Optional[str] = None
    topic: Optional[str] = None
    subtopic: Optional[str] = None
    difficulty: DifficultyEnum = DifficultyEnum.MEDIUM
    question_text: str
    choices: List[str]
    correct_answer: int
    explanation: Optional[str] = None
    exam_id: Optional[int] = None

    model_config = ConfigDict(
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "type": "math",
                "topic": "Algebra",
                "subtopic": "Linear equations",
                "difficulty": "easy",
                "question_text": "If 2x + 3 = 11, what is x?",
                "choices": ["2", "4", "6", "8"],
                "correct_answer": 1,
                "explanation": "2x = 8, so x = 4."
            }
        }
    )

    @field_validator("question_text")
    def text_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("Question text is required")
        return v

    @model_validator(mode="after")
    def validate_choices(self):
        if len(self.choices) < 2 or len(self.choices) > 4:
            raise ValueError("Between 2 and 4 choices are required")
        if self.correct_answer < 0 or self.correct_answer >= len(self.choices):
            raise ValueError("Valid correct answer index is required")
        return self

class QuestionUpdate(BaseModel):
    subject: Optional[str] = None
    topic: Optional[str] = None
    difficulty: Optional[DifficultyEnum] = None
    question_text: Optional[str] = None
    option_a: Optional[str] = None
    option_b: Optional[str] = None
    option_c: Optional[str] = None
    option_d: Optional[str] = None
    correct_answer: Optional[str] = Field(None, pattern="^[A-D]$")
    explanation: Optional[str] = None
    points: Optional[int] = Field(None, ge=0)
    exam_id: Optional[int] = None

    model_config = ConfigDict(use_enum_values=True)

class QuestionPublic(BaseModel):
    """What an exam taker sees: no answer key, no explanation."""
    id: int
    subject: str
    topic: Optional[str] = None
    difficulty: str
    question_text: str
    option_a: str
    option_b: str
    option_c: Optional[str] = None
    option_d: Optional[str] = None
    points: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

class Question(QuestionPublic):
    exam_id: Optional[int] = None
    correct_answer: str
    explanation: Optional[str] = None
    created_at: datetime

class QuestionList(BaseModel):
    questions: List[Question]
    count: int
