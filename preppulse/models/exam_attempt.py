from sqlalchemy import Column, Integer, DateTime, ForeignKey, Boolean, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from preppulse.core.database import Base

class ExamAttempt(Base):
    __tablename__ = "user_exam_attempts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    exam_id = Column(Integer, ForeignKey("exams.id"), nullable=False, index=True)
    score = Column(Integer, nullable=False)
    total_questions = Column(Integer, nullable=False)
    correct_answers = Column(Integer, nullable=False)
    time_spent = Column(Integer, nullable=False, default=0)  # seconds
    passed = Column(Boolean, nullable=False)
    answers = Column(JSON, nullable=True)
    started_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    user = relationship("User", back_populates="exam_attempts")
    exam = relationship("Exam", back_populates="attempts")
    responses = relationship(
        "QuestionResponse",
        back_populates="attempt",
        cascade="all, delete-orphan",
        order_by="QuestionResponse.id",
    )
