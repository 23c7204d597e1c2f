from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from preppulse.core.database import Base

class Exam(Base):
    __tablename__ = "exams"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, index=True, nullable=False)
    description = Column(String, nullable=True)
    duration = Column(Integer, nullable=False)  # minutes
    total_questions = Column(Integer, nullable=False)  # nominal, not checked against attached questions
    passing_score = Column(Integer, nullable=False)
    subject = Column(String, nullable=True)
    difficulty = Column(String, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    creator = relationship("User", back_populates="exams_created")
    questions = relationship("Question", back_populates="exam", order_by="Question.id")
    attempts = relationship("ExamAttempt", back_populates="exam")

    @property
    def creator_name(self):
        return self.creator.name if self.creator else None
