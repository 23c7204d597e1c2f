import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from preppulse.core.constants import ANSWER_LETTERS, DEFAULT_QUESTION_POINTS, QuestionTypeEnum, SubjectEnum
from preppulse.crud.exam import exam as crud_exam
from preppulse.crud.question import question as crud_question
from preppulse.models.question import Question
from preppulse.models.user import User
from preppulse.schemas.question import Question as QuestionSchema, QuestionCreate, QuestionUpdate

logger = logging.getLogger(__name__)


class QuestionService:

    def _require_exam_exists(self, db: Session, exam_id: Optional[int]):
        if exam_id is not None and not crud_exam.get(db, id=exam_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exam not found")

    def _default_subject(self, question_type: Optional[str]) -> str:
        if question_type == QuestionTypeEnum.MATH.value:
            return SubjectEnum.MATHEMATICS.value
        return SubjectEnum.READING_AND_WRITING.value

    def create_question(self, db: Session, question_in: QuestionCreate, current_user: User) -> Question:
        self._require_exam_exists(db, question_in.exam_id)

        topic = question_in.topic
        if question_in.subtopic:
            topic = f"{topic} - {question_in.subtopic}" if topic else question_in.subtopic

        choices = question_in.choices + [None] * (len(ANSWER_LETTERS) - len(question_in.choices))
        new_question = crud_question.create(db, obj_in={
            "exam_id": question_in.exam_id,
            "subject": question_in.subject or self._default_subject(question_in.type),
            "topic": topic,
            "difficulty": question_in.difficulty,
            "question_text": question_in.question_text,
            "option_a": choices[0],
            "option_b": choices[1],
            "option_c": choices[2] or None,
            "option_d": choices[3] or None,
            "correct_answer": ANSWER_LETTERS[question_in.correct_answer],
            "explanation": question_in.explanation or None,
            "points": DEFAULT_QUESTION_POINTS,
        })
        logger.info(f"Question {new_question.id} created by user {current_user.id}")
        return new_question

    def list_questions(
        self,
        db: Session,
        subject: Optional[str] = None,
        topic: Optional[str] = None,
        difficulty: Optional[str] = None,
    ) -> List[Question]:
        return crud_question.get_filtered(db, subject=subject, topic=topic, difficulty=difficulty)

    def update_question(self, db: Session, question_id: int, question_in: QuestionUpdate, current_user: User) -> Question:
        question = crud_question.get(db, id=question_id)
        if not question:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")

        update_data = question_in.model_dump(exclude_unset=True)
        if "exam_id" in update_data:
            self._require_exam_exists(db, update_data["exam_id"])

        for required in ("subject", "difficulty", "question_text", "option_a", "option_b", "correct_answer"):
            if required in update_data and update_data[required] is None:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"{required} cannot be cleared"
                )

        options = {
            letter: update_data.get(f"option_{letter.lower()}", getattr(question, f"option_{letter.lower()}"))
            for letter in ANSWER_LETTERS
        }
        if options["D"] and not options["C"]:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Option C is required when option D is set"
            )

        letter = update_data.get("correct_answer", question.correct_answer)
        if not options[letter]:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Correct answer {letter} has no matching option"
            )

        updated = crud_question.update(db, db_obj=question, obj_in=update_data)
        logger.info(f"Question {question_id} updated by user {current_user.id}")
        return updated

    def delete_question(self, db: Session, question_id: int, current_user: User) -> QuestionSchema:
        question = crud_question.get(db, id=question_id)
        if not question:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")

        snapshot = QuestionSchema.model_validate(question)
        crud_question.delete(db, id=question_id)
        logger.info(f"Question {question_id} deleted by user {current_user.id}")
        return snapshot


question_service = QuestionService()
