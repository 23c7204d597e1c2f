import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from preppulse.core.constants import RoleEnum
from preppulse.core.database import Base
from preppulse.core.security import get_password_hash
from preppulse.crud.question_response import question_response as crud_question_response
from preppulse.models.exam import Exam
from preppulse.models.exam_attempt import ExamAttempt
from preppulse.models.question import Question
from preppulse.models.question_response import QuestionResponse
from preppulse.models.user import User
from preppulse.schemas.exam_attempt import ExamSubmission
from preppulse.services.exam_attempt import exam_attempt_service


@pytest.fixture
def file_sessionmaker(tmp_path):
    """A file-backed database so each thread gets its own connection."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'concurrent.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def seeded(file_sessionmaker):
    db = file_sessionmaker()
    try:
        student = User(name="Racing Student", email="racer@test.com",
                       password_hash=get_password_hash("testpass123"), role=RoleEnum.USER)
        exam = Exam(title="Race Exam", duration=10, total_questions=2, passing_score=50, is_active=True)
        db.add_all([student, exam])
        db.flush()
        questions = [
            Question(exam_id=exam.id, subject="Mathematics", question_text=f"Q{i}?",
                     option_a="a", option_b="b", correct_answer=letter, points=1)
            for i, letter in enumerate(("A", "B"))
        ]
        db.add_all(questions)
        db.commit()
        return student.id, exam.id, [q.id for q in questions]
    finally:
        db.close()


def test_concurrent_submissions_produce_independent_attempts(file_sessionmaker, seeded):
    student_id, exam_id, question_ids = seeded
    letter_sets = [("A", "B"), ("C", "C")]
    barrier = threading.Barrier(len(letter_sets))

    def submit(letters):
        db = file_sessionmaker()
        try:
            current_user = db.get(User, student_id)
            submission = ExamSubmission(answers=dict(zip(map(str, question_ids), letters)), time_spent=30)
            barrier.wait(timeout=10)
            return exam_attempt_service.submit_exam(db, exam_id=exam_id, submission=submission, current_user=current_user)
        finally:
            db.close()

    with ThreadPoolExecutor(max_workers=len(letter_sets)) as pool:
        results = list(pool.map(submit, letter_sets))

    assert sorted(r.score for r in results) == [0, 100]
    assert len({r.attempt_id for r in results}) == 2

    db = file_sessionmaker()
    try:
        assert db.query(ExamAttempt).count() == 2
        assert db.query(QuestionResponse).count() == 4
        for result in results:
            attempt = db.get(ExamAttempt, result.attempt_id)
            assert attempt.user_id == student_id
            assert attempt.correct_answers == result.correct_answers
            assert crud_question_response.count_correct_by_attempt(db, attempt_id=attempt.id) == attempt.correct_answers
    finally:
        db.close()
