import sys
import os
import tempfile
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "preppulse-test-logs"))

import uuid
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

import main
from preppulse.core.constants import RoleEnum
from preppulse.core.database import Base, get_db
from preppulse.core.security import get_password_hash
from preppulse.crud.exam import exam as crud_exam
from preppulse.crud.question import question as crud_question
from preppulse.crud.user import user as crud_user

TEST_PASSWORD = "testpass123"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def client(db_session):
    main.app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def user_factory(db_session):
    def _create(email=None, name="Test User", role=RoleEnum.USER, password=TEST_PASSWORD):
        email = email or f"user-{uuid.uuid4().hex[:8]}@test.com"
        return crud_user.create(db_session, obj_in={
            "name": name,
            "email": email,
            "password_hash": get_password_hash(password),
            "role": role,
        })
    return _create

@pytest.fixture
def token_for(client):
    def _login(user, password=TEST_PASSWORD):
        response = client.post("/auth/login", json={"email": user.email, "password": password})
        body = response.json()
        token = body.get("data", {}).get("token", {}).get("access_token")
        assert token, f"Login failed or token missing: {body}"
        return token
    return _login

@pytest.fixture
def student(user_factory):
    return user_factory(name="Test Student")

@pytest.fixture
def admin(user_factory):
    return user_factory(name="Test Admin", role=RoleEnum.ADMIN)

@pytest.fixture
def student_headers(student, token_for):
    return {"Authorization": f"Bearer {token_for(student)}"}

@pytest.fixture
def admin_headers(admin, token_for):
    return {"Authorization": f"Bearer {token_for(admin)}"}

@pytest.fixture
def exam_factory(db_session, admin):
    """Builds an exam with one question per (correct_answer, points) pair."""
    def _create(answer_key=(("A", 1), ("B", 1)), passing_score=70, title=None, subject="Mathematics", is_active=True):
        new_exam = crud_exam.create(db_session, obj_in={
            "title": title or f"Practice Exam {uuid.uuid4().hex[:6]}",
            "description": "Generated for tests",
            "duration": 30,
            "total_questions": len(answer_key),
            "passing_score": passing_score,
            "subject": subject,
            "difficulty": "medium",
            "created_by": admin.id,
            "is_active": is_active,
        })
        for index, (correct_answer, points) in enumerate(answer_key):
            crud_question.create(db_session, commit=False, obj_in={
                "exam_id": new_exam.id,
                "subject": subject,
                "topic": "Algebra",
                "difficulty": "medium",
                "question_text": f"Question {index + 1}?",
                "option_a": "First",
                "option_b": "Second",
                "option_c": "Third",
                "option_d": "Fourth",
                "correct_answer": correct_answer,
                "explanation": f"The answer is {correct_answer}.",
                "points": points,
            })
        db_session.commit()
        db_session.refresh(new_exam)
        return new_exam
    return _create

@pytest.fixture
def exam_questions(db_session):
    def _questions(exam_id):
        return crud_question.get_by_exam(db_session, exam_id=exam_id)
    return _questions
