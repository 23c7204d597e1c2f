import pytest

from preppulse.core.security import verify_password
from preppulse.crud.question import question as crud_question
from preppulse.seed import SAMPLE_QUESTIONS, add_sample_exam, create_admin
from tests.helpers.asserts import api_call


def test_create_admin_then_promote_existing(db_session, student):
    admin, created = create_admin(db_session, email="Boss@Test.com", password="bosspass")
    assert created
    assert admin.email == "boss@test.com"
    assert admin.is_admin
    assert verify_password("bosspass", admin.password_hash)

    again, created_again = create_admin(db_session, email="boss@test.com", password="ignored")
    assert not created_again
    assert again.id == admin.id

    promoted, _ = create_admin(db_session, email=student.email, password="ignored")
    assert promoted.id == student.id
    assert promoted.is_admin


def test_sample_exam_needs_an_admin(db_session):
    with pytest.raises(LookupError):
        add_sample_exam(db_session)


def test_sample_exam_is_fully_answerable(client, db_session, student_headers):
    create_admin(db_session, email="boss@test.com", password="bosspass")
    exam = add_sample_exam(db_session)

    questions = crud_question.get_by_exam(db_session, exam_id=exam.id)
    assert len(questions) == len(SAMPLE_QUESTIONS)

    answers = {str(q.id): q.correct_answer for q in questions}
    body = api_call(client, "POST", f"/exams/{exam.id}/submit", headers=student_headers,
                    json={"answers": answers, "time_spent": 1200}, expected_status=201)
    assert body["data"]["score"] == 100
    assert body["data"]["passed"] is True
