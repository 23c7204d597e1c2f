from preppulse.crud.exam import exam as crud_exam
from tests.helpers.asserts import api_call, assert_error

EXAM_PAYLOAD = {
    "title": "Digital SAT Practice Test",
    "description": "Math and reading",
    "duration": 90,
    "total_questions": 10,
    "passing_score": 70,
    "subject": "SAT Prep",
    "difficulty": "medium",
}


class TestExamEndpoints:
    def test_list_requires_authentication(self, client):
        api_call(client, "GET", "/exams", expected_status=401)

    def test_list_only_active_exams_with_counts(self, client, student_headers, exam_factory, admin):
        active = exam_factory(answer_key=(("A", 1), ("B", 1), ("C", 1)), title="Active")
        exam_factory(title="Retired", is_active=False)

        body = api_call(client, "GET", "/exams", headers=student_headers)

        exams = body["data"]
        assert [e["id"] for e in exams] == [active.id]
        assert exams[0]["question_count"] == 3
        assert exams[0]["creator_name"] == admin.name

    def test_list_newest_first(self, client, student_headers, exam_factory):
        first = exam_factory(title="First")
        second = exam_factory(title="Second")

        body = api_call(client, "GET", "/exams", headers=student_headers)
        assert [e["id"] for e in body["data"]] == [second.id, first.id]

    def test_get_exam_strips_answer_keys(self, client, student_headers, exam_factory):
        exam = exam_factory(answer_key=(("B", 1), ("A", 2), ("D", 1)))

        body = api_call(client, "GET", f"/exams/{exam.id}", headers=student_headers)

        assert body["data"]["exam"]["id"] == exam.id
        questions = body["data"]["questions"]
        assert len(questions) == 3
        assert [q["id"] for q in questions] == sorted(q["id"] for q in questions)
        for question in questions:
            assert "correct_answer" not in question
            assert "explanation" not in question
            assert question["option_a"] == "First"
        assert questions[1]["points"] == 2

    def test_get_unknown_exam(self, client, student_headers):
        body = api_call(client, "GET", "/exams/9999", headers=student_headers, expected_status=404)
        assert_error(body, "NOT_FOUND", "Exam not found")

    def test_inactive_exam_is_still_retrievable(self, client, student_headers, exam_factory):
        exam = exam_factory(is_active=False)
        api_call(client, "GET", f"/exams/{exam.id}", headers=student_headers)

    def test_admin_creates_exam(self, client, admin, admin_headers):
        body = api_call(client, "POST", "/exams", headers=admin_headers, json=EXAM_PAYLOAD, expected_status=201)

        data = body["data"]
        assert data["title"] == EXAM_PAYLOAD["title"]
        assert data["created_by"] == admin.id
        assert data["creator_name"] == admin.name
        assert data["is_active"] is True

    def test_student_cannot_create_exam(self, client, student_headers):
        body = api_call(client, "POST", "/exams", headers=student_headers, json=EXAM_PAYLOAD, expected_status=403)
        assert_error(body, "FORBIDDEN", "Admin access required")

    def test_create_exam_requires_core_fields(self, client, admin_headers):
        payload = {k: v for k, v in EXAM_PAYLOAD.items() if k != "passing_score"}
        api_call(client, "POST", "/exams", headers=admin_headers, json=payload, expected_status=400)

    def test_create_exam_rejects_out_of_range_passing_score(self, client, admin_headers):
        api_call(client, "POST", "/exams", headers=admin_headers, json={**EXAM_PAYLOAD, "passing_score": 120}, expected_status=400)

    def test_delete_exam_is_soft(self, client, admin_headers, student_headers, exam_factory, db_session):
        exam = exam_factory()

        body = api_call(client, "DELETE", f"/exams/{exam.id}", headers=admin_headers)
        assert body["data"]["is_active"] is False

        db_session.expire_all()
        assert crud_exam.get(db_session, id=exam.id) is not None
        listed = api_call(client, "GET", "/exams", headers=student_headers)
        assert listed["data"] == []

    def test_delete_unknown_exam(self, client, admin_headers):
        api_call(client, "DELETE", "/exams/9999", headers=admin_headers, expected_status=404)

    def test_student_cannot_delete_exam(self, client, student_headers, exam_factory):
        exam = exam_factory()
        api_call(client, "DELETE", f"/exams/{exam.id}", headers=student_headers, expected_status=403)
