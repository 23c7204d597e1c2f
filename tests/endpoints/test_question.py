from preppulse.crud.question import question as crud_question
from tests.helpers.asserts import api_call, assert_error

QUESTION_PAYLOAD = {
    "type": "math",
    "topic": "Algebra",
    "subtopic": "Linear equations",
    "difficulty": "easy",
    "question_text": "If 2x + 3 = 11, what is x?",
    "choices": ["2", "4", "6", "8"],
    "correct_answer": 1,
    "explanation": "2x = 8, so x = 4.",
}


class TestQuestionEndpoints:
    def test_create_maps_choices_to_letters(self, client, admin_headers):
        body = api_call(client, "POST", "/questions", headers=admin_headers, json=QUESTION_PAYLOAD, expected_status=201)

        data = body["data"]
        assert data["subject"] == "Mathematics"
        assert data["topic"] == "Algebra - Linear equations"
        assert data["difficulty"] == "easy"
        assert (data["option_a"], data["option_b"], data["option_c"], data["option_d"]) == ("2", "4", "6", "8")
        assert data["correct_answer"] == "B"
        assert data["points"] == 1
        assert data["exam_id"] is None

    def test_create_defaults_for_reading_questions(self, client, admin_headers):
        payload = {
            "type": "reading",
            "topic": "Inference",
            "question_text": "Which choice best states the main idea?",
            "choices": ["Yes", "No"],
            "correct_answer": 0,
        }
        body = api_call(client, "POST", "/questions", headers=admin_headers, json=payload, expected_status=201)

        data = body["data"]
        assert data["subject"] == "Reading and Writing"
        assert data["difficulty"] == "medium"
        assert data["topic"] == "Inference"
        assert data["option_c"] is None
        assert data["option_d"] is None
        assert data["correct_answer"] == "A"

    def test_create_attaches_to_exam(self, client, admin_headers, exam_factory):
        exam = exam_factory(answer_key=())
        body = api_call(client, "POST", "/questions", headers=admin_headers, json={**QUESTION_PAYLOAD, "exam_id": exam.id}, expected_status=201)
        assert body["data"]["exam_id"] == exam.id

    def test_create_for_unknown_exam(self, client, admin_headers):
        body = api_call(client, "POST", "/questions", headers=admin_headers, json={**QUESTION_PAYLOAD, "exam_id": 9999}, expected_status=404)
        assert_error(body, "NOT_FOUND", "Exam not found")

    def test_create_needs_two_choices(self, client, admin_headers):
        api_call(client, "POST", "/questions", headers=admin_headers, json={**QUESTION_PAYLOAD, "choices": ["only"], "correct_answer": 0}, expected_status=400)

    def test_create_needs_valid_answer_index(self, client, admin_headers):
        api_call(client, "POST", "/questions", headers=admin_headers, json={**QUESTION_PAYLOAD, "correct_answer": 4}, expected_status=400)

    def test_student_cannot_author_questions(self, client, student_headers):
        api_call(client, "POST", "/questions", headers=student_headers, json=QUESTION_PAYLOAD, expected_status=403)
        api_call(client, "GET", "/questions", headers=student_headers, expected_status=403)

    def test_list_filters(self, client, admin_headers):
        api_call(client, "POST", "/questions", headers=admin_headers, json=QUESTION_PAYLOAD, expected_status=201)
        api_call(client, "POST", "/questions", headers=admin_headers, json={
            **QUESTION_PAYLOAD, "type": "writing", "topic": "Grammar", "subtopic": None, "difficulty": "hard",
        }, expected_status=201)

        everything = api_call(client, "GET", "/questions", headers=admin_headers)
        assert everything["data"]["count"] == 2
        assert "correct_answer" in everything["data"]["questions"][0]

        by_subject = api_call(client, "GET", "/questions", headers=admin_headers, params={"subject": "Mathematics"})
        assert [q["topic"] for q in by_subject["data"]["questions"]] == ["Algebra - Linear equations"]

        by_topic = api_call(client, "GET", "/questions", headers=admin_headers, params={"topic": "Linear"})
        assert by_topic["data"]["count"] == 1

        by_difficulty = api_call(client, "GET", "/questions", headers=admin_headers, params={"difficulty": "hard"})
        assert [q["topic"] for q in by_difficulty["data"]["questions"]] == ["Grammar"]

    def test_list_rejects_unknown_difficulty(self, client, admin_headers):
        api_call(client, "GET", "/questions", headers=admin_headers, params={"difficulty": "impossible"}, expected_status=400)

    def test_update_attaches_and_detaches(self, client, admin_headers, exam_factory):
        exam = exam_factory(answer_key=())
        created = api_call(client, "POST", "/questions", headers=admin_headers, json=QUESTION_PAYLOAD, expected_status=201)
        question_id = created["data"]["id"]

        attached = api_call(client, "PUT", f"/questions/{question_id}", headers=admin_headers, json={"exam_id": exam.id, "points": 3})
        assert attached["data"]["exam_id"] == exam.id
        assert attached["data"]["points"] == 3
        assert attached["data"]["topic"] == "Algebra - Linear equations"

        detached = api_call(client, "PUT", f"/questions/{question_id}", headers=admin_headers, json={"exam_id": None})
        assert detached["data"]["exam_id"] is None

    def test_update_rejects_answer_without_option(self, client, admin_headers):
        created = api_call(client, "POST", "/questions", headers=admin_headers, json={
            **QUESTION_PAYLOAD, "choices": ["Yes", "No"], "correct_answer": 0,
        }, expected_status=201)

        body = api_call(client, "PUT", f"/questions/{created['data']['id']}", headers=admin_headers, json={"correct_answer": "D"}, expected_status=400)
        assert_error(body, "BAD_REQUEST", "Correct answer D has no matching option")

    def test_update_cannot_leave_gap_before_option_d(self, client, admin_headers):
        created = api_call(client, "POST", "/questions", headers=admin_headers, json=QUESTION_PAYLOAD, expected_status=201)
        question_id = created["data"]["id"]

        body = api_call(client, "PUT", f"/questions/{question_id}", headers=admin_headers, json={"option_c": None}, expected_status=400)
        assert_error(body, "BAD_REQUEST", "Option C is required when option D is set")

        cleared = api_call(client, "PUT", f"/questions/{question_id}", headers=admin_headers, json={"option_c": None, "option_d": None})
        assert cleared["data"]["option_c"] is None
        assert cleared["data"]["option_d"] is None

    def test_update_rejects_lowercase_letter(self, client, admin_headers):
        created = api_call(client, "POST", "/questions", headers=admin_headers, json=QUESTION_PAYLOAD, expected_status=201)
        api_call(client, "PUT", f"/questions/{created['data']['id']}", headers=admin_headers, json={"correct_answer": "b"}, expected_status=400)

    def test_update_cannot_clear_required_field(self, client, admin_headers):
        created = api_call(client, "POST", "/questions", headers=admin_headers, json=QUESTION_PAYLOAD, expected_status=201)
        api_call(client, "PUT", f"/questions/{created['data']['id']}", headers=admin_headers, json={"question_text": None}, expected_status=400)

    def test_update_unknown_question(self, client, admin_headers):
        api_call(client, "PUT", "/questions/9999", headers=admin_headers, json={"points": 2}, expected_status=404)

    def test_delete_is_hard(self, client, admin_headers, db_session):
        created = api_call(client, "POST", "/questions", headers=admin_headers, json=QUESTION_PAYLOAD, expected_status=201)
        question_id = created["data"]["id"]

        body = api_call(client, "DELETE", f"/questions/{question_id}", headers=admin_headers)
        assert body["data"]["id"] == question_id

        db_session.expire_all()
        assert crud_question.get(db_session, id=question_id) is None
        api_call(client, "DELETE", f"/questions/{question_id}", headers=admin_headers, expected_status=404)
