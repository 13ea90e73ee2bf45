from __future__ import annotations

import pytest

RESUME = (
    "Jane Smith\n"
    "Senior frontend engineer\n"
    "jane.smith@example.com | (555) 123-4567\n"
    "Skills: React, TypeScript, CSS, HTML, responsive design\n"
)


def test_analyze_resume(client):
    resp = client.post("/api/ai/analyze-resume", json={"resumeText": RESUME})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"] == {
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "phone": "(555) 123-4567",
        "jobRole": "Frontend Developer",
    }


@pytest.mark.parametrize(
    "path, payload, message",
    [
        ("/api/ai/analyze-resume", {}, "Resume text is required"),
        ("/api/ai/analyze-resume", {"resumeText": "  "}, "Resume text is required"),
        ("/api/ai/generate-questions", {"difficulty": "Easy"}, "Job role is required"),
        ("/api/ai/evaluate-answer", {"question": "Why?"}, "Question and answer are required"),
        ("/api/ai/generate-summary", {"answers": []}, "Answers are required for summary generation"),
    ],
)
def test_missing_inputs_are_400(client, path, payload, message):
    resp = client.post(path, json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": message, "code": "validation_error"}


def test_generate_questions_filters_by_difficulty(client):
    resp = client.post("/api/ai/generate-questions", json={"jobRole": "Backend Developer", "difficulty": "hard"})
    assert resp.status_code == 200
    questions = resp.json()["data"]
    assert [q["id"] for q in questions] == ["be-3"]
    assert questions[0]["timeLimit"] == 600
    assert questions[0]["difficulty"] == "Hard"


def test_unknown_role_gets_general_questions(client):
    resp = client.post("/api/ai/generate-questions", json={"jobRole": "Astronaut"})
    assert [q["id"][:3] for q in resp.json()["data"]] == ["se-"] * 5


def test_role_lookup_is_exact_match(client):
    resp = client.post("/api/ai/generate-questions", json={"jobRole": "backend developer"})
    assert [q["id"][:3] for q in resp.json()["data"]] == ["se-"] * 5


def test_roles_listing(client):
    data = client.get("/api/ai/roles").json()["data"]
    assert len(data) == 8
    assert data[0] == "Frontend Developer"
    assert "Software Engineer" in data


def test_evaluate_answer(client):
    resp = client.post(
        "/api/ai/evaluate-answer",
        json={"question": "Explain closures.", "answer": "It depends.", "difficulty": "Hard"},
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["score"] == 4.0
    assert data["feedback"].startswith("Adequate answer.")
    assert "timestamp" in data


def test_generate_summary(client):
    resp = client.post(
        "/api/ai/generate-summary",
        json={
            "answers": [{"score": 9}, {"score": 8}, {"score": 9.5}],
            "candidateInfo": {"name": "Ada", "jobRole": "Data Scientist"},
        },
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["overallScore"] == 8.8
    assert data["totalQuestions"] == 3
    assert data["recommendation"] == "Highly Recommended"
    assert "Ada" in data["feedback"] and "Data Scientist" in data["feedback"]
    assert data["areasForImprovement"] == ["Continue building on current expertise"]


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["environment"]


def test_error_envelope_is_documented(client):
    schema = client.get("/openapi.json").json()
    ref = "#/components/schemas/ErrorResponse"
    start = schema["paths"]["/api/interviews"]["post"]["responses"]
    assert start["409"]["content"]["application/json"]["schema"]["$ref"] == ref
    detail = schema["paths"]["/api/interviews/{candidate_id}"]["get"]["responses"]
    assert detail["404"]["content"]["application/json"]["schema"]["$ref"] == ref
    evaluate = schema["paths"]["/api/ai/evaluate-answer"]["post"]["responses"]
    assert evaluate["400"]["content"]["application/json"]["schema"]["$ref"] == ref
    assert "candidateId" in schema["components"]["schemas"]["ErrorResponse"]["properties"]
