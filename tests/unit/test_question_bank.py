import heuristics.question_bank as question_bank
from heuristics import generate_questions, known_roles
from heuristics.resume_parser import ROLE_KEYWORDS


def _ids(questions):
    return [q.id for q in questions]


def test_frontend_bank_in_table_order():
    questions = generate_questions("Frontend Developer")
    assert _ids(questions) == ["fe-1", "fe-2", "fe-3", "fe-4", "fe-5"]


def test_mixed_returns_full_bank():
    assert _ids(generate_questions("Backend Developer", "mixed")) == _ids(generate_questions("Backend Developer"))


def test_difficulty_filter_preserves_order_case_insensitively():
    questions = generate_questions("Software Engineer", "medium")
    assert _ids(questions) == ["se-1", "se-2"]
    assert all(q.difficulty == "Medium" for q in questions)

    assert _ids(generate_questions("Backend Developer", "Hard")) == ["be-3"]


def test_unknown_role_uses_software_engineer_bank():
    assert _ids(generate_questions("Astronaut")) == ["se-1", "se-2", "se-3", "se-4", "se-5"]
    assert _ids(generate_questions("frontend developer")) == ["se-1", "se-2", "se-3", "se-4", "se-5"]


def test_unmatched_difficulty_is_empty_not_error():
    assert generate_questions("Frontend Developer", "Expert") == []


def test_every_inferable_role_has_a_bank():
    assert set(known_roles()) == set(ROLE_KEYWORDS)
    for role in known_roles():
        questions = generate_questions(role)
        assert len(questions) >= 5
        assert all(60 <= q.time_limit <= 1800 for q in questions)
        assert len({q.id for q in questions}) == len(questions)


def test_results_do_not_share_state():
    first = generate_questions("QA Engineer")
    first.clear()
    assert len(generate_questions("QA Engineer")) == 5


def test_lookup_failure_returns_generic_question(monkeypatch):
    def boom(_role):
        raise LookupError("bank unavailable")

    monkeypatch.setattr(question_bank, "_bank_for", boom)
    questions = generate_questions("Frontend Developer")
    assert len(questions) == 1
    fallback = questions[0]
    assert fallback.text == "Tell me about your experience with Frontend Developer responsibilities."
    assert fallback.difficulty == "Medium"
    assert fallback.time_limit == 300
