import pytest

from heuristics import generate_questions
from interviews import Answer, Candidate, InvalidTransitionError, advance_status, recompute_derived


def _candidate(**overrides):
    data = {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "job_role": "Backend Developer",
        "resume_text": "backend",
        "questions": generate_questions("Backend Developer")[:4],
    }
    data.update(overrides)
    return Candidate(**data)


def _answer(question_id, score, time_spent):
    return Answer(question_id=question_id, text="...", score=score, feedback="ok", time_spent=time_spent)


def test_recompute_derived_fields():
    candidate = _candidate()
    candidate.answers = [_answer("be-1", 6.0, 30), _answer("be-2", 7.5, 45), _answer("be-3", 9.0, 60)]
    recompute_derived(candidate)
    assert candidate.final_score == 7.5
    assert candidate.completion_percentage == 75
    assert candidate.total_time_spent == 135


def test_final_score_rounds_to_two_decimals():
    candidate = _candidate()
    candidate.answers = [_answer("be-1", 7.0, 0), _answer("be-2", 8.0, 0), _answer("be-3", 8.0, 0)]
    assert recompute_derived(candidate).final_score == 7.67


def test_no_answers_keeps_score_and_zero_progress():
    candidate = _candidate(questions=[])
    recompute_derived(candidate)
    assert candidate.final_score == 0.0
    assert candidate.completion_percentage == 0
    assert candidate.total_time_spent == 0


def test_status_only_moves_forward():
    candidate = _candidate()
    advance_status(candidate, "in-progress")
    advance_status(candidate, "completed")
    advance_status(candidate, "completed")
    assert candidate.status == "completed"
    with pytest.raises(InvalidTransitionError):
        advance_status(candidate, "in-progress")


def test_final_score_rounds_half_up():
    candidate = _candidate()
    candidate.answers = [
        _answer("be-1", 10.0, 0),
        _answer("be-2", 10.0, 0),
        _answer("be-3", 9.5, 0),
        _answer("be-4", 9.0, 0),
    ]
    assert recompute_derived(candidate).final_score == 9.63
