from heuristics import generate_questions
from interviews.models import Answer, Candidate
from reports import generate_candidate_report_pdf
from reports.pdf import _latin1


def _candidate(**overrides) -> Candidate:
    fields = dict(
        name="Jane Smith",
        email="jane@example.com",
        job_role="Frontend Developer",
        resume_text="React",
        questions=generate_questions("Frontend Developer"),
    )
    fields.update(overrides)
    return Candidate(**fields)


def test_report_for_fresh_candidate():
    pdf = generate_candidate_report_pdf(_candidate())
    assert isinstance(pdf, bytes)
    assert pdf.startswith(b"%PDF")


def test_report_with_answers_and_summary():
    candidate = _candidate(
        status="completed",
        answers=[
            Answer(question_id="fe-1", text="let and const are block scoped…", score=7.5, feedback="Good answer.", time_spent=42),
        ],
        final_score=7.5,
        final_feedback="Strong performance — clear answers.",
        strengths=["Good technical foundation"],
        areas_for_improvement=["Include more practical examples"],
        recommendation="Recommended",
    )
    assert generate_candidate_report_pdf(candidate).startswith(b"%PDF")


def test_report_handles_text_outside_latin1():
    candidate = _candidate(name="Zoë 王", questions=[])
    assert generate_candidate_report_pdf(candidate).startswith(b"%PDF")


def test_latin1_sanitizer():
    assert _latin1("a — b • c…") == "a - b - c..."
    assert _latin1("王") == "?"
    assert _latin1(None) == ""
