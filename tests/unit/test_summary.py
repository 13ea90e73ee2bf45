import pytest

from heuristics import generate_summary
import heuristics.summary as summary_module
from heuristics.summary import band_for


def _answers(*scores):
    return [{"questionId": f"q{i}", "score": score} for i, score in enumerate(scores)]


def test_high_scores_are_highly_recommended():
    summary = generate_summary(_answers(9, 8, 9.5), {"name": "Ada Lovelace", "jobRole": "Backend Developer"})
    assert summary.overall_score == 8.8
    assert summary.total_questions == 3
    assert summary.recommendation == "Highly Recommended"
    assert summary.feedback.startswith("Outstanding performance! Ada Lovelace")
    assert "Backend Developer interview" in summary.feedback
    assert summary.areas_for_improvement == ["Continue building on current expertise"]


def test_empty_answers_score_zero():
    summary = generate_summary([])
    assert summary.overall_score == 0.0
    assert summary.total_questions == 0
    assert summary.recommendation == "Not Recommended"
    assert summary.feedback == "Below expectations. The candidate showed limited understanding of key concepts."


@pytest.mark.parametrize(
    "score,recommendation",
    [
        (10.0, "Highly Recommended"),
        (8.5, "Highly Recommended"),
        (8.4, "Recommended"),
        (7.0, "Recommended"),
        (6.9, "Maybe"),
        (5.5, "Maybe"),
        (5.4, "Not Recommended"),
        (0.0, "Not Recommended"),
    ],
)
def test_band_edges(score, recommendation):
    assert band_for(score).recommendation == recommendation
    assert generate_summary(_answers(score)).recommendation == recommendation


def test_default_phrasing_without_candidate_info():
    summary = generate_summary(_answers(7, 8))
    assert summary.overall_score == 7.5
    assert summary.feedback == (
        "Strong performance. The candidate showed solid understanding of technical concepts "
        "with good communication skills."
    )


def test_missing_scores_count_as_zero():
    summary = generate_summary([{"score": 9}, {"questionId": "q2"}])
    assert summary.overall_score == 4.5


def test_unreadable_scores_fall_back_to_generic_summary():
    summary = generate_summary([{"score": "not-a-number"}, {"score": 8}])
    assert summary.feedback == "Interview completed successfully."
    assert summary.strengths == ["Participated in interview"]
    assert summary.areas_for_improvement == ["Continue development"]
    assert summary.overall_score == 4.0
    assert summary.recommendation == "Not Recommended"


def test_half_point_ties_round_up_into_higher_band():
    summary = generate_summary(_answers(8.4, 8.5))
    assert summary.overall_score == 8.5
    assert summary.recommendation == "Highly Recommended"


def test_fallback_summary_rounds_halves_up(monkeypatch):
    def boom(_score):
        raise RuntimeError("band lookup failed")

    monkeypatch.setattr(summary_module, "band_for", boom)
    summary = generate_summary(_answers(6.25, 5.65))
    assert summary.overall_score == 6.0
    assert summary.recommendation == "Recommended"
