"""Template-based final interview summary."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from observability import log_event

from .types import CandidateInfo, FinalSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryBand:
    floor: float
    feedback: str  # format fields: name, role
    strengths: Tuple[str, ...]
    improvements: Tuple[str, ...]
    recommendation: str


# Checked top down; each band covers [floor, previous floor)
BANDS: Tuple[SummaryBand, ...] = (
    SummaryBand(
        8.5,
        "Outstanding performance! {name} demonstrated exceptional knowledge and communication "
        "skills throughout the {role} interview.",
        (
            "Excellent technical knowledge",
            "Clear and articulate communication",
            "Comprehensive understanding of concepts",
        ),
        ("Continue building on current expertise",),
        "Highly Recommended",
    ),
    SummaryBand(
        7.0,
        "Strong performance. {name} showed solid understanding of {role} concepts with good "
        "communication skills.",
        (
            "Good technical foundation",
            "Effective communication",
            "Sound understanding of core concepts",
        ),
        ("Provide more detailed explanations", "Include more practical examples"),
        "Recommended",
    ),
    SummaryBand(
        5.5,
        "Satisfactory performance. {name} demonstrated basic understanding but lacked depth in "
        "some areas.",
        ("Basic technical understanding", "Willingness to learn"),
        (
            "Develop deeper technical knowledge",
            "Practice explaining concepts clearly",
            "Gain more hands-on experience",
        ),
        "Maybe",
    ),
    SummaryBand(
        0.0,
        "Below expectations. {name} showed limited understanding of key concepts.",
        ("Shows potential for growth",),
        ("Significant technical skill development needed", "Study fundamental concepts thoroughly"),
        "Not Recommended",
    ),
)

FALLBACK_PASS_SCORE = 6.0


def _round_1dp(value: float) -> float:  # halves round up, so 8.45 reaches the top band
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _score_of(answer: Any) -> float:
    if isinstance(answer, Mapping):
        raw = answer.get("score")
    else:
        raw = getattr(answer, "score", None)
    return float(raw or 0.0)


def _info(candidate_info: Any) -> CandidateInfo:
    if candidate_info is None:
        return CandidateInfo()
    if isinstance(candidate_info, CandidateInfo):
        return candidate_info
    return CandidateInfo.model_validate(candidate_info)


def mean_score(answers: Sequence[Any]) -> float:
    scores = [_score_of(answer) for answer in answers]
    if not scores:
        return 0.0
    return _round_1dp(sum(scores) / len(scores))


def band_for(score: float) -> SummaryBand:
    for band in BANDS:
        if score >= band.floor:
            return band
    return BANDS[-1]


def _fallback_summary(answers: Sequence[Any]) -> FinalSummary:
    answers = list(answers or [])
    scores: List[float] = []
    for answer in answers:
        try:
            scores.append(_score_of(answer))
        except (TypeError, ValueError):
            scores.append(0.0)
    overall = _round_1dp(sum(scores) / len(scores)) if scores else 0.0
    return FinalSummary(
        overall_score=overall,
        total_questions=len(answers),
        feedback="Interview completed successfully.",
        strengths=["Participated in interview"],
        areas_for_improvement=["Continue development"],
        recommendation="Recommended" if overall >= FALLBACK_PASS_SCORE else "Not Recommended",
    )


def generate_summary(answers: Sequence[Any], candidate_info: Optional[Any] = None) -> FinalSummary:
    """Summarize scored answers into a verdict with strengths and gaps."""

    try:
        info = _info(candidate_info)
        overall = mean_score(answers)
        band = band_for(overall)
        summary = FinalSummary(
            overall_score=overall,
            total_questions=len(answers),
            feedback=band.feedback.format(
                name=info.name or "The candidate",
                role=info.job_role or "technical",
            ),
            strengths=list(band.strengths),
            areas_for_improvement=list(band.improvements),
            recommendation=band.recommendation,
        )
    except Exception:  # noqa: BLE001
        logger.exception("Summary generation failed, using fallback")
        summary = _fallback_summary(answers)

    log_event(
        "summary_generated",
        "-",
        score=summary.overall_score,
        count=summary.total_questions,
        recommendation=summary.recommendation,
    )
    return summary


__all__ = ["BANDS", "SummaryBand", "band_for", "generate_summary", "mean_score"]
