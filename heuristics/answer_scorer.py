"""Heuristic answer scoring: length, content cues and difficulty."""
from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Pattern, Tuple

from observability import log_event

from .types import AnswerEvaluation

logger = logging.getLogger(__name__)

BASE_SCORE = 5.0
MIN_SCORE = 0.0
MAX_SCORE = 10.0

# (exclusive upper bound on trimmed length, bonus, feedback); None bound is the tail
LENGTH_BANDS: Tuple[Tuple[int | None, float, str], ...] = (
    (20, 0.0, "Answer is too brief."),
    (100, 1.0, "Answer could be more detailed."),
    (300, 2.0, "Good level of detail."),
    (500, 3.0, "Comprehensive answer."),
    (None, 2.5, "Very detailed response."),
)

CONTENT_CUES: Tuple[Tuple[Pattern[str], float, str], ...] = (
    (re.compile(r"example|for instance|such as|like|consider", re.IGNORECASE), 1.0, "Includes good examples."),
    (re.compile(r"because|since|due to|reason|explain", re.IGNORECASE), 1.0, "Provides clear explanations."),
    (
        re.compile(r"function|method|algorithm|data|system|process|implement", re.IGNORECASE),
        0.5,
        "Uses appropriate technical language.",
    ),
)

# (minimum score, opening, closing), checked top down
SCORE_BANDS: Tuple[Tuple[float, str, str], ...] = (
    (8.0, "Excellent answer!", "Demonstrates strong understanding."),
    (6.0, "Good answer.", "Shows solid knowledge with room for improvement."),
    (4.0, "Adequate answer.", "Consider providing more depth and examples."),
    (MIN_SCORE, "Answer needs improvement.", "Please provide more detailed explanations."),
)

FAILURE_FEEDBACK = "Unable to evaluate answer properly. Please try again."


def _round_1dp(value: float) -> float:  # halves round up
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def length_bonus(length: int) -> Tuple[float, str]:
    for bound, bonus, note in LENGTH_BANDS:
        if bound is None or length < bound:
            return bonus, note
    raise AssertionError("unreachable: LENGTH_BANDS ends with an open band")


def difficulty_adjustment(difficulty: str, length: int) -> float:
    level = (difficulty or "").strip().lower()
    if level == "easy":
        return 0.5 if length > 50 else 0.0
    if level == "hard":
        return -1.0 if length < 200 else 1.0
    return 0.0


def _band_phrases(score: float) -> Tuple[str, str]:
    for floor, opening, closing in SCORE_BANDS:
        if score >= floor:
            return opening, closing
    return SCORE_BANDS[-1][1], SCORE_BANDS[-1][2]


def evaluate_answer(question: str, answer: str, difficulty: str = "Medium") -> AnswerEvaluation:
    """Score an answer on a 0-10 scale with templated feedback."""

    try:
        length = len((answer or "").strip())
        score = BASE_SCORE
        notes: List[str] = []

        bonus, note = length_bonus(length)
        score += bonus
        notes.append(note)

        for pattern, cue_bonus, cue_note in CONTENT_CUES:
            if pattern.search(answer or ""):
                score += cue_bonus
                notes.append(cue_note)

        score += difficulty_adjustment(difficulty, length)
        score = _round_1dp(max(MIN_SCORE, min(MAX_SCORE, score)))

        opening, closing = _band_phrases(score)
        feedback = " ".join([opening, *notes, closing])
        result = AnswerEvaluation(score=score, feedback=feedback)
    except Exception:  # noqa: BLE001
        logger.exception("Answer evaluation failed")
        return AnswerEvaluation(score=BASE_SCORE, feedback=FAILURE_FEEDBACK)

    log_event("answer_scored", "-", difficulty=difficulty, score=result.score, question=(question or "")[:50])
    return result


__all__ = ["evaluate_answer", "difficulty_adjustment", "length_bonus", "FAILURE_FEEDBACK"]
