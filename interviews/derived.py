"""Recompute candidate fields that depend on the answer list."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .errors import InvalidTransitionError
from .models import STATUS_ORDER, Candidate, CandidateStatus


def _round_2dp(value: float) -> float:  # halves round up
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def recompute_derived(candidate: Candidate) -> Candidate:
    """Refresh finalScore, completionPercentage and totalTimeSpent in place.

    finalScore keeps its previous value when there are no answers.
    """

    answers = candidate.answers
    if answers:
        candidate.final_score = _round_2dp(sum(a.score for a in answers) / len(answers))
    if candidate.questions:
        candidate.completion_percentage = round(len(answers) / len(candidate.questions) * 100)
    else:
        candidate.completion_percentage = 0
    candidate.total_time_spent = sum(a.time_spent for a in answers)
    return candidate


def advance_status(candidate: Candidate, target: CandidateStatus) -> Candidate:
    """Move the candidate forward through pending, in-progress, completed."""

    if STATUS_ORDER[target] < STATUS_ORDER[candidate.status]:
        raise InvalidTransitionError(
            f"Cannot move candidate {candidate.id} from {candidate.status} to {target}"
        )
    candidate.status = target
    return candidate


__all__ = ["advance_status", "recompute_derived"]
