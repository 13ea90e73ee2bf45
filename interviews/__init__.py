"""Interview domain: records, errors and derived-field rules."""
from .derived import advance_status, recompute_derived
from .errors import (
    ConflictError,
    InternalError,
    InterviewError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from .models import Answer, Candidate, CandidateSummary, InterviewSession

__all__ = [
    "Answer",
    "Candidate",
    "CandidateSummary",
    "ConflictError",
    "InternalError",
    "InterviewError",
    "InterviewSession",
    "InvalidTransitionError",
    "NotFoundError",
    "ValidationError",
    "advance_status",
    "recompute_derived",
]
