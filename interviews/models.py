"""Candidate and interview session records."""
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional
from uuid import uuid4

from pydantic import Field

from heuristics.types import CamelModel, Question, Recommendation, utcnow

CandidateStatus = Literal["pending", "in-progress", "completed"]

STATUS_ORDER = {"pending": 0, "in-progress": 1, "completed": 2}


def new_id() -> str:
    return uuid4().hex


class Answer(CamelModel):  # Replaced in place when the same question is answered again
    question_id: str
    text: str
    score: float = Field(ge=0.0, le=10.0)
    feedback: str
    time_spent: int = Field(default=0, ge=0)  # seconds
    answered_at: datetime = Field(default_factory=utcnow)


class Candidate(CamelModel):  # Profile, transcript and verdict
    id: str = Field(default_factory=new_id)
    name: str
    email: str
    phone: str = ""
    job_role: str
    resume_text: str
    questions: List[Question] = Field(default_factory=list)
    answers: List[Answer] = Field(default_factory=list)
    final_score: float = Field(default=0.0, ge=0.0, le=10.0)
    final_feedback: str = ""
    status: CandidateStatus = "pending"
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)  # every persisted mutation
    completed_at: Optional[datetime] = None

    # Written on completion
    feedback: str = ""  # same text as final_feedback
    overall_score: Optional[float] = Field(default=None, ge=0.0, le=10.0)
    total_questions: Optional[int] = None
    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    recommendation: Optional[Recommendation] = None

    # Derived, see interviews.derived
    completion_percentage: int = 0
    total_time_spent: int = 0

    def question_at(self, index: int) -> Optional[Question]:
        if 0 <= index < len(self.questions):
            return self.questions[index]
        return None

    def question_by_id(self, question_id: str) -> Optional[Question]:
        return next((q for q in self.questions if q.id == question_id), None)


class CandidateSummary(CamelModel):  # Dashboard list row
    id: str
    name: str
    email: str
    job_role: str
    final_score: float
    status: CandidateStatus
    created_at: datetime
    completed_at: Optional[datetime] = None
    questions_answered: int
    total_questions: int
    recommendation: Optional[Recommendation] = None

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> "CandidateSummary":
        return cls(
            id=candidate.id,
            name=candidate.name,
            email=candidate.email,
            job_role=candidate.job_role,
            final_score=candidate.final_score,
            status=candidate.status,
            created_at=candidate.created_at,
            completed_at=candidate.completed_at,
            questions_answered=len(candidate.answers),
            total_questions=len(candidate.questions),
            recommendation=candidate.recommendation,
        )


class InterviewSession(CamelModel):  # Progress tracker, one per candidate
    id: str = Field(default_factory=new_id)
    candidate_id: str
    current_question_index: int = Field(default=0, ge=0)
    is_active: bool = True
    started_at: datetime = Field(default_factory=utcnow)
    last_activity_at: datetime = Field(default_factory=utcnow)
    time_remaining: int = Field(default=3600, ge=0)  # seconds


__all__ = [
    "Answer",
    "Candidate",
    "CandidateStatus",
    "CandidateSummary",
    "InterviewSession",
    "STATUS_ORDER",
    "new_id",
]
