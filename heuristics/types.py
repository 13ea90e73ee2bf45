"""Shared result types for the heuristic evaluation pipeline."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Difficulty = Literal["Easy", "Medium", "Hard"]
Recommendation = Literal["Highly Recommended", "Recommended", "Maybe", "Not Recommended"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):  # Snake-case attributes, camelCase on the wire and on disk
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResumeFields(CamelModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    job_role: str = "Software Engineer"


class Question(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    text: str
    difficulty: Difficulty
    time_limit: int = Field(ge=60, le=1800)  # seconds
    category: str


class AnswerEvaluation(CamelModel):
    score: float = Field(ge=0.0, le=10.0)
    feedback: str
    timestamp: datetime = Field(default_factory=utcnow)


class CandidateInfo(CamelModel):
    name: Optional[str] = None
    job_role: Optional[str] = None
    email: Optional[str] = None


class FinalSummary(CamelModel):
    overall_score: float
    total_questions: int
    feedback: str
    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    recommendation: Recommendation
    timestamp: datetime = Field(default_factory=utcnow)


__all__ = [
    "AnswerEvaluation",
    "CamelModel",
    "CandidateInfo",
    "Difficulty",
    "FinalSummary",
    "Question",
    "Recommendation",
    "ResumeFields",
    "utcnow",
]
