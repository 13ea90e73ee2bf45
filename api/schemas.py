"""Pydantic schemas for the interview REST API."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import Field

from heuristics.types import CamelModel, CandidateInfo

T = TypeVar("T")


class ApiResponse(CamelModel, Generic[T]):  # Success envelope shared by every endpoint
    success: bool = True
    data: T


class ErrorResponse(CamelModel):
    success: bool = False
    error: str
    code: str
    candidate_id: Optional[str] = None


# Required fields are checked by the service so that gaps surface as 400s
class StartInterviewReq(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    job_role: Optional[str] = None
    resume_text: Optional[str] = None
    difficulty: Optional[str] = None


class StartInterviewData(CamelModel):
    candidate_id: str
    session_id: str
    questions: int
    message: str = "Interview started successfully"


class SubmitAnswerReq(CamelModel):
    question_index: Optional[int] = Field(default=None, ge=0)
    question_id: Optional[str] = None
    answer: Optional[str] = None
    time_spent: Optional[int] = None


class AnswerData(CamelModel):
    score: float
    feedback: str
    questions_answered: int
    total_questions: int


class CompletionData(CamelModel):
    final_score: float
    feedback: str
    recommendation: str
    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    completed_at: datetime


class AnalyzeResumeReq(CamelModel):
    resume_text: Optional[str] = None


class GenerateQuestionsReq(CamelModel):
    job_role: Optional[str] = None
    difficulty: Optional[str] = None


class EvaluateAnswerReq(CamelModel):
    question: Optional[str] = None
    answer: Optional[str] = None
    difficulty: Optional[str] = None


class GenerateSummaryReq(CamelModel):
    answers: Optional[List[Dict[str, Any]]] = None
    candidate_info: Optional[CandidateInfo] = None


class HealthResp(CamelModel):
    status: str = "OK"
    message: str
    timestamp: datetime
    environment: str
