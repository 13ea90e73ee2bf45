"""FastAPI routes exposing the heuristic evaluators directly."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter

from api.schemas import (
    AnalyzeResumeReq,
    ApiResponse,
    ErrorResponse,
    EvaluateAnswerReq,
    GenerateQuestionsReq,
    GenerateSummaryReq,
)
from heuristics import (
    AnswerEvaluation,
    FinalSummary,
    Question,
    ResumeFields,
    analyze_resume,
    evaluate_answer,
    generate_questions,
    generate_summary,
    known_roles,
)
from interviews.errors import ValidationError

router = APIRouter(
    prefix="/api/ai",
    tags=["ai"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


def _require(value, message: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(message)


@router.post("/analyze-resume", response_model=ApiResponse[ResumeFields])
def analyze(req: AnalyzeResumeReq) -> ApiResponse[ResumeFields]:
    _require(req.resume_text, "Resume text is required")
    return ApiResponse[ResumeFields](data=analyze_resume(req.resume_text))


@router.post("/generate-questions", response_model=ApiResponse[List[Question]])
def questions(req: GenerateQuestionsReq) -> ApiResponse[List[Question]]:
    _require(req.job_role, "Job role is required")
    return ApiResponse[List[Question]](data=generate_questions(req.job_role, req.difficulty))


@router.get("/roles", response_model=ApiResponse[List[str]])
def roles() -> ApiResponse[List[str]]:
    return ApiResponse[List[str]](data=known_roles())


@router.post("/evaluate-answer", response_model=ApiResponse[AnswerEvaluation])
def evaluate(req: EvaluateAnswerReq) -> ApiResponse[AnswerEvaluation]:
    _require(req.question, "Question and answer are required")
    _require(req.answer, "Question and answer are required")
    return ApiResponse[AnswerEvaluation](
        data=evaluate_answer(req.question, req.answer, req.difficulty or "Medium")
    )


@router.post("/generate-summary", response_model=ApiResponse[FinalSummary])
def summary(req: GenerateSummaryReq) -> ApiResponse[FinalSummary]:
    if not req.answers:
        raise ValidationError("Answers are required for summary generation")
    return ApiResponse[FinalSummary](data=generate_summary(req.answers, req.candidate_info))
