"""FastAPI routes for candidate interviews."""
from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Response

from api.deps import get_service
from api.schemas import (
    AnswerData,
    ApiResponse,
    CompletionData,
    ErrorResponse,
    StartInterviewData,
    StartInterviewReq,
    SubmitAnswerReq,
)
from interviews.models import Candidate, CandidateSummary, InterviewSession
from interviews.service import InterviewService
from reports import generate_candidate_report_pdf

ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter(prefix="/api/interviews", tags=["interviews"], responses=ERRORS)

StatusFilter = Literal["pending", "in-progress", "completed"]
SortKey = Literal["createdAt", "finalScore"]


@router.post(
    "",
    response_model=ApiResponse[StartInterviewData],
    status_code=201,
    responses={409: {"model": ErrorResponse, "description": "Email already registered"}},
)
def start_interview(
    req: StartInterviewReq,
    service: InterviewService = Depends(get_service),
) -> ApiResponse[StartInterviewData]:
    result = service.start_interview(
        name=req.name,
        email=req.email,
        phone=req.phone,
        job_role=req.job_role,
        resume_text=req.resume_text,
        difficulty=req.difficulty,
    )
    return ApiResponse[StartInterviewData](
        data=StartInterviewData(
            candidate_id=result.candidate_id,
            session_id=result.session_id,
            questions=result.question_count,
        )
    )


@router.get("", response_model=ApiResponse[List[CandidateSummary]])
def list_interviews(
    status: Optional[StatusFilter] = None,
    search: Optional[str] = None,
    sort: SortKey = "createdAt",
    service: InterviewService = Depends(get_service),
) -> ApiResponse[List[CandidateSummary]]:
    return ApiResponse[List[CandidateSummary]](
        data=service.list_candidates(status=status, search=search, sort=sort)
    )


@router.get("/{candidate_id}", response_model=ApiResponse[Candidate])
def get_interview(candidate_id: str, service: InterviewService = Depends(get_service)) -> ApiResponse[Candidate]:
    return ApiResponse[Candidate](data=service.get_candidate(candidate_id))


@router.put("/{candidate_id}/answer", response_model=ApiResponse[AnswerData])
def submit_answer(
    candidate_id: str,
    req: SubmitAnswerReq,
    service: InterviewService = Depends(get_service),
) -> ApiResponse[AnswerData]:
    result = service.submit_answer(
        candidate_id,
        answer=req.answer,
        question_index=req.question_index,
        question_id=req.question_id,
        time_spent=req.time_spent,
    )
    return ApiResponse[AnswerData](
        data=AnswerData(
            score=result.score,
            feedback=result.feedback,
            questions_answered=result.questions_answered,
            total_questions=result.total_questions,
        )
    )


@router.post("/{candidate_id}/complete", response_model=ApiResponse[CompletionData])
def complete_interview(
    candidate_id: str,
    service: InterviewService = Depends(get_service),
) -> ApiResponse[CompletionData]:
    result = service.complete_interview(candidate_id)
    return ApiResponse[CompletionData](
        data=CompletionData(
            final_score=result.final_score,
            feedback=result.feedback,
            recommendation=result.recommendation,
            strengths=result.strengths,
            areas_for_improvement=result.areas_for_improvement,
            completed_at=result.completed_at,
        )
    )


@router.get("/{candidate_id}/session", response_model=ApiResponse[InterviewSession])
def get_session(
    candidate_id: str,
    service: InterviewService = Depends(get_service),
) -> ApiResponse[InterviewSession]:
    return ApiResponse[InterviewSession](data=service.get_session(candidate_id))


@router.get("/{candidate_id}/report", response_class=Response)
def download_report(candidate_id: str, service: InterviewService = Depends(get_service)) -> Response:
    candidate = service.get_candidate(candidate_id)
    pdf_bytes = generate_candidate_report_pdf(candidate)
    filename = f"interview-report-{candidate.id}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
