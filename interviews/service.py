"""Interview orchestration over candidate and session records."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from config.settings import settings
from heuristics import evaluate_answer, generate_questions, generate_summary
from heuristics.types import CandidateInfo, utcnow
from observability import log_event, span
from storage.candidates import CandidateStore
from storage.sessions import SessionStore
from storage.sqlite import InterviewDatabase

from .derived import advance_status, recompute_derived
from .errors import ConflictError, NotFoundError, ValidationError
from .models import Answer, Candidate, CandidateSummary, InterviewSession

EMAIL_FORMAT = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class StartResult:
    candidate_id: str
    session_id: str
    question_count: int


@dataclass
class AnswerResult:
    score: float
    feedback: str
    questions_answered: int
    total_questions: int


@dataclass
class CompletionResult:
    final_score: float
    feedback: str
    recommendation: str
    completed_at: datetime
    strengths: List[str] = field(default_factory=list)
    areas_for_improvement: List[str] = field(default_factory=list)


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class InterviewService:
    """Sequences résumé intake, questions, scoring and the final verdict.

    Every transition runs inside a single database transaction, so readers
    never observe a half-applied start, answer or completion. Concurrent
    answers for the same candidate are last-write-wins.
    """

    def __init__(self, db: InterviewDatabase, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._db = db
        self._clock = clock or utcnow
        self.candidates = CandidateStore(db)
        self.sessions = SessionStore(db)

    def start_interview(
        self,
        *,
        name: Optional[str],
        email: Optional[str],
        job_role: Optional[str],
        resume_text: Optional[str],
        phone: Optional[str] = None,
        difficulty: Optional[str] = None,
    ) -> StartResult:
        missing = [
            label
            for label, value in (("name", name), ("email", email), ("jobRole", job_role), ("resumeText", resume_text))
            if _blank(value)
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        email = str(email).strip()
        if not EMAIL_FORMAT.match(email):
            raise ValidationError("Please enter a valid email address")

        questions = generate_questions(job_role, difficulty or settings.DEFAULT_DIFFICULTY)
        now = self._clock()
        candidate = Candidate(
            name=str(name).strip(),
            email=email,
            phone=phone or "",
            job_role=job_role,
            resume_text=resume_text,
            questions=questions,
            created_at=now,
            updated_at=now,
        )
        advance_status(candidate, "in-progress")
        recompute_derived(candidate)
        session = InterviewSession(
            candidate_id=candidate.id,
            started_at=now,
            last_activity_at=now,
            time_remaining=settings.SESSION_TIME_LIMIT_S,
        )

        with span("start_interview", candidate.id), self._db.transaction() as conn:
            existing = self.candidates.get_by_email(email, conn=conn)
            if existing is not None:
                raise ConflictError("Candidate with this email already exists", candidate_id=existing.id)
            self.candidates.insert(candidate, conn=conn)
            self.sessions.insert(session, conn=conn)

        log_event("interview_started", candidate.id, role=candidate.job_role, count=len(questions))
        return StartResult(candidate_id=candidate.id, session_id=session.id, question_count=len(questions))

    def list_candidates(
        self,
        *,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort: str = "createdAt",
    ) -> List[CandidateSummary]:
        return [
            CandidateSummary.from_candidate(candidate)
            for candidate in self.candidates.list(status=status, search=search, sort=sort)
        ]

    def get_candidate(self, candidate_id: str) -> Candidate:
        candidate = self.candidates.get(candidate_id)
        if candidate is None:
            raise NotFoundError("Candidate not found")
        return candidate

    def get_session(self, candidate_id: str) -> InterviewSession:
        session = self.sessions.get_by_candidate(candidate_id)
        if session is None:
            raise NotFoundError("Session not found")
        return session

    def submit_answer(
        self,
        candidate_id: str,
        *,
        answer: Optional[str],
        question_index: Optional[int] = None,
        question_id: Optional[str] = None,
        time_spent: Optional[int] = None,
    ) -> AnswerResult:
        """Score and store an answer, replacing any earlier one for the question.

        The question is resolved by ``question_index`` when given, otherwise by
        ``question_id``. The session index is not advanced here; clients
        track progress through the answered count.
        """

        if (question_index is None and _blank(question_id)) or answer is None:
            raise ValidationError("Missing required fields: (questionIndex or questionId) and answer")
        if time_spent is not None and time_spent < 0:
            raise ValidationError("timeSpent must be zero or positive")

        with span("submit_answer", candidate_id), self._db.transaction() as conn:
            candidate = self.candidates.get(candidate_id, conn=conn)
            if candidate is None:
                raise NotFoundError("Candidate not found")

            if question_index is not None:
                question = candidate.question_at(question_index)
                if question is not None and question_id and question_id != question.id:
                    log_event(
                        "answer_target_mismatch",
                        candidate_id,
                        level=logging.WARNING,
                        question_id=question.id,
                        requested_id=question_id,
                        index=question_index,
                    )
            else:
                question = candidate.question_by_id(question_id)
            if question is None:
                raise NotFoundError("Question not found")

            evaluation = evaluate_answer(question.text, answer, question.difficulty)
            record = Answer(
                question_id=question.id,
                text=answer,
                score=evaluation.score,
                feedback=evaluation.feedback,
                time_spent=time_spent or 0,
                answered_at=self._clock(),
            )
            existing = next(
                (idx for idx, prior in enumerate(candidate.answers) if prior.question_id == question.id),
                None,
            )
            if existing is None:
                candidate.answers.append(record)
            else:
                candidate.answers[existing] = record
            recompute_derived(candidate)
            candidate.updated_at = record.answered_at
            self.candidates.update(candidate, conn=conn)

            session = self.sessions.get_by_candidate(candidate_id, conn=conn)
            if session is not None:
                session.last_activity_at = record.answered_at
                self.sessions.update(session, conn=conn)

        log_event("answer_saved", candidate_id, question_id=question.id, score=evaluation.score)
        return AnswerResult(
            score=evaluation.score,
            feedback=evaluation.feedback,
            questions_answered=len(candidate.answers),
            total_questions=len(candidate.questions),
        )

    def complete_interview(self, candidate_id: str) -> CompletionResult:
        """Write the final summary and close the session.

        Calling this again recomputes the summary from the stored answers and
        overwrites it.
        """

        with span("complete_interview", candidate_id), self._db.transaction() as conn:
            candidate = self.candidates.get(candidate_id, conn=conn)
            if candidate is None:
                raise NotFoundError("Candidate not found")
            if len(candidate.answers) < len(candidate.questions):
                log_event(
                    "partial_completion",
                    candidate_id,
                    count=len(candidate.answers),
                    total=len(candidate.questions),
                )

            summary = generate_summary(
                candidate.answers,
                CandidateInfo(name=candidate.name, job_role=candidate.job_role, email=candidate.email),
            )
            now = self._clock()
            candidate.final_score = summary.overall_score
            candidate.final_feedback = summary.feedback
            candidate.feedback = summary.feedback
            candidate.overall_score = summary.overall_score
            candidate.total_questions = summary.total_questions
            candidate.strengths = list(summary.strengths)
            candidate.areas_for_improvement = list(summary.areas_for_improvement)
            candidate.recommendation = summary.recommendation
            advance_status(candidate, "completed")
            candidate.completed_at = now
            candidate.updated_at = now
            recompute_derived(candidate)
            self.candidates.update(candidate, conn=conn)

            session = self.sessions.get_by_candidate(candidate_id, conn=conn)
            if session is not None:
                session.is_active = False
                session.last_activity_at = now
                self.sessions.update(session, conn=conn)

        log_event(
            "interview_completed",
            candidate_id,
            score=summary.overall_score,
            recommendation=summary.recommendation,
        )
        return CompletionResult(
            final_score=summary.overall_score,
            feedback=summary.feedback,
            recommendation=summary.recommendation,
            completed_at=now,
            strengths=list(summary.strengths),
            areas_for_improvement=list(summary.areas_for_improvement),
        )

    def purge_stale_sessions(self, max_age_hours: Optional[int] = None) -> int:
        hours = max_age_hours if max_age_hours is not None else settings.STALE_SESSION_HOURS
        cutoff = self._clock() - timedelta(hours=hours)
        removed = self.sessions.purge_stale(cutoff)
        log_event("sessions_purged", "-", count=removed)
        return removed


__all__ = ["AnswerResult", "CompletionResult", "InterviewService", "StartResult"]
