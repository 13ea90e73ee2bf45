"""Error taxonomy surfaced by the interview service."""
from __future__ import annotations

from typing import Any, Dict, Optional


class InterviewError(Exception):  # Base error carrying a stable code and HTTP status
    code = "internal_error"
    status_code = 500

    def __init__(self, message: str, *, extra: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.extra: Dict[str, Any] = dict(extra or {})

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": False, "error": self.message, "code": self.code}
        payload.update(self.extra)
        return payload


class ValidationError(InterviewError):  # Missing or malformed fields
    code = "validation_error"
    status_code = 400


class ConflictError(InterviewError):  # Duplicate email
    code = "conflict"
    status_code = 409

    def __init__(self, message: str, *, candidate_id: Optional[str] = None) -> None:
        super().__init__(message, extra={"candidateId": candidate_id} if candidate_id else None)
        self.candidate_id = candidate_id


class NotFoundError(InterviewError):  # Unknown candidate, question or session
    code = "not_found"
    status_code = 404


class InternalError(InterviewError):  # Unexpected persistence or logic failure
    code = "internal_error"
    status_code = 500


class InvalidTransitionError(InternalError):  # Candidate status moved backwards
    code = "invalid_transition"


__all__ = [
    "ConflictError",
    "InterviewError",
    "InternalError",
    "InvalidTransitionError",
    "NotFoundError",
    "ValidationError",
]
