"""Request-scoped access to the application's interview service."""
from __future__ import annotations

from fastapi import Request

from interviews.service import InterviewService


def get_service(request: Request) -> InterviewService:
    return request.app.state.service
