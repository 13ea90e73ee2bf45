"""SQLite persistence for candidates and interview sessions."""
from .candidates import CandidateStore
from .migrate import migrate
from .sessions import SessionStore
from .sqlite import DatabaseClosedError, InterviewDatabase

__all__ = ["CandidateStore", "DatabaseClosedError", "InterviewDatabase", "SessionStore", "migrate"]
