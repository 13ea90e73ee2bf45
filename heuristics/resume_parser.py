"""Regex-based résumé field extraction."""
from __future__ import annotations

import logging
import re
from typing import Dict, List, Pattern, Tuple

from observability import log_event

from .types import ResumeFields

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "Software Engineer"

EMAIL_PATTERN = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

# Tried in order, first capture wins
NAME_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"(?i:name|candidate)[:\-\s]+([A-Z][a-z]+\s+[A-Z][a-z]+)"),
    re.compile(r"^([A-Z][a-z]+[ \t]+[A-Z][a-z]+)", re.MULTILINE),
    re.compile(r"(?i:resume|cv|curriculum)[^\n]*\n.*?([A-Z][a-z]+\s+[A-Z][a-z]+)"),
)

# Declaration order breaks ties
ROLE_KEYWORDS: Dict[str, List[str]] = {
    "Frontend Developer": [
        "react", "vue", "angular", "javascript", "typescript", "html", "css",
        "frontend", "front-end", "ui", "ux", "web development", "responsive",
    ],
    "Backend Developer": [
        "node", "python", "java", "spring", "django", "flask", "backend",
        "back-end", "api", "server", "database", "microservices", "rest",
    ],
    "Full Stack Developer": [
        "fullstack", "full-stack", "full stack", "mean", "mern", "lamp",
        "end-to-end", "frontend and backend",
    ],
    "Data Scientist": [
        "python", "r", "machine learning", "ml", "data science", "pandas",
        "numpy", "tensorflow", "pytorch", "analytics", "statistics",
    ],
    "DevOps Engineer": [
        "devops", "aws", "azure", "docker", "kubernetes", "jenkins", "ci/cd",
        "terraform", "ansible", "linux", "cloud",
    ],
    "Product Manager": [
        "product manager", "product management", "product strategy", "roadmap",
        "agile", "scrum", "stakeholder",
    ],
    "QA Engineer": [
        "qa", "quality assurance", "testing", "automation", "selenium",
        "test cases", "bug tracking", "quality",
    ],
    DEFAULT_ROLE: [
        "software engineer", "software development", "programming", "coding",
        "algorithms", "data structures",
    ],
}


def _first_match(pattern: Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""


def extract_name(text: str) -> str:
    for pattern in NAME_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1):
            return match.group(1).strip()
    return ""


def infer_job_role(text: str) -> Tuple[str, int]:
    """Return the role with the most keyword hits and its hit count."""

    lowered = text.lower()
    best_role = DEFAULT_ROLE
    best_count = 0
    for role, keywords in ROLE_KEYWORDS.items():
        count = sum(1 for keyword in keywords if keyword in lowered)
        if count > best_count:
            best_role, best_count = role, count
    return best_role, best_count


def analyze_resume(resume_text: str) -> ResumeFields:
    """Extract name, email, phone and a job role guess from raw résumé text."""

    try:
        text = resume_text or ""
        role, matches = infer_job_role(text)
        fields = ResumeFields(
            name=extract_name(text),
            email=_first_match(EMAIL_PATTERN, text),
            phone=_first_match(PHONE_PATTERN, text),
            job_role=role,
        )
    except Exception:  # noqa: BLE001
        logger.exception("Résumé analysis failed")
        return ResumeFields()

    log_event("resume_analyzed", "-", role=fields.job_role, count=matches)
    return fields


__all__ = ["DEFAULT_ROLE", "ROLE_KEYWORDS", "analyze_resume", "extract_name", "infer_job_role"]
