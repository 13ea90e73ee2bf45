"""Static interview question bank keyed by job role."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from observability import log_event

from .types import Question

logger = logging.getLogger(__name__)

FALLBACK_ROLE = "Software Engineer"
MIXED = "mixed"

_Row = Tuple[str, str, str, int, str]  # id, text, difficulty, time limit, category

_BANK: Dict[str, List[_Row]] = {
    "Frontend Developer": [
        ("fe-1", "What is the difference between let, const, and var in JavaScript?", "Easy", 300, "JavaScript Fundamentals"),
        ("fe-2", "Explain the concept of closures in JavaScript with a practical example.", "Medium", 480, "JavaScript Advanced"),
        ("fe-3", "How would you optimize the performance of a React application?", "Hard", 600, "React Performance"),
        ("fe-4", "What is the CSS box model and how does it work?", "Easy", 300, "CSS Fundamentals"),
        ("fe-5", "Explain the difference between useEffect and useLayoutEffect in React.", "Medium", 420, "React Hooks"),
    ],
    "Backend Developer": [
        ("be-1", "What is the difference between SQL and NoSQL databases?", "Easy", 300, "Database Fundamentals"),
        ("be-2", "Explain RESTful API design principles and best practices.", "Medium", 480, "API Design"),
        ("be-3", "How would you design a scalable microservices architecture?", "Hard", 600, "System Architecture"),
        ("be-4", "What is middleware in Express.js and how do you use it?", "Easy", 300, "Node.js"),
        ("be-5", "Explain database indexing and its impact on query performance.", "Medium", 420, "Database Performance"),
    ],
    "Full Stack Developer": [
        ("fs-1", "Walk through what happens between typing a URL and the page rendering.", "Easy", 360, "Web Fundamentals"),
        ("fs-2", "How do you share validation logic between the client and the server?", "Medium", 420, "Architecture"),
        ("fs-3", "Design an end-to-end feature with real-time updates, from database to UI.", "Hard", 720, "System Design"),
        ("fs-4", "What are the trade-offs between server-side and client-side rendering?", "Medium", 480, "Rendering"),
        ("fs-5", "How would you handle authentication across a SPA and its REST API?", "Hard", 600, "Security"),
    ],
    "Data Scientist": [
        ("ds-1", "What is the difference between supervised and unsupervised learning?", "Easy", 300, "ML Fundamentals"),
        ("ds-2", "Explain the bias-variance trade-off and how it affects model choice.", "Medium", 480, "Model Evaluation"),
        ("ds-3", "How would you detect and handle data leakage in a modelling pipeline?", "Hard", 600, "Data Quality"),
        ("ds-4", "Which metrics would you use for an imbalanced classification problem?", "Medium", 420, "Metrics"),
        ("ds-5", "How do you handle missing values in a dataset?", "Easy", 300, "Data Preparation"),
    ],
    "DevOps Engineer": [
        ("do-1", "What is the difference between a container and a virtual machine?", "Easy", 300, "Containers"),
        ("do-2", "Describe the stages of a CI/CD pipeline you have built or maintained.", "Medium", 480, "CI/CD"),
        ("do-3", "How would you design a zero-downtime deployment strategy on Kubernetes?", "Hard", 600, "Orchestration"),
        ("do-4", "What is infrastructure as code and why is it useful?", "Easy", 300, "Infrastructure"),
        ("do-5", "How do you approach monitoring and alerting for a production service?", "Medium", 420, "Observability"),
    ],
    "Product Manager": [
        ("pm-1", "How do you decide what goes into the next release?", "Easy", 300, "Prioritization"),
        ("pm-2", "Describe how you would define success metrics for a new feature.", "Medium", 420, "Metrics"),
        ("pm-3", "How would you handle conflicting requirements from two key stakeholders?", "Hard", 540, "Stakeholder Management"),
        ("pm-4", "Walk through how you build and communicate a product roadmap.", "Medium", 480, "Roadmapping"),
        ("pm-5", "What is the role of a product manager in an agile team?", "Easy", 300, "Agile"),
    ],
    "QA Engineer": [
        ("qa-1", "What is the difference between functional and non-functional testing?", "Easy", 300, "Testing Fundamentals"),
        ("qa-2", "How do you decide which test cases to automate?", "Medium", 420, "Test Automation"),
        ("qa-3", "How would you design a test strategy for a distributed payment system?", "Hard", 600, "Test Strategy"),
        ("qa-4", "Describe the lifecycle of a bug from discovery to closure.", "Easy", 300, "Bug Tracking"),
        ("qa-5", "How do you deal with flaky tests in a CI pipeline?", "Medium", 420, "Reliability"),
    ],
    "Software Engineer": [
        ("se-1", "What are the SOLID principles of object-oriented programming?", "Medium", 480, "OOP Principles"),
        ("se-2", "Explain Big O notation and analyze the time complexity of common algorithms.", "Medium", 420, "Algorithms & Complexity"),
        ("se-3", "How would you approach debugging a complex production issue?", "Hard", 540, "Problem Solving"),
        ("se-4", "What is version control and why is Git important in software development?", "Easy", 300, "Development Tools"),
        ("se-5", "Describe the software development lifecycle and different methodologies.", "Easy", 360, "Software Engineering"),
    ],
}


def known_roles() -> List[str]:
    return list(_BANK.keys())


def _bank_for(job_role: str) -> List[Question]:
    rows = _BANK.get(job_role) or _BANK[FALLBACK_ROLE]
    return [
        Question(id=qid, text=text, difficulty=difficulty, time_limit=limit, category=category)
        for qid, text, difficulty, limit, category in rows
    ]


def fallback_question(job_role: str) -> Question:
    return Question(
        id="fallback-1",
        text=f"Tell me about your experience with {job_role} responsibilities.",
        difficulty="Medium",
        time_limit=300,
        category="General Experience",
    )


def generate_questions(job_role: str, difficulty: Optional[str] = None) -> List[Question]:
    """Select the role's questions, optionally filtered by difficulty.

    Unknown roles use the Software Engineer bank. A difficulty filter that
    matches nothing yields an empty list, which callers treat as a normal
    result. If the bank itself cannot be resolved the single generic
    fallback question is returned.
    """

    try:
        questions = _bank_for(job_role)
        if difficulty and difficulty.lower() != MIXED:
            wanted = difficulty.lower()
            questions = [q for q in questions if q.difficulty.lower() == wanted]
    except Exception:  # noqa: BLE001
        logger.exception("Question bank lookup failed for role %r", job_role)
        return [fallback_question(job_role)]

    log_event(
        "questions_generated",
        "-",
        role=job_role,
        difficulty=difficulty or MIXED,
        count=len(questions),
    )
    return questions


__all__ = ["FALLBACK_ROLE", "MIXED", "fallback_question", "generate_questions", "known_roles"]
