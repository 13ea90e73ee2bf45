"""Deterministic heuristics standing in for AI interview judgments."""
from .answer_scorer import evaluate_answer
from .question_bank import generate_questions, known_roles
from .resume_parser import analyze_resume
from .summary import generate_summary
from .types import AnswerEvaluation, CandidateInfo, FinalSummary, Question, ResumeFields

__all__ = [
    "AnswerEvaluation",
    "CandidateInfo",
    "FinalSummary",
    "Question",
    "ResumeFields",
    "analyze_resume",
    "evaluate_answer",
    "generate_questions",
    "generate_summary",
    "known_roles",
]
