from __future__ import annotations  # Candidate report package exports

from .pdf import generate_candidate_report_pdf

__all__ = ["generate_candidate_report_pdf"]
