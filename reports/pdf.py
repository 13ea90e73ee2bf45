from __future__ import annotations  # Styled PDF rendering for candidate transcripts

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from interviews.models import Answer, Candidate

ACCENT = (45, 115, 245)  # Palette accent
TEXT = (34, 34, 34)  # Primary text color
MUTED = (100, 100, 100)  # Secondary text color
RULE = (230, 230, 230)  # Divider color
SOFT_ACCENT_BG = (243, 248, 255)  # Highlight background

FONT = "Helvetica"


def _latin1(value: Any) -> str:  # Core fonts only cover latin-1
    text = "" if value is None else str(value)
    text = text.replace("•", "-").replace("—", "-").replace("–", "-").replace("…", "...")
    return text.encode("latin-1", "replace").decode("latin-1")


def _format_datetime(value: Optional[datetime]) -> str:  # Format timestamp for display
    if not value:
        return "-"
    return value.strftime("%d %b %Y, %I:%M %p")


def _score_value(value: Optional[float]) -> str:  # Format score for display
    if value is None:
        return "N/A"
    return f"{float(value):.1f}/10"


class CandidateReportPDF(FPDF):  # PDF with header banner and paginated footer
    def __init__(self, title: str) -> None:
        super().__init__()
        self.header_title = _latin1(title)

    def header(self) -> None:  # Render header banner
        if self.page_no() == 1:
            self.set_fill_color(*ACCENT)
            self.rect(0, 0, self.w, 20, style="F")
            self.set_text_color(255, 255, 255)
            self.set_xy(self.l_margin, 6)
            self.set_font(FONT, "B", 16)
            self.cell(0, 8, self.header_title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self.set_text_color(*TEXT)
            self.ln(6)
        else:
            self.set_text_color(80, 80, 80)
            self.set_xy(self.l_margin, 8)
            self.set_font(FONT, "B", 12)
            self.cell(0, 6, self.header_title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self.set_draw_color(*ACCENT)
            self.set_line_width(0.4)
            self.line(self.l_margin, self.get_y() + 1, self.w - self.r_margin, self.get_y() + 1)
            self.set_text_color(*TEXT)
            self.ln(4)

    def footer(self) -> None:  # Render footer with pagination
        self.set_y(-12)
        self.set_draw_color(*RULE)
        self.set_line_width(0.2)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.set_text_color(120, 120, 120)
        self.set_font(FONT, "", 9)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="R")

    @property
    def usable_width(self) -> float:
        return float(self.w) - float(self.l_margin) - float(self.r_margin)

    def paragraph(self, text: str, *, size: int = 11, color: Tuple[int, int, int] = TEXT, bold: bool = False) -> None:
        self.set_x(self.l_margin)
        self.set_text_color(*color)
        self.set_font(FONT, "B" if bold else "", size)
        self.multi_cell(self.usable_width, 6, _latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(*TEXT)


def _section_title(pdf: CandidateReportPDF, title: str) -> None:  # Render styled section title
    pdf.set_text_color(*TEXT)
    pdf.set_x(pdf.l_margin)
    pdf.set_font(FONT, "B", 13)
    pdf.cell(0, 9, _latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_draw_color(*RULE)
    pdf.set_line_width(0.2)
    y = pdf.get_y()
    pdf.line(pdf.l_margin, y, pdf.l_margin + pdf.usable_width, y)
    pdf.ln(2)


def _meta_block(pdf: CandidateReportPDF, rows: Sequence[Tuple[str, str]]) -> None:  # Draw two-column metadata
    col = pdf.usable_width / 2.0
    for idx in range(0, len(rows), 2):
        left = rows[idx]
        right = rows[idx + 1] if idx + 1 < len(rows) else ("", "")
        pdf.set_x(pdf.l_margin)
        pdf.set_text_color(*MUTED)
        pdf.set_font(FONT, "", 10)
        pdf.cell(col, 6, _latin1(left[0]), new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(col, 6, _latin1(right[0]), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(*TEXT)
        pdf.set_font(FONT, "B", 11)
        pdf.cell(col, 6, _latin1(left[1]), new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(col, 6, _latin1(right[1]), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(2)


def _bullets(pdf: CandidateReportPDF, items: Sequence[str], empty: str) -> None:
    if not items:
        pdf.paragraph(empty, size=10, color=MUTED)
    for item in items:
        pdf.paragraph(f"- {item}")
    pdf.ln(2)


def _score_banner(pdf: CandidateReportPDF, label: str, score: Optional[float]) -> None:
    top = pdf.get_y()
    pdf.set_fill_color(*SOFT_ACCENT_BG)
    pdf.rect(pdf.l_margin, top, pdf.usable_width, 14, style="F")
    pdf.set_xy(pdf.l_margin + 6, top + 4)
    pdf.set_text_color(*MUTED)
    pdf.set_font(FONT, "", 10)
    pdf.cell(pdf.usable_width / 2, 6, _latin1(label))
    pdf.set_text_color(*ACCENT)
    pdf.set_font(FONT, "B", 14)
    pdf.cell(pdf.usable_width / 2 - 12, 6, _score_value(score), align="R")
    pdf.set_y(top + 18)
    pdf.set_text_color(*TEXT)


def _answers_by_question(answers: Sequence[Answer]) -> Dict[str, Answer]:
    return {answer.question_id: answer for answer in answers}


def _render_transcript(pdf: CandidateReportPDF, candidate: Candidate) -> None:  # Render question and answer pairs
    if not candidate.questions:
        pdf.paragraph("No questions were attached to this interview.", size=10, color=MUTED)
        return
    answers = _answers_by_question(candidate.answers)
    for number, question in enumerate(candidate.questions, start=1):
        answer = answers.get(question.id)
        pdf.paragraph(f"Q{number}. {question.text}", bold=True)
        pdf.paragraph(
            f"{question.category} | {question.difficulty} | {question.time_limit}s limit",
            size=9,
            color=MUTED,
        )
        pdf.paragraph(answer.text if answer and answer.text else "No answer provided", size=10)
        if answer is not None:
            pdf.paragraph(
                f"Score {_score_value(answer.score)} - {answer.feedback} ({answer.time_spent}s)",
                size=9,
                color=ACCENT,
            )
        pdf.set_draw_color(*RULE)
        pdf.line(pdf.l_margin, pdf.get_y() + 1, pdf.l_margin + pdf.usable_width, pdf.get_y() + 1)
        pdf.ln(4)


def generate_candidate_report_pdf(candidate: Candidate) -> bytes:  # Build PDF payload for a candidate
    pdf = CandidateReportPDF(f"{candidate.job_role} - {candidate.name} - Interview Report")
    pdf.alias_nb_pages()
    pdf.set_margins(15, 22, 15)
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()

    _section_title(pdf, "Candidate Overview")
    rows: List[Tuple[str, str]] = [
        ("Candidate", candidate.name),
        ("Role", candidate.job_role),
        ("Email", candidate.email),
        ("Phone", candidate.phone or "-"),
        ("Status", candidate.status),
        ("Recommendation", candidate.recommendation or "-"),
        ("Started", _format_datetime(candidate.created_at)),
        ("Completed", _format_datetime(candidate.completed_at)),
        ("Answered", f"{len(candidate.answers)}/{len(candidate.questions)}"),
        ("Time Spent", f"{candidate.total_time_spent}s"),
    ]
    _meta_block(pdf, rows)
    _score_banner(pdf, "Final Score", candidate.final_score)

    if candidate.final_feedback:
        _section_title(pdf, "Summary")
        pdf.paragraph(candidate.final_feedback)
        pdf.ln(2)

    _section_title(pdf, "Strengths")
    _bullets(pdf, candidate.strengths, "Not yet assessed.")
    _section_title(pdf, "Areas for Improvement")
    _bullets(pdf, candidate.areas_for_improvement, "Not yet assessed.")

    _section_title(pdf, "Question & Answer Transcript")
    _render_transcript(pdf, candidate)

    return bytes(pdf.output())


__all__ = ["generate_candidate_report_pdf"]
