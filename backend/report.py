import logging
import os
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from schemas import Question

logger = logging.getLogger(__name__)

TEXT_FILENAME = "questions.txt"
PDF_FILENAME = "questions.pdf"


def question_lines(index: int, q: Question) -> List[str]:
    return [
        f"Question {index + 1}: {q.question}",
        f"Options: {', '.join(q.answers)}",
        f"Correct Answers: {', '.join(q.correct_answers)}",
    ]


def format_questions_text(questions: List[Question]) -> str:
    return "\n\n".join(
        "".join(line + "\n" for line in question_lines(i, q))
        for i, q in enumerate(questions)
    )


def write_text_report(questions: List[Question], output_dir: str = ".") -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, TEXT_FILENAME)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_questions_text(questions))
    logger.info("Wrote text report to %s", path)
    return path


def write_pdf_report(questions: List[Question], output_dir: str = ".") -> str:
    """Builds the PDF with one paragraph per line and a gap between questions."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, PDF_FILENAME)
    doc = SimpleDocTemplate(path, pagesize=A4, leftMargin=inch / 2, rightMargin=inch / 2,
                            topMargin=inch / 2, bottomMargin=inch / 2)
    styles = getSampleStyleSheet()

    elements = []
    for i, q in enumerate(questions):
        for line in question_lines(i, q):
            elements.append(Paragraph(escape(line), styles["Normal"]))
        elements.append(Spacer(1, 0.4 * inch))
    if not elements:
        # empty quiz still gets a (blank) page
        elements.append(Spacer(1, 0))

    doc.build(elements)
    logger.info("Wrote PDF report to %s", path)
    return path
