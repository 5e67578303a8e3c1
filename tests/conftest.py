import io
import zipfile
from typing import Any

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


def _pdf(*pages: str) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Two-page resume PDF with known text on each page."""
    return _pdf("Alice Smith", "Engineer")


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a single blank page."""
    return _pdf("")


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """DOCX with a styled heading, a paragraph and a small table."""
    document = docx.Document()
    document.add_heading("Alice Smith", level=1)
    document.add_paragraph("Senior Engineer at Acme")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "SQL"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def corrupt_docx_bytes(sample_docx_bytes: bytes) -> bytes:
    """DOCX package whose main document part is malformed XML."""
    source = zipfile.ZipFile(io.BytesIO(sample_docx_bytes))
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as target:
        for item in source.infolist():
            data = source.read(item.filename)
            if item.filename == "word/document.xml":
                data = b"<w:document><w:body><w:p>broken"
            target.writestr(item, data)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def analysis_payload() -> dict[str, Any]:
    """A schema-valid model response for the analysis step."""
    return {
        "overallScore": 72,
        "summary": "Solid engineer with clear impact.",
        "scores": {"impact": 80, "brevity": 65, "style": 70, "keywords": 60},
        "atsKeywords": {"matched": ["Python"], "missing": ["Kubernetes"]},
        "sectionAnalysis": [
            {"name": "Experience", "status": "Good", "feedback": "Strong metrics."},
            {"name": "Certifications", "status": "Missing", "feedback": "Add one."},
        ],
        "formattingIssues": ["Two-column layout"],
        "grammarIssues": [],
        "duplicateContent": ["'Led team' appears twice"],
        "starRewrites": [
            {
                "original": "Worked on APIs",
                "improved": "Built 12 REST APIs serving 2M requests/day",
                "reason": "No measurable result",
            }
        ],
        "professionalSummaryRewrite": "Backend engineer focused on scale.",
        "coverLetter": "Dear [Hiring Manager], ...",
        "hardSkills": [{"skill": "Python", "found": True, "importance": "High"}],
        "softSkills": [{"skill": "Mentoring", "found": False, "importance": "Low"}],
        "optimizedResumeMarkdown": "# Alice Smith\n\n## Experience",
    }
