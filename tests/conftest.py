# tests/conftest.py
from datetime import date
from io import BytesIO

import pytest

from resume_renderer.layout_engine.canvas import Margins, PageCanvas
from resume_renderer.layout_engine.template_mapper import dispatch
from resume_renderer.normalizer import normalize

FIXED_DAY = date(2024, 1, 15)

STUDENT = {"name": "Asha Rao", "email": "a@x.edu", "branch": "CS"}

FULL_RESUME = {
    "objective": "Final-year computer science student looking for a backend engineering internship.",
    "education": "B.Tech Computer Science, State University (2021-2025)\nHigher Secondary, City College (2019-2021)",
    "skills": "Python, SQL, Docker\nReportLab; Git",
    "languages": "English\nHindi\nKannada",
    "experience": (
        "Software Intern, Acme Company (Summer 2024)\n"
        "- Built a PDF export service used by 3 departments\n"
        "- Cut report generation time by 40%"
    ),
    "projects": "• Campus ticketing system\n• Chat app with WebSockets\n• Project: resume renderer",
    "certifications": "AWS Cloud Practitioner Certificate\nGoogle Data Analytics",
    "achievements": "Dean's list 2023\nWinner, inter-college hackathon",
    "references_info": "Dr. Meera Iyer, Head of Department <meera@x.edu>",
    "additional_info": "Volunteer at the coding club & robotics society.",
}


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in (
        "RESUME_PDF_LOG_LEVEL", "RESUME_PDF_DATE_FORMAT", "RESUME_PDF_AUTHOR", "RESUME_PDF_FONT", "RESUME_PDF_BOLD_FONT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def blank_canvas():
    """A bare A4 canvas with no page hooks, positioned at the top of page 1."""
    canvas = PageCanvas(BytesIO(), margins=Margins(40, 40, 40, 40))
    canvas.begin()
    return canvas


@pytest.fixture
def render_template():
    """Render a template by name; returns (canvas, pdf bytes)."""

    def _render(name, resume_data=None, student_info=None, layout="single-column"):
        content, identity = normalize(resume_data or {}, student_info or STUDENT)
        buffer = BytesIO()
        canvas = dispatch(name).render(content, identity, buffer, layout=layout, today=FIXED_DAY)
        return canvas, buffer.getvalue()

    return _render


def section_titles(canvas):
    return [op.args[0] for op in canvas.operations if op.kind == "section_title"]


def ops_of(canvas, kind):
    return [op for op in canvas.operations if op.kind == kind]
