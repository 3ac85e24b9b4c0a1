# tests/test_layout_renderer.py
import logging
import re
from io import BytesIO

import pdfplumber
import pytest

from resume_renderer import parser
from resume_renderer.layout_engine.decorations import EXECUTIVE_SIDEBAR
from resume_renderer.layout_engine.layout_renderer import footer_text
from resume_renderer.layout_engine.templates import ACADEMIC, CLASSIC, EXECUTIVE, TEMPLATES
from resume_renderer.normalizer import StudentIdentity

from conftest import FIXED_DAY, FULL_RESUME, ops_of, section_titles

NAMES = [config.name for config in TEMPLATES]


def _words(pdf):
    with pdfplumber.open(BytesIO(pdf)) as doc:
        return [(word, page.height) for page in doc.pages for word in page.extract_words()]


def _words_off_the_page(pdf):
    return [word["text"] for word, height in _words(pdf) if word["bottom"] > height]


@pytest.mark.parametrize("name", NAMES)
def test_empty_content_renders_one_page_without_sections(render_template, name):
    canvas, pdf = render_template(name, {})
    assert canvas.page_number == 1
    assert section_titles(canvas) == []
    assert pdf.startswith(b"%PDF-")
    assert parser.page_count(pdf) == 1
    assert "Asha Rao" in parser.extract_pdf_text(pdf)


@pytest.mark.parametrize("name", NAMES)
def test_full_content_renders_every_section(render_template, name):
    canvas, pdf = render_template(name, FULL_RESUME)
    titles = [title.lower() for title in section_titles(canvas)]
    assert len(titles) == 10
    assert any("reference" in title for title in titles)
    assert parser.page_count(pdf) == canvas.page_number
    text = parser.extract_pdf_text(pdf).lower()
    assert "asha rao" in text
    assert "meera iyer" in text


@pytest.mark.parametrize("name", NAMES)
def test_only_filled_fields_get_a_section(render_template, name):
    canvas, _ = render_template(name, {"skills": "Python\nSQL", "objective": "   \n  "})
    titles = section_titles(canvas)
    assert len(titles) == 1
    assert "skill" in titles[0].lower()


@pytest.mark.parametrize("name", NAMES)
def test_footer_is_painted_on_every_page(render_template, name):
    long_field = "\n".join(f"Responsibility number {i} with some extra words to wrap" for i in range(150))
    canvas, pdf = render_template(name, {"experience": long_field, "projects": long_field})
    assert canvas.page_number > 1
    assert parser.page_count(pdf) == canvas.page_number
    config = next(config for config in TEMPLATES if config.name == name)
    footer = footer_text(config, StudentIdentity(name="Asha Rao"), FIXED_DAY)
    pages = [op.page for op in ops_of(canvas, "text") if footer in op.args[2]]
    assert pages == list(range(1, canvas.page_number + 1))


def test_footer_text_joins_name_label_and_date():
    identity = StudentIdentity(name="Asha Rao")
    assert footer_text(CLASSIC, identity, FIXED_DAY) == "Asha Rao • Classic Resume • 01/15/2024"


def test_two_column_row_continues_below_the_longer_column(render_template):
    education = "\n".join(f"Course {i}, State University" for i in range(12))
    canvas, _ = render_template("classic", {"education": education, "experience": "Intern", "skills": "Python"})
    marks = {op.args[0]: op for op in ops_of(canvas, "section_title")}
    assert marks["EDUCATION"].args[2] == marks["EXPERIENCE"].args[2]
    assert marks["EXPERIENCE"].args[1] > marks["EDUCATION"].args[1]

    skills_index = canvas.operations.index(marks["CORE SKILLS"])
    bottoms = [op.args[1] + op.args[2] for op in canvas.operations[:skills_index] if op.kind == "flowable"]
    assert marks["CORE SKILLS"].args[2] >= max(bottoms)


def test_oversized_two_column_row_is_stacked(render_template):
    education = "\n".join(f"Course {i}" for i in range(120))
    canvas, _ = render_template("classic", {"education": education, "experience": "Intern"})
    marks = {op.args[0]: op for op in ops_of(canvas, "section_title")}
    assert marks["EXPERIENCE"].args[1] == marks["EDUCATION"].args[1]
    assert marks["EXPERIENCE"].page > 1


def test_timeline_template_draws_connectors_between_entries(render_template):
    canvas, _ = render_template("professional", {"experience": "Intern, Acme\nTA, CS Dept\nFreelance"})
    assert len(ops_of(canvas, "line")) == 2


def test_executive_sidebar_holds_skill_chips(render_template):
    canvas, _ = render_template("executive", {"skills": "Python, SQL, Docker", "languages": "English"})
    marks = ops_of(canvas, "section_title")
    assert [op.args[0] for op in marks] == ["SKILLS", "LANGUAGES"]
    assert all(op.args[1] < EXECUTIVE_SIDEBAR for op in marks)


def test_minimalist_labels_are_rotated_and_left_out_of_text(render_template):
    canvas, pdf = render_template("minimalist", {"objective": "Seeking internships"})
    rotated = ops_of(canvas, "rotated_text")
    assert [op.args[2] for op in rotated] == ["OBJECTIVE"]
    text = parser.extract_pdf_text(pdf)
    assert "Seeking internships" in text
    assert "OBJECTIVE" not in text


def test_classic_watermark_is_not_extracted_as_text(render_template):
    canvas, pdf = render_template("classic", {})
    assert [op.args[2] for op in ops_of(canvas, "rotated_text")] == ["RESUME"]
    assert "RESUME" not in parser.extract_pdf_text(pdf)


def test_technical_sections_use_prompt_titles(render_template):
    canvas, _ = render_template("technical", {"skills": "Python\nSQL"})
    texts = [op.args[2] for op in ops_of(canvas, "text")]
    assert "$ skills" in texts
    assert "Python" in texts and "SQL" in texts


def test_elegant_bullets_use_the_template_glyph(render_template):
    canvas, _ = render_template("elegant", {"achievements": "• Dean's list\n- Hackathon winner"})
    texts = [op.args[2] for op in ops_of(canvas, "text")]
    assert texts.count("»") == 2
    assert "•" not in texts


def test_document_metadata(render_template):
    _, pdf = render_template("academic", FULL_RESUME)
    with pdfplumber.open(BytesIO(pdf)) as doc:
        metadata = doc.metadata
    assert metadata["Title"] == "Asha Rao - Academic Resume"
    assert metadata["Author"] == "Asha Rao"


@pytest.mark.parametrize("name", NAMES)
def test_long_content_stays_inside_the_page(render_template, name):
    long_field = "\n".join(f"Responsibility number {i} with some extra words to wrap" for i in range(150))
    _, pdf = render_template(name, {**FULL_RESUME, "experience": long_field, "projects": long_field})
    assert _words_off_the_page(pdf) == []


def test_long_sidebar_section_moves_to_the_main_column(render_template, caplog):
    education = "\n".join(f"Degree {i} at Campus" for i in range(40))
    with caplog.at_level(logging.INFO, logger="resume_renderer.layout_engine.layout_renderer"):
        canvas, pdf = render_template("academic", {"education": education, "languages": "English"})
    assert _words_off_the_page(pdf) == []
    marks = {op.args[0]: op for op in ops_of(canvas, "section_title")}
    assert marks["EDUCATION"].args[1] == ACADEMIC.margins.left
    assert marks["LANGUAGES"].args[1] == ACADEMIC.margins.left
    text = parser.extract_pdf_text(pdf)
    assert all(f"Degree {i} at Campus" in text for i in range(40))
    assert "moving" in caplog.text


def test_large_chip_set_flows_across_pages(render_template):
    skills = ", ".join(f"skill{i}" for i in range(400))
    canvas, pdf = render_template("executive", {"skills": skills})
    assert canvas.page_number > 1
    assert _words_off_the_page(pdf) == []
    assert {f"skill{i}" for i in range(400)} <= {word["text"] for word, _ in _words(pdf)}
    assert ops_of(canvas, "section_title")[0].args[1] == EXECUTIVE.margins.left


def test_oversized_timeline_entry_flows_onto_the_next_page(render_template):
    entry = " ".join(f"tok{i}" for i in range(1500))
    canvas, pdf = render_template("executive", {"experience": entry})
    assert canvas.page_number > 1
    assert _words_off_the_page(pdf) == []
    found = {int(number) for number in re.findall(r"tok(\d+)", parser.extract_pdf_text(pdf))}
    assert found == set(range(1500))


def test_creative_header_draws_every_line_of_a_long_name(render_template):
    name = "Venkata Subrahmanya Lakshmi Narasimha Chaitanya Raghunatha Sharma Rao"
    canvas, _ = render_template("creative", {"objective": "Seeking internships"}, {"name": name, "email": "v@x.edu"})
    texts = ops_of(canvas, "text")
    email = [op.args[2] for op in texts].index("v@x.edu")
    name_lines = texts[:email]
    assert len(name_lines) > 1
    assert " ".join(op.args[2] for op in name_lines) == name
    assert texts[email].args[1] > name_lines[-1].args[1]
    profile = ops_of(canvas, "section_title")[0]
    assert profile.args[2] > texts[email].args[1]
