# tests/test_fallback_renderer.py
from resume_renderer import parser
from resume_renderer.layout_engine.fallback_renderer import ERROR_TITLE, MESSAGE_LIMIT, error_message, render_error_pdf


def test_error_document_is_a_single_terminated_page():
    pdf = render_error_pdf(RuntimeError("disk full"))
    assert pdf.startswith(b"%PDF-")
    assert pdf.rstrip().endswith(b"%%EOF")
    assert parser.page_count(pdf) == 1
    text = parser.extract_pdf_text(pdf)
    assert ERROR_TITLE in text
    assert "There was an error generating your resume: disk full" in text


def test_markup_in_the_message_is_shown_verbatim():
    text = parser.extract_pdf_text(render_error_pdf(ValueError("<b>bad</b> & worse")))
    assert "<b>bad</b> & worse" in text


def test_empty_message_uses_the_exception_name():
    assert error_message(KeyError()) == "KeyError"
    assert error_message(ValueError("boom")) == "boom"
    assert error_message("plain text") == "plain text"
    assert "ZeroDivisionError" in parser.extract_pdf_text(render_error_pdf(ZeroDivisionError()))


def test_long_messages_are_cut_to_keep_one_page():
    pdf = render_error_pdf(RuntimeError("x " * 20000))
    assert parser.page_count(pdf) == 1
    text = parser.extract_pdf_text(pdf)
    assert ERROR_TITLE in text
    assert text.rstrip().endswith("...")


def test_message_limit():
    message = error_message(RuntimeError("y" * 2000))
    assert message == "y" * MESSAGE_LIMIT + "..."
    assert error_message(RuntimeError("z" * MESSAGE_LIMIT)) == "z" * MESSAGE_LIMIT
