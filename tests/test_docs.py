import io

import pytest
from pypdf import PdfWriter

from textsum.tools.docs import extract_text_from_bytes


def test_extract_plain_text() -> None:
    text, kind = extract_text_from_bytes("notes.txt", b"hello local text")
    assert kind == "text"
    assert text == "hello local text"


def test_extract_keeps_surrounding_whitespace() -> None:
    text, _ = extract_text_from_bytes("notes.md", b"  two words \n")
    assert text == "  two words \n"


def test_extract_file_without_extension_as_text() -> None:
    text, kind = extract_text_from_bytes("README", "café".encode("utf-8"))
    assert kind == "text"
    assert text == "café"


def test_extract_falls_back_to_latin1_and_utf16() -> None:
    text, _ = extract_text_from_bytes("old.txt", "café ok".encode("latin-1"))
    assert text == "café ok"

    text, _ = extract_text_from_bytes("wide.txt", "hello wide".encode("utf-16"))
    assert text == "hello wide"


def test_extract_pdf() -> None:
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    buf = io.BytesIO()
    writer.write(buf)

    text, kind = extract_text_from_bytes("blank.pdf", buf.getvalue())
    assert kind == "pdf"
    assert text.strip() == ""


def test_unsupported_extension() -> None:
    with pytest.raises(ValueError):
        extract_text_from_bytes("archive.zip", b"dummy")


def test_docx_requires_python_docx(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("textsum.tools.docs.docx", None)
    with pytest.raises(ValueError, match="python-docx"):
        extract_text_from_bytes("letter.docx", b"PK")


def test_extract_docx() -> None:
    docx = pytest.importorskip("docx")
    document = docx.Document()
    document.add_paragraph("first paragraph")
    document.add_paragraph("second one")
    buf = io.BytesIO()
    document.save(buf)

    text, kind = extract_text_from_bytes("letter.docx", buf.getvalue())
    assert kind == "docx"
    assert "first paragraph" in text
    assert "second one" in text


def test_extract_corrupt_docx_raises_value_error() -> None:
    pytest.importorskip("docx")
    with pytest.raises(ValueError, match="Could not read .docx"):
        extract_text_from_bytes("letter.docx", b"not a zip file at all")
