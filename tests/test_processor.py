import io

import pytest

from textsum.documents import DocumentProcessor


def test_extracts_plain_text():
    doc = DocumentProcessor().extract(b"Hello   world\n\n\n\nBye", "notes.txt")
    assert doc.text == "Hello world\n\nBye"
    assert doc.metadata == {"filename": "notes.txt", "nchar": len(doc.text)}


def test_invalid_utf8_is_ignored():
    doc = DocumentProcessor().extract(b"caf\xff ok", "a.md")
    assert doc.text == "caf ok"


def test_rejects_unknown_extension():
    with pytest.raises(ValueError, match="Unsupported"):
        DocumentProcessor().extract(b"data", "image.png")


def test_extracts_docx():
    docx = pytest.importorskip("docx")
    document = docx.Document()
    document.add_paragraph("First paragraph")
    document.add_paragraph("   ")
    document.add_paragraph("Second paragraph")
    buf = io.BytesIO()
    document.save(buf)

    doc = DocumentProcessor().extract(buf.getvalue(), "report.docx")

    assert doc.text == "First paragraph\n\nSecond paragraph"


def test_extract_file(tmp_path):
    path = tmp_path / "talk.txt"
    path.write_text("(00:01) Welcome", encoding="utf-8")

    doc = DocumentProcessor().extract_file(str(path))

    assert doc.filename == "talk.txt"
    assert doc.text == "(00:01) Welcome"
