"""Tests for text extraction from uploaded files."""
import io

import pytest
from docx import Document

from app.exceptions import UnsupportedFileType
from app.services.document_parser import DocumentParser
from tests.conftest import DOCX_MIME, make_docx


@pytest.fixture
def parser() -> DocumentParser:
    return DocumentParser()


@pytest.mark.asyncio
async def test_plain_text_by_mime(parser):
    text = await parser.extract_text(b"Special Interrogatory No. 1", "text/plain", "upload")
    assert text == "Special Interrogatory No. 1"


@pytest.mark.asyncio
async def test_plain_text_by_extension(parser):
    text = await parser.extract_text(b"hello", "application/octet-stream", "NOTES.TXT")
    assert text == "hello"


@pytest.mark.asyncio
async def test_plain_text_bom_and_bad_bytes(parser):
    text = await parser.extract_text(b"\xef\xbb\xbfhello \xff world", "text/plain; charset=utf-8", None)
    assert text.startswith("hello ")
    assert text.endswith(" world")


@pytest.mark.asyncio
async def test_docx_paragraphs_and_tables(parser):
    doc = Document()
    doc.add_paragraph("SPECIAL INTERROGATORY NO. 1: Describe the incident.")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Exhibit"
    table.rows[0].cells[1].text = "A"
    buffer = io.BytesIO()
    doc.save(buffer)

    text = await parser.extract_text(buffer.getvalue(), DOCX_MIME, "requests.docx")
    assert "SPECIAL INTERROGATORY NO. 1: Describe the incident." in text
    assert "Exhibit | A" in text


@pytest.mark.asyncio
async def test_docx_by_extension_only(parser):
    data = make_docx("First request.", "Second request.")
    text = await parser.extract_text(data, "", "requests.docx")
    assert text.splitlines() == ["First request.", "Second request."]


@pytest.mark.asyncio
async def test_unreadable_word_file(parser):
    with pytest.raises(UnsupportedFileType):
        await parser.extract_text(b"\xd0\xcf\x11\xe0 legacy", "application/msword", "old.doc")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content_type, filename",
    [
        ("application/pdf", "requests.pdf"),
        ("image/png", "scan.png"),
        (None, None),
    ],
)
async def test_unsupported_types(parser, content_type, filename):
    with pytest.raises(UnsupportedFileType) as excinfo:
        await parser.extract_text(b"data", content_type, filename)
    assert "Unsupported file type" in excinfo.value.message


@pytest.mark.asyncio
async def test_docx_tables_keep_document_order(parser):
    doc = Document()
    doc.add_paragraph("Before the table.")
    table = doc.add_table(rows=2, cols=2)
    table.rows[0].cells[0].text = "SPECIAL INTERROGATORY NO. 1:"
    table.rows[0].cells[1].text = "Describe the incident."
    table.rows[1].cells[0].text = "SPECIAL INTERROGATORY NO. 2:"
    table.rows[1].cells[1].text = "Identify witnesses."
    doc.add_paragraph("After the table.")
    buffer = io.BytesIO()
    doc.save(buffer)

    text = await parser.extract_text(buffer.getvalue(), DOCX_MIME, "requests.docx")
    assert text.splitlines() == [
        "Before the table.",
        "SPECIAL INTERROGATORY NO. 1: | Describe the incident.",
        "SPECIAL INTERROGATORY NO. 2: | Identify witnesses.",
        "After the table.",
    ]
