"""Tests for line classification and DOCX styling."""
import io

import pytest
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_LINE_SPACING
from docx.shared import Inches, Pt

from app.services.docx_formatter import (
    FONT_NAME,
    LineKind,
    add_body_paragraphs,
    build_document,
    classify_line,
    document_title,
    render_docx,
    split_label,
)


def _body(text: str):
    doc = Document()
    return add_body_paragraphs(doc, text)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "line, kind",
    [
        ("", LineKind.BLANK),
        ("   \t", LineKind.BLANK),
        ("Special Interrogatory No. 1: What is X?", LineKind.HEADER),
        ("SPECIAL INTERROGATORY NO. 12", LineKind.HEADER),
        ("special request no.3", LineKind.HEADER),
        ("  Special Admission No. 4: Admit it.", LineKind.HEADER),
        ("OBJECTION: Vague.", LineKind.LABEL),
        ("answer: yes", LineKind.LABEL),
        ("ANSWER:", LineKind.LABEL),
        ("Subject to and without waiving the foregoing objection.", LineKind.PLAIN),
        ("Special Interrogatory No. X", LineKind.PLAIN),
        ("OBJECTIONS: none", LineKind.PLAIN),
    ],
)
def test_classify_line(line, kind):
    assert classify_line(line) is kind


def test_split_label_keeps_later_colons():
    assert split_label("OBJECTION: See Exhibit A: page 2: line 4") == (
        "OBJECTION",
        "See Exhibit A: page 2: line 4",
    )
    assert split_label("answer:") == ("answer", "")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def test_header_objection_answer_scenario():
    paragraphs = _body("Special Interrogatory No. 1: What is X?\nOBJECTION: Vague.\nANSWER: \n")
    assert len(paragraphs) == 3

    header, objection, answer = paragraphs

    assert [r.text for r in header.runs] == ["Special Interrogatory No. 1: What is X?"]
    assert header.runs[0].bold is True
    assert header.paragraph_format.space_before == Pt(12)
    assert header.paragraph_format.space_after == Pt(12)

    assert [r.text for r in objection.runs] == ["OBJECTION:", " Vague."]
    assert objection.runs[0].bold is True
    assert not objection.runs[1].bold

    assert [r.text for r in answer.runs] == ["ANSWER:"]
    assert answer.runs[0].bold is True


def test_header_is_bold_regardless_of_blank_lines():
    paragraphs = _body("intro\n\n\nSpecial Request No. 2: All records.\n\nOBJECTION: Overbroad.")
    kinds = [classify_line(p.text) for p in paragraphs]
    assert kinds == [
        LineKind.PLAIN,
        LineKind.BLANK,
        LineKind.BLANK,
        LineKind.HEADER,
        LineKind.BLANK,
        LineKind.LABEL,
    ]
    header = paragraphs[3]
    assert len(header.runs) == 1 and header.runs[0].bold is True
    assert paragraphs[1].runs == []


def test_label_content_colons_preserved():
    (para,) = _body("objection: Calls for a legal conclusion: see Rule 33.")
    assert [r.text for r in para.runs] == ["objection:", " Calls for a legal conclusion: see Rule 33."]


def test_plain_line_not_bold():
    (para,) = _body("  Responding party objects generally.  ")
    assert para.text == "Responding party objects generally."
    assert not para.runs[0].bold


def test_runs_use_fixed_font():
    for para in _body("Special Interrogatory No. 1: Q?\nOBJECTION: Vague.\nplain"):
        for run in para.runs:
            assert run.font.name == FONT_NAME
            assert run.font.size == Pt(12)


def test_build_document_title_and_layout():
    doc = build_document("OBJECTION: Vague.", "request-for-admissions")
    title = doc.paragraphs[0]
    assert title.text == "OBJECTIONS TO REQUEST FOR ADMISSIONS"
    assert title.alignment == WD_ALIGN_PARAGRAPH.CENTER
    assert title.runs[0].bold is True
    assert doc.paragraphs[1].text == ""
    assert doc.paragraphs[2].text == "OBJECTION: Vague."

    normal = doc.styles["Normal"]
    assert normal.font.name == FONT_NAME
    assert normal.paragraph_format.line_spacing_rule == WD_LINE_SPACING.DOUBLE

    section = doc.sections[0]
    assert section.top_margin == Inches(1)
    assert section.bottom_margin == Inches(1)
    assert section.left_margin == Inches(1)
    assert section.right_margin == Inches(1)


def test_document_title_without_type():
    assert document_title(None) == "OBJECTIONS"
    assert document_title("request-for-documents") == "OBJECTIONS TO REQUEST FOR DOCUMENTS"


def test_render_docx_bytes_reopen():
    data = render_docx("Special Interrogatory No. 1: Q?\nOBJECTION: Vague.", "interrogatories")
    assert data[:2] == b"PK"
    doc = Document(io.BytesIO(data))
    assert [p.text for p in doc.paragraphs] == [
        "OBJECTIONS TO INTERROGATORIES",
        "",
        "Special Interrogatory No. 1: Q?",
        "OBJECTION: Vague.",
    ]


def test_only_newlines_start_paragraphs():
    (para,) = _body("OBJECTION: Vague.\x0cANSWER: Yes.\x0bStill one line.")
    assert [r.text for r in para.runs] == ["OBJECTION:", " Vague. ANSWER: Yes. Still one line."]
    assert para.runs[0].bold is True


def test_control_characters_render():
    data = render_docx("OBJECTION: Vague.\x0cANSWER: Yes.", "interrogatories")
    doc = Document(io.BytesIO(data))
    assert doc.paragraphs[-1].text == "OBJECTION: Vague. ANSWER: Yes."


def test_crlf_line_endings():
    paragraphs = _body("OBJECTION: Vague.\r\nANSWER: Yes.\r\n")
    assert [p.text for p in paragraphs] == ["OBJECTION: Vague.", "ANSWER: Yes."]
