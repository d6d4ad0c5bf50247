"""
DOCX rendering for generated objections and responses.

Each line of the generated text is classified by an ordered set of
predicates (blank, request header, OBJECTION/ANSWER label, plain) and
emitted as one paragraph with per-class styling.  Every run uses the same
font and size; paragraphs are double-spaced on a page with one-inch margins.

Public API
----------
classify_line(line)                       -> LineKind
build_document(text, discovery_type)      -> docx.document.Document
add_body_paragraphs(doc, text)            -> List[Paragraph]
render_docx(text, discovery_type)         -> bytes
"""
from __future__ import annotations

import enum
import io
import logging
import re
from typing import Callable, List, Optional, Tuple

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_LINE_SPACING
from docx.oxml.ns import qn
from docx.shared import Inches, Pt
from docx.text.paragraph import Paragraph

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

FONT_NAME = "Times New Roman"
FONT_SIZE = Pt(12)
PAGE_MARGIN = Inches(1)

DEFAULT_SPACE_AFTER = Pt(12)
TITLE_SPACE_AFTER = Pt(24)
HEADER_SPACE = Pt(12)        # before and after a request header
LABEL_SPACE_AFTER = Pt(6)    # after OBJECTION:/ANSWER: and plain lines

HEADER_PATTERN = re.compile(
    r"^Special\s+(Interrogatory|Request|Admission)\s+No\.\s*\d+", re.IGNORECASE
)
LABEL_PATTERN = re.compile(r"^(OBJECTION|ANSWER):", re.IGNORECASE)
# Control characters Word XML cannot hold (tab, LF, CR are allowed)
_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


class LineKind(str, enum.Enum):
    BLANK = "blank"
    HEADER = "header"
    LABEL = "label"
    PLAIN = "plain"


# First match wins.
_LINE_CLASSIFIERS: Tuple[Tuple[LineKind, Callable[[str], bool]], ...] = (
    (LineKind.BLANK, lambda line: not line),
    (LineKind.HEADER, lambda line: bool(HEADER_PATTERN.match(line))),
    (LineKind.LABEL, lambda line: bool(LABEL_PATTERN.match(line))),
    (LineKind.PLAIN, lambda line: True),
)


def classify_line(line: str) -> LineKind:
    """Classify one line of generated text (surrounding whitespace ignored)."""
    stripped = line.strip()
    for kind, predicate in _LINE_CLASSIFIERS:
        if predicate(stripped):
            return kind
    return LineKind.PLAIN


def split_label(line: str) -> Tuple[str, str]:
    """
    Split an OBJECTION/ANSWER line at its first colon.

    Returns ``(label, content)`` with the label's original casing and the
    content stripped; any later colons stay in the content.
    """
    label, _, content = line.strip().partition(":")
    return label, content.strip()


# ---------------------------------------------------------------------------
# Document assembly
# ---------------------------------------------------------------------------

def build_document(text: str, discovery_type: Optional[str] = None) -> Document:
    """Create a styled document: title, spacer, then one paragraph per line."""
    doc = Document()
    _apply_base_style(doc)

    title = doc.add_paragraph()
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    title.paragraph_format.space_after = TITLE_SPACE_AFTER
    _add_run(title, document_title(discovery_type), bold=True)

    doc.add_paragraph()

    add_body_paragraphs(doc, text)
    return doc


def document_title(discovery_type: Optional[str]) -> str:
    """``OBJECTIONS TO REQUEST FOR ADMISSIONS`` style title."""
    if not discovery_type:
        return "OBJECTIONS"
    return f"OBJECTIONS TO {discovery_type.upper().replace('-', ' ')}"


def add_body_paragraphs(doc: Document, text: str) -> List[Paragraph]:
    """
    Append one paragraph per line of *text* and return them.

    Leading and trailing blank lines are dropped; blank lines in between
    become empty spacer paragraphs.
    """
    paragraphs: List[Paragraph] = []
    for line in text.strip().split("\n"):
        kind = classify_line(line)
        stripped = line.strip()
        para = doc.add_paragraph()

        if kind is LineKind.HEADER:
            para.paragraph_format.space_before = HEADER_SPACE
            para.paragraph_format.space_after = HEADER_SPACE
            _add_run(para, stripped, bold=True)
        elif kind is LineKind.LABEL:
            label, content = split_label(stripped)
            para.paragraph_format.space_after = LABEL_SPACE_AFTER
            _add_run(para, f"{label}:", bold=True)
            if content:
                _add_run(para, f" {content}")
        elif kind is LineKind.PLAIN:
            para.paragraph_format.space_after = LABEL_SPACE_AFTER
            _add_run(para, stripped)

        paragraphs.append(para)
    return paragraphs


def render_docx(text: str, discovery_type: Optional[str] = None) -> bytes:
    """Build the document and serialize it to .docx bytes."""
    doc = build_document(text, discovery_type)
    buffer = io.BytesIO()
    doc.save(buffer)
    data = buffer.getvalue()
    logger.info("Rendered DOCX: %d paragraphs, %d bytes", len(doc.paragraphs), len(data))
    return data


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _apply_base_style(doc: Document) -> None:
    style = doc.styles["Normal"]
    style.font.name = FONT_NAME
    style.font.size = FONT_SIZE
    # East-Asian font slot, otherwise Word substitutes its own default
    style.element.rPr.rFonts.set(qn("w:eastAsia"), FONT_NAME)

    fmt = style.paragraph_format
    fmt.line_spacing_rule = WD_LINE_SPACING.DOUBLE
    fmt.space_after = DEFAULT_SPACE_AFTER

    for section in doc.sections:
        section.top_margin = PAGE_MARGIN
        section.bottom_margin = PAGE_MARGIN
        section.left_margin = PAGE_MARGIN
        section.right_margin = PAGE_MARGIN


def _add_run(para: Paragraph, text: str, bold: bool = False):
    run = para.add_run(_XML_INVALID_CHARS.sub(" ", text))
    run.bold = bold
    run.font.name = FONT_NAME
    run.font.size = FONT_SIZE
    return run
