"""
Text extraction for uploaded discovery documents.

Word files (.docx / .doc) are read with python-docx; plain-text files are
decoded as UTF-8.  Everything else — PDF included — is rejected with
``UnsupportedFileType``.  The parser never inspects whether the result is
empty; callers turn whitespace-only output into ``NoExtractableText``.
"""
from __future__ import annotations

import io
import logging
from typing import List, Optional

from docx import Document as DocxDocument
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from app.exceptions import UnsupportedFileType

logger = logging.getLogger(__name__)

WORD_MIME_TYPES = frozenset({
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/msword",
})
WORD_EXTENSIONS = (".docx", ".doc")

TEXT_MIME_TYPES = frozenset({"text/plain"})
TEXT_EXTENSIONS = (".txt",)

UNSUPPORTED_MESSAGE = "Unsupported file type. Please upload a .doc, .docx, or .txt file."

_PARAGRAPH_TAG = qn("w:p")
_TABLE_TAG = qn("w:tbl")


class DocumentParser:
    """Turns uploaded file bytes into plain text."""

    async def extract_text(
        self,
        data: bytes,
        content_type: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> str:
        """
        Extract raw text from an uploaded file.

        Args:
            data:         File contents.
            content_type: Declared MIME type, may be empty.
            filename:     Original filename; its extension is used when the
                          MIME type is missing or generic.

        Returns:
            The document's text.  May be empty.

        Raises:
            UnsupportedFileType: not a Word or plain-text file, or a Word file
                                 python-docx cannot open.
        """
        ctype = (content_type or "").split(";")[0].strip().lower()
        name = (filename or "").lower()

        if ctype in WORD_MIME_TYPES or name.endswith(WORD_EXTENSIONS):
            return self._extract_word(data, filename)
        if ctype in TEXT_MIME_TYPES or name.endswith(TEXT_EXTENSIONS):
            return _decode_text(data)

        logger.info("Rejected upload %r (content type %r)", filename, content_type)
        raise UnsupportedFileType(UNSUPPORTED_MESSAGE)

    # ------------------------------------------------------------------
    # Word
    # ------------------------------------------------------------------

    def _extract_word(self, data: bytes, filename: Optional[str]) -> str:
        """Body paragraphs and table rows (as ``cell | cell`` lines) in document order."""
        try:
            doc = DocxDocument(io.BytesIO(data))
        except Exception as exc:
            logger.warning("Cannot open Word file %r: %s", filename, exc)
            raise UnsupportedFileType(
                "Could not read the Word document. Please upload a .docx, .doc, or .txt file."
            ) from exc

        parts: List[str] = []
        for child in doc.element.body.iterchildren():
            if child.tag == _PARAGRAPH_TAG:
                parts.append(Paragraph(child, doc).text)
            elif child.tag == _TABLE_TAG:
                for row in Table(child, doc).rows:
                    cells = [cell.text.strip() for cell in row.cells]
                    non_empty = [c for c in cells if c]
                    if non_empty:
                        parts.append(" | ".join(non_empty))

        return "\n".join(parts)


def _decode_text(data: bytes) -> str:
    """Decode UTF-8, dropping a leading BOM and replacing invalid bytes."""
    return data.decode("utf-8-sig", errors="replace")
