"""
Prompt templates for discovery objection and answer generation.

All templates are module-level constants so they can be tuned without
touching logic code.  The header syntax (``SPECIAL <TYPE> NO. <n>:``) and the
``OBJECTION:`` / ``ANSWER:`` labels are load-bearing: the DOCX formatter
classifies lines by them, and the response splitter looks for the two
section markers verbatim.
"""
from __future__ import annotations

from app.models.schemas import request_label, request_label_upper

OBJECTIONS_MARKER = "=== OBJECTIONS ONLY SECTION ==="
ANSWERS_MARKER = "=== COMPLETE RESPONSES SECTION ==="

# ---------------------------------------------------------------------------
# System instructions
# ---------------------------------------------------------------------------

OBJECTIONS_SYSTEM_PROMPT = (
    "You are an experienced legal assistant specializing in discovery objections. "
    "Provide detailed, properly formatted objections that attorneys can use in "
    "their legal practice."
)

ANSWERS_SYSTEM_PROMPT = (
    "You are an experienced legal assistant specializing in discovery responses. "
    "Provide detailed, properly formatted responses that include both objections "
    "when appropriate and substantive answers based on the provided facts."
)

COMBINED_SYSTEM_PROMPT = (
    "You are an experienced legal assistant specializing in discovery responses. "
    "Produce two clearly separated sections exactly as instructed: first "
    "objections only, then complete responses with objections and answers."
)

# ---------------------------------------------------------------------------
# Shared fragments
# ---------------------------------------------------------------------------

_OBJECTION_GROUNDS = """\
  * Vague and ambiguous
  * Overly broad and burdensome
  * Seeks information not reasonably calculated to lead to the discovery of admissible evidence
  * Seeks privileged information protected by attorney-client privilege
  * Calls for a legal conclusion
  * Compound question
  * Assumes facts not in evidence
  * Seeks information outside the scope of discovery\
"""

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

_OBJECTIONS_PROMPT = """\
You are a legal assistant helping attorneys draft objections to discovery requests. \
Based on the discovery document provided, generate appropriate objections with spaces for answers.

Discovery Type: {discovery_type}

Document Content:
{document_text}

Please format your response EXACTLY as follows for each discovery request:

SPECIAL {label_upper} NO. [NUMBER]: [Include the exact text of the original question/request from the document]
OBJECTION: [List the applicable objections]
ANSWER:

FORMATTING RULES:
- Use the heading "Special {label} No. XX" for every request, numbered as in the document
- Follow with "OBJECTION:" and list applicable objections
- Then add "ANSWER:" and leave the rest of that line blank for the attorney to fill in
- Use common legal objections such as:
{grounds}

Please maintain proper legal formatting and be specific to the type of discovery being objected to.\
"""

_ANSWERS_PROMPT = """\
You are a legal assistant helping attorneys draft responses to discovery requests. \
Based on the discovery document and fact pattern provided, generate complete responses \
that include both objections and substantive answers.

Discovery Type: {discovery_type}

Document Content:
{document_text}

Fact Pattern:
{fact_pattern}

Please format your response EXACTLY as follows for each discovery request:

SPECIAL {label_upper} NO. [NUMBER]: [Include the exact text of the original question/request from the document]
OBJECTION: [Provide appropriate legal objections if any apply]
ANSWER: [Provide a substantive answer based on the fact pattern provided]

Example format:
SPECIAL {label_upper} NO. 6: Please describe in detail the reasons for the incomplete remodel as of May 15, 2024, \
including the unfinished electrical work and multiple outlets not installed.
OBJECTION: Subject to and without waiving the foregoing objection, this interrogatory is vague and ambiguous \
as it does not specify what constitutes "incomplete remodel."
ANSWER: The remodel project began in January 2024 and was halted in May 2024 due to permit issues with the city. \
The electrical contractor, ABC Electric, failed to complete the installation of 5 outlets in the kitchen and \
3 outlets in the bathroom as specified in the original contract dated January 15, 2024.

IMPORTANT FORMATTING RULES:
- Extract the exact question/request text from the document
- Provide appropriate objections when warranted, but still answer the request
- Use the fact pattern to provide specific, factual answers
- Common objection lead-ins: "Subject to and without waiving the foregoing objection..."
- Keep answers factual and based on the provided fact pattern
- Use appropriate legal objections such as:
{grounds}
- Maintain proper legal formatting and capitalization
- Process each numbered request/question from the document

Please generate complete responses that attorneys can use directly in their discovery responses.\
"""

_COMBINED_PROMPT = """\
You are a legal assistant helping attorneys respond to discovery requests. \
Based on the discovery document and fact pattern provided, produce TWO sections covering \
the same set of requests.

Discovery Type: {discovery_type}

Document Content:
{document_text}

Fact Pattern:
{fact_pattern}

Your response MUST contain exactly these two divider lines, each on its own line and \
copied character for character:

{objections_marker}
{answers_marker}

Under "{objections_marker}" write, for each discovery request:

SPECIAL {label_upper} NO. [NUMBER]: [Exact text of the request from the document]
OBJECTION: [Applicable objections]
ANSWER:

Under "{answers_marker}" write, for the same requests in the same order:

SPECIAL {label_upper} NO. [NUMBER]: [Exact text of the request from the document]
OBJECTION: [Applicable objections, or "None."]
ANSWER: [Substantive answer based on the fact pattern, beginning with \
"Subject to and without waiving the foregoing objection," where an objection was made]

RULES:
- Do not write anything before "{objections_marker}"
- Leave every ANSWER line blank in the first section
- Use appropriate legal objections such as:
{grounds}
- Keep answers factual and based only on the provided fact pattern
- Process each numbered request/question from the document\
"""


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_objections_prompt(discovery_type: str, document_text: str) -> str:
    """Objections per request with a blank ANSWER line."""
    return _OBJECTIONS_PROMPT.format(
        discovery_type=discovery_type,
        document_text=document_text,
        label=request_label(discovery_type),
        label_upper=request_label_upper(discovery_type),
        grounds=_OBJECTION_GROUNDS,
    )


def build_answers_prompt(discovery_type: str, document_text: str, fact_pattern: str) -> str:
    """Objection plus a substantive answer per request, drawn from the fact pattern."""
    return _ANSWERS_PROMPT.format(
        discovery_type=discovery_type,
        document_text=document_text,
        fact_pattern=fact_pattern,
        label_upper=request_label_upper(discovery_type),
        grounds=_OBJECTION_GROUNDS,
    )


def build_combined_prompt(discovery_type: str, document_text: str, fact_pattern: str) -> str:
    """
    One instruction asking for both sections, separated by the literal
    OBJECTIONS_MARKER and ANSWERS_MARKER lines that ``split_sections`` expects.
    """
    return _COMBINED_PROMPT.format(
        discovery_type=discovery_type,
        document_text=document_text,
        fact_pattern=fact_pattern,
        label_upper=request_label_upper(discovery_type),
        objections_marker=OBJECTIONS_MARKER,
        answers_marker=ANSWERS_MARKER,
        grounds=_OBJECTION_GROUNDS,
    )
