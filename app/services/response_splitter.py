"""
Splits a combined objections + responses reply at its section markers.
"""
from __future__ import annotations

import dataclasses
import logging

from app.services.prompts import ANSWERS_MARKER, OBJECTIONS_MARKER

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class SplitResponse:
    """The two halves of a combined reply."""

    objections: str
    answers: str


def split_sections(reply: str) -> SplitResponse:
    """
    Slice *reply* into its objections and complete-responses sections.

    The objections section runs from the end of OBJECTIONS_MARKER to the
    start of ANSWERS_MARKER; the answers section is everything after
    ANSWERS_MARKER.  Both are stripped.  If either marker is missing the
    whole reply is returned unchanged as both sections.
    """
    obj_start = reply.find(OBJECTIONS_MARKER)
    if obj_start != -1:
        obj_end = obj_start + len(OBJECTIONS_MARKER)
        ans_start = reply.find(ANSWERS_MARKER, obj_end)
        if ans_start != -1:
            return SplitResponse(
                objections=reply[obj_end:ans_start].strip(),
                answers=reply[ans_start + len(ANSWERS_MARKER):].strip(),
            )

    logger.warning("Section markers not found in reply; returning it for both sections")
    return SplitResponse(objections=reply, answers=reply)
