from __future__ import annotations

import re

from assignmate.core.logging import get_logger

logger = get_logger(__name__)

NO_CONSISTENT_ERRORS = "no consistent errors"
DEFAULT_ASSIGNMENT = "Write a short essay about a topic of your choice"
DEFAULT_MATERIALS = "Use general knowledge on the topic"

_COMMA_SPLICE_RE = re.compile(r"[a-z]+ [a-z]+, [a-z]+ [a-z]+", re.IGNORECASE)
_RUN_ON_RE = re.compile(r"[a-z]+" + r" [a-z]+" * 13, re.IGNORECASE)
_HOMOPHONE_RE = re.compile(r"\b(they're|their|there|your|you're|its|it's|affect|effect|then|than)\b", re.IGNORECASE)
_PRESENT_TENSE_RE = re.compile(r"\b(is|are|am|has|have|do|does)\b", re.IGNORECASE)
_PAST_TENSE_RE = re.compile(r"\b(was|were|had|did)\b", re.IGNORECASE)

_TEMPLATE = """
INSTRUCTIONS: Write a response to the following assignment prompt using the style patterns below. DO NOT COPY THE SAMPLE TEXT DIRECTLY. CREATE NEW CONTENT.

ASSIGNMENT: {assignment}

COURSE MATERIALS TO REFERENCE: {materials}

STYLE GUIDANCE - Write like a student who:
- Sometimes repeats ideas slightly differently
- Occasionally uses informal transitions
- Makes minor grammar mistakes ({errors})
- Shows personal opinion through phrases like "I believe" or "In my view"
- References course materials naturally, not perfectly

CONTENT REQUIREMENTS:
- Include 2-3 slightly imperfect citations
- Make 1-2 minor logical leaps
- Add personal anecdotes or reactions
- Vary paragraph lengths unpredictably

WRITING SAMPLE FOR STYLE MATCHING ONLY (DO NOT COPY THIS CONTENT - ONLY MATCH THE STYLE):
{sample}

YOUR RESPONSE TO THE ASSIGNMENT:
"""


def typical_errors(writing_sample: str) -> str:
    """Describe the informal mistakes a sample tends to make, as a comma-joined phrase."""
    errors = []

    if _COMMA_SPLICE_RE.search(writing_sample):
        errors.append("occasional comma splices")

    if _RUN_ON_RE.search(writing_sample):
        errors.append("some run-on sentences")

    if _HOMOPHONE_RE.search(writing_sample):
        errors.append("occasional homophone confusion")

    present = len(_PRESENT_TENSE_RE.findall(writing_sample))
    past = len(_PAST_TENSE_RE.findall(writing_sample))
    if present and past and max(present, past) / min(present, past) < 3:
        errors.append("occasional tense shifting")

    return ", ".join(errors) if errors else NO_CONSISTENT_ERRORS


def build_prompt(writing_sample: str, materials: str | None, assignment_prompt: str | None) -> str:
    try:
        errors = typical_errors(writing_sample)
    except Exception:
        logger.warning("typical_errors_failed", exc_info=True)
        errors = NO_CONSISTENT_ERRORS

    return _TEMPLATE.format(
        assignment=assignment_prompt or DEFAULT_ASSIGNMENT,
        materials=materials or DEFAULT_MATERIALS,
        errors=errors,
        sample=writing_sample,
    )
