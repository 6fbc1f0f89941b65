from __future__ import annotations

import re
from dataclasses import dataclass, field

from assignmate.services.vocabulary import INSTRUCTION_VERBS
from assignmate.utils.text import word_count

# Checked in order; later groups never override an earlier match.
_ASSIGNMENT_TYPES = (
    ("analytical", re.compile(r"analyze|analysis|examine|explore|investigate|evaluate|assess", re.IGNORECASE)),
    ("comparison", re.compile(r"compare|contrast|differentiate|distinguish|similarities|differences", re.IGNORECASE)),
    ("argumentative", re.compile(r"argue|argument|persuade|convince|position|stance|defend", re.IGNORECASE)),
    ("explanatory", re.compile(r"explain|description|describe|illustrate|define", re.IGNORECASE)),
    ("research", re.compile(r"research|study|investigate|report|findings", re.IGNORECASE)),
    ("reflective", re.compile(r"reflect|personal|experience|learning|growth", re.IGNORECASE)),
)

_MONTH = (
    r"Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?"
)
_WORD_COUNT_RE = re.compile(r"(\d+)\s*(?:word|words)", re.IGNORECASE)
_DEADLINE_RE = re.compile(
    rf"(?:due|deadline|by|before)\s*(?:the)?\s*(\d+(?:st|nd|rd|th)?\s+(?:of\s+)?(?:{_MONTH})(?:\s+\d{{4}})?)",
    re.IGNORECASE,
)
_CITATION_RE = re.compile(r"cite|citation|reference|MLA|APA|Chicago|sources|bibliography", re.IGNORECASE)


@dataclass
class PromptProfile:
    assignment_type: str = "essay"
    word_count: int | None = None
    deadline: str | None = None
    requires_citations: bool = False
    instruction_verbs: list[str] = field(default_factory=list)
    prompt_length: int = 0


def classify_assignment(prompt: str) -> str:
    for label, pattern in _ASSIGNMENT_TYPES:
        if pattern.search(prompt):
            return label
    return "essay"


def analyze_prompt(prompt: str) -> PromptProfile:
    word_match = _WORD_COUNT_RE.search(prompt)
    deadline_match = _DEADLINE_RE.search(prompt)

    return PromptProfile(
        assignment_type=classify_assignment(prompt),
        word_count=int(word_match.group(1)) if word_match else None,
        deadline=deadline_match.group(1) if deadline_match else None,
        requires_citations=_CITATION_RE.search(prompt) is not None,
        instruction_verbs=[verb for verb in INSTRUCTION_VERBS if re.search(rf"\b{verb}\b", prompt, re.IGNORECASE)],
        prompt_length=word_count(prompt),
    )
