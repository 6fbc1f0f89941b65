from __future__ import annotations

import re
from dataclasses import dataclass, field

from assignmate.services.vocabulary import CAPITALIZED_STOPWORDS
from assignmate.utils.text import word_count

_TERM = r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*|[A-Z]{2,}"
_TERM_RE = re.compile(rf"\b(?:{_TERM})\b", re.ASCII)
_DEFINITION_RE = re.compile(rf"\b({_TERM})\s*(?::|–|-)\s*([^.]+)", re.ASCII)
_NUMERIC_RE = re.compile(r"\b\d+(?:\.\d+)?%|\b\d+(?:,\d+)*\b|\b(?:19|20)\d{2}\b", re.ASCII)
_QUOTE_RE = re.compile(r"\"[^\"]+\"")
_EXAMPLE_RE = re.compile(r"(?:for example|e\.g\.|example:|case study:|instance)[^.!?]+[.!?]", re.IGNORECASE)
_HEADER_RE = re.compile(r"(?:^|\n)([A-Z][A-Za-z\s]+)(?:\n|:)")

MAX_KEY_TERMS = 15

# Checked in order; the first group that matches decides the type.
_MATERIAL_TYPES = (
    ("syllabus", re.compile(r"syllabus|course outline|learning objectives|course description", re.IGNORECASE)),
    ("textbook", re.compile(r"chapter|section|textbook|reading|author states", re.IGNORECASE)),
    ("lecture", re.compile(r"lecture|professor|discussed in class|as mentioned in class", re.IGNORECASE)),
    ("scientific", re.compile(r"experiment|method|results|conclusion|findings|study showed", re.IGNORECASE)),
)


@dataclass
class Definition:
    term: str
    definition: str


@dataclass
class MaterialProfile:
    key_terms: list[str] = field(default_factory=list)
    definitions: list[Definition] = field(default_factory=list)
    numerical_facts: list[str] = field(default_factory=list)
    quotes: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)
    material_type: str = "generic"
    word_count: int = 0


def classify_material(text: str) -> str:
    for label, pattern in _MATERIAL_TYPES:
        if pattern.search(text):
            return label
    return "generic"


def extract_key_terms(text: str) -> list[str]:
    seen = dict.fromkeys(match.group(0) for match in _TERM_RE.finditer(text))
    terms = [term for term in seen if term not in CAPITALIZED_STOPWORDS and len(term) > 1]
    return terms[:MAX_KEY_TERMS]


def extract_materials(text: str) -> MaterialProfile:
    """Pull terms, definitions, facts, quotes, examples and headers out of course materials.

    Each extraction runs on the raw text on its own; nothing is cross-checked.
    """
    if not text:
        return MaterialProfile()

    return MaterialProfile(
        key_terms=extract_key_terms(text),
        definitions=[
            Definition(term=m.group(1).strip(), definition=m.group(2).strip())
            for m in _DEFINITION_RE.finditer(text)
        ],
        numerical_facts=_NUMERIC_RE.findall(text),
        quotes=_QUOTE_RE.findall(text),
        examples=[m.strip() for m in _EXAMPLE_RE.findall(text)],
        headers=[m.group(1).strip() for m in _HEADER_RE.finditer(text)],
        material_type=classify_material(text),
        word_count=word_count(text),
    )
