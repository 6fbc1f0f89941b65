from __future__ import annotations

import re
from collections import Counter
from typing import Any

from assignmate.services.vocabulary import FREQUENT_WORDS, TRANSITION_WORDS
from assignmate.utils.text import population_variance, ratio, round_half_up, sentences

_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n|\r\n\s*\r\n")
_LOWER_WORD_RE = re.compile(r"\b[a-z]+\b", re.ASCII)
_CLAUSE_SPLIT = re.compile(r"[.!?]+")
_ADJECTIVE_RE = re.compile(
    r"\b\w+(?:ful|ous|ive|able|ible|al|ial|ic|ical|ish|less|y)\b", re.IGNORECASE | re.ASCII
)
_ADVERB_RE = re.compile(r"\b\w+ly\b", re.IGNORECASE | re.ASCII)
_FIRST_WORD_RE = re.compile(r"^\s*(\w+)", re.ASCII)

_PUNCTUATION_PATTERNS = {
    "comma_rate": re.compile(r","),
    "semicolon_rate": re.compile(r";"),
    "colon_rate": re.compile(r":"),
    "dash_rate": re.compile(r"—|–|-"),
    "exclamation_rate": re.compile(r"!"),
    "question_rate": re.compile(r"\?"),
    "parentheses_rate": re.compile(r"\(|\)"),
    "ellipses_rate": re.compile(r"\.{3}|…"),
    "quotation_rate": re.compile(r"[\"“”]"),
}

_COMPLEX_RE = re.compile(r",.*and|,.*but|,.*because|,.*however|,.*therefore|;|:")
_SUBORDINATE_RE = re.compile(
    r"\b(although|though|even though|because|since|unless|if|when|while|whereas|wherever)\b"
)

_REPEATED_WORD_RE = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE | re.ASCII)
_AND_CHAIN_RE = re.compile(r"\w+\s+and\s+\w+\s+and\s+\w+\s+and\s+\w+", re.ASCII)
_PASSIVE_RE = re.compile(r"\b(am|is|are|was|were|be|been|being)\s+\w+ed\b", re.IGNORECASE | re.ASCII)

_CONTRACTION_RE = re.compile(r"\b\w+'(s|t|ve|ll|re|d)\b", re.ASCII)
_FORMAL_RE = re.compile(r"\b(thus|therefore|consequently|furthermore|moreover)\b", re.IGNORECASE)
_INFORMAL_RE = re.compile(r"\b(well|anyway|basically|actually|like|just|so)\b", re.IGNORECASE)
_FIRST_PERSON_RE = re.compile(r"\b(I|me|my|mine|myself|we|us|our|ours|ourselves)\b", re.IGNORECASE)
_THIRD_PERSON_RE = re.compile(
    r"\b(he|him|his|himself|she|her|hers|herself|they|them|their|theirs|themselves|it|its|itself)\b",
    re.IGNORECASE,
)


def analyze_style(text: str) -> dict[str, Any]:
    """Build a style profile for a writing sample.

    Every rate is a plain regex count divided by a sentence or character total.
    Text without any terminal punctuation has no sentences and yields only
    ``{"avg_sentence_length": 0}``.
    """
    sents = sentences(text)
    if not sents:
        return {"avg_sentence_length": 0}

    word_counts = [len(s.strip().split()) for s in sents]
    avg = int(round_half_up(sum(word_counts) / len(word_counts)))

    paragraph_lengths = [len(sentences(p)) for p in _PARAGRAPH_SPLIT.split(text)]
    paragraph_lengths = [n for n in paragraph_lengths if n > 0]

    return {
        "avg_sentence_length": avg,
        "sentence_structure": {
            "min": min(word_counts),
            "max": max(word_counts),
            "avg": avg,
            "variance": population_variance(word_counts),
        },
        "paragraph_structure": {
            "avg_sentences_per_paragraph": ratio(sum(paragraph_lengths), len(paragraph_lengths), 1),
            "variability": population_variance(paragraph_lengths),
        },
        "vocabulary": analyze_vocabulary(text),
        "punctuation": analyze_punctuation(text),
        "transitions": analyze_transitions(text, sents),
        "complexity": analyze_complexity(sents),
        "error_patterns": analyze_error_patterns(text),
        "stylistic_preferences": analyze_preferences(text, sents),
    }


def analyze_vocabulary(text: str) -> dict[str, Any]:
    words = _LOWER_WORD_RE.findall(text.lower())
    clauses = [c for c in _CLAUSE_SPLIT.split(text) if c.strip()]

    frequency = Counter(words)
    favorites = [
        word for word, _ in frequency.most_common() if len(word) > 3 and word not in FREQUENT_WORDS
    ][:5]

    return {
        "lexical_diversity": ratio(len(frequency), len(words)),
        "favorite_words": favorites,
        "adjective_frequency": ratio(len(_ADJECTIVE_RE.findall(text)), len(clauses)),
        "adverb_frequency": ratio(len(_ADVERB_RE.findall(text)), len(clauses)),
        "avg_word_length": ratio(sum(len(w) for w in words), len(words), 1),
    }


def analyze_punctuation(text: str) -> dict[str, float]:
    total = len(text)
    return {name: ratio(len(pattern.findall(text)), total, 3) for name, pattern in _PUNCTUATION_PATTERNS.items()}


def analyze_transitions(text: str, sents: list[str]) -> dict[str, Any]:
    found = [word for word in TRANSITION_WORDS if re.search(rf"\b{word}\b", text, re.IGNORECASE)]

    starters: Counter[str] = Counter()
    for sentence in sents:
        match = _FIRST_WORD_RE.match(sentence.strip())
        if match:
            starters[match.group(1).lower()] += 1

    return {
        "transitions_found": found,
        "preferred_transitions": found[:3],
        "common_sentence_starters": [word for word, _ in starters.most_common(3)],
        "uses_connecting_words": len(found) > 2,
    }


def analyze_complexity(sents: list[str]) -> dict[str, Any]:
    complex_count = sum(1 for s in sents if _COMPLEX_RE.search(s))
    subordinate_count = sum(1 for s in sents if _SUBORDINATE_RE.search(s))
    return {
        "complex_sentence_rate": ratio(complex_count, len(sents)),
        "subordinate_clause_rate": ratio(subordinate_count, len(sents)),
        "uses_varied_structure": complex_count > len(sents) * 0.3,
    }


def analyze_error_patterns(text: str) -> dict[str, Any]:
    return {
        "repeats_words": _REPEATED_WORD_RE.search(text) is not None,
        "uses_run_on_sentences": _AND_CHAIN_RE.search(text) is not None,
        "passive_voice_frequency": len(_PASSIVE_RE.findall(text)),
    }


def analyze_preferences(text: str, sents: list[str]) -> dict[str, Any]:
    contractions = len(_CONTRACTION_RE.findall(text))
    formal = len(_FORMAL_RE.findall(text))
    informal = len(_INFORMAL_RE.findall(text))
    return {
        "uses_contractions": contractions > len(sents) * 0.3,
        "formality_level": "formal" if formal > informal else "casual",
        "first_person_usage": ratio(len(_FIRST_PERSON_RE.findall(text)), len(sents)),
        "third_person_usage": ratio(len(_THIRD_PERSON_RE.findall(text)), len(sents)),
    }
