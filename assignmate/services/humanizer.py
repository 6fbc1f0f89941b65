from __future__ import annotations

import random
import re
from typing import Protocol

from assignmate.core.logging import get_logger
from assignmate.services.vocabulary import FREQUENT_WORDS, TYPO_EXEMPT_WORDS

logger = get_logger(__name__)

_INTENSITY_RE = re.compile(r"\b(important|significant|key)\b", re.IGNORECASE)
_SENTENCE_START_RE = re.compile(r"\. ([A-Z])")
_LONG_WORD_RE = re.compile(r"\b\w{5,}\b", re.ASCII)
_COMMA_RE = re.compile(r",")
_COPULA_RE = re.compile(r"\b(is|are)\b")

# First occurrence of the key is swapped for the value.
TYPO_SWAPS = (("th", "ht"), ("ie", "ei"), ("el", "le"))
_TYPO_EXEMPT = FREQUENT_WORDS | TYPO_EXEMPT_WORDS

TYPO_RATE = 0.003
TYPO_SWAP_RATE = 0.3
REALLY_RATE = 0.3
WELL_RATE = 0.7
I_THINK_RATE = 0.2
SEMICOLON_RATE = 0.1
HEDGE_RATE = 0.2
RUN_ON_RATE = 0.1


class RandomSource(Protocol):
    def random(self) -> float: ...


def is_typo_candidate(word: str) -> bool:
    """Mid-length, lowercase-initial words that are not on either stoplist."""
    return (
        4 < len(word) < 12
        and word[0] != word[0].upper()
        and word.lower() not in _TYPO_EXEMPT
    )


class HumanizerService:
    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def _chance(self, probability: float) -> bool:
        return self.rng.random() < probability

    def introduce_typo(self, word: str) -> str:
        if not is_typo_candidate(word):
            return word
        for correct, typo in TYPO_SWAPS:
            if correct in word and self._chance(TYPO_SWAP_RATE):
                return word.replace(correct, typo, 1)
        return word

    def add_natural_variations(self, text: str) -> str:
        out = _INTENSITY_RE.sub(
            lambda m: f"really {m.group(0)}" if self._chance(REALLY_RATE) else m.group(0),
            text,
        )
        out = _SENTENCE_START_RE.sub(
            lambda m: f". Well, {m.group(1)}" if self._chance(WELL_RATE) else m.group(0),
            out,
        )
        # Runs over the text already carrying the "Well, " insertions.
        return _SENTENCE_START_RE.sub(
            lambda m: f". I think {m.group(1)}" if self._chance(I_THINK_RATE) else m.group(0),
            out,
        )

    def humanize(self, text: str) -> str:
        out = _LONG_WORD_RE.sub(
            lambda m: self.introduce_typo(m.group(0)) if self._chance(TYPO_RATE) else m.group(0),
            text,
        )
        out = _COMMA_RE.sub(lambda m: ";" if self._chance(SEMICOLON_RATE) else m.group(0), out)
        out = _COPULA_RE.sub(
            lambda m: f"seems to {m.group(0)}" if self._chance(HEDGE_RATE) else m.group(0),
            out,
        )
        return _SENTENCE_START_RE.sub(
            lambda m: f" and {m.group(1).lower()}" if self._chance(RUN_ON_RATE) else m.group(0),
            out,
        )

    def rewrite(self, text: str) -> str:
        rewritten = self.humanize(self.add_natural_variations(text))
        logger.debug("humanizer_applied", input_chars=len(text), output_chars=len(rewritten))
        return rewritten


humanizer_service = HumanizerService()
