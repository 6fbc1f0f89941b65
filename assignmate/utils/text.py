import math
import re

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")


def sentences(text: str) -> list[str]:
    """Runs of text closed by terminal punctuation; trailing unterminated text is dropped."""
    return _SENTENCE_RE.findall(text)


def word_count(text: str) -> int:
    return len(text.split())


def round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def ratio(part: float, whole: float, digits: int = 2) -> float:
    if not whole:
        return 0.0
    return round_half_up(part / whole, digits)


def population_variance(values: list[int]) -> float:
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return round_half_up(sum((x - mean) ** 2 for x in values) / len(values), 2)
