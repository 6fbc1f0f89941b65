import random

from assignmate.services.humanizer import HumanizerService, is_typo_candidate
from conftest import ConstantRandom, ScriptedRandom


def test_nothing_changes_when_no_gate_fires():
    text = "It is key. Then we go, and they are happy. Something important happened."
    humanizer = HumanizerService(rng=ConstantRandom(0.99))

    assert humanizer.rewrite(text) == text


def test_every_gate_fires():
    humanizer = HumanizerService(rng=ConstantRandom(0.0))

    rewritten = humanizer.rewrite("It is key. Then we go, and stay.")

    assert rewritten == "It seems to is really key and i think Well; Then we go; and stay."


def test_i_think_sees_well_insertions():
    humanizer = HumanizerService(rng=ConstantRandom(0.0))

    assert humanizer.add_natural_variations("Done. Next") == "Done. I think Well, Next"


def test_natural_variations_gate_thresholds():
    # "really" at 0.3, "Well, " at 0.7, "I think " at 0.2
    humanizer = HumanizerService(rng=ScriptedRandom([0.25, 0.5, 0.5]))

    assert humanizer.add_natural_variations("A key point. Next one.") == "A really key point. Well, Next one."


def test_humanize_gate_thresholds():
    # comma at 0.1, is/are at 0.2, run-on at 0.1
    humanizer = HumanizerService(rng=ScriptedRandom([0.05, 0.15, 0.05], fallback=0.5))

    assert humanizer.humanize("Yes, it is. Go") == "Yes; it seems to is and go"


def test_introduce_typo_swaps_first_match():
    humanizer = HumanizerService(rng=ConstantRandom(0.0))

    assert humanizer.introduce_typo("gather") == "gahter"
    assert humanizer.introduce_typo("believe") == "beleive"
    assert humanizer.introduce_typo("panel") == "panle"


def test_introduce_typo_skips_non_candidates():
    humanizer = HumanizerService(rng=ConstantRandom(0.0))

    assert humanizer.introduce_typo("Gather") == "Gather"
    assert humanizer.introduce_typo("something") == "something"
    assert humanizer.introduce_typo("because") == "because"
    assert humanizer.introduce_typo("thin") == "thin"


def test_introduce_typo_respects_swap_gate():
    humanizer = HumanizerService(rng=ConstantRandom(0.5))

    assert humanizer.introduce_typo("gather") == "gather"


def test_is_typo_candidate():
    assert is_typo_candidate("weather")
    assert not is_typo_candidate("tiny")
    assert not is_typo_candidate("extraordinarily")
    assert not is_typo_candidate("12345")
    assert not is_typo_candidate("important")


def test_typo_gate_rate():
    class CountingHumanizer(HumanizerService):
        def introduce_typo(self, word: str) -> str:
            return "TYPO"

    humanizer = CountingHumanizer(rng=random.Random(1234))
    rewritten = humanizer.humanize(" ".join(["gather"] * 100_000))

    typos = rewritten.split().count("TYPO")
    assert 200 <= typos <= 400


def test_semicolon_rate():
    humanizer = HumanizerService(rng=random.Random(42))

    rewritten = humanizer.humanize("a, " * 10_000)

    semicolons = rewritten.count(";")
    assert semicolons + rewritten.count(",") == 10_000
    assert 800 <= semicolons <= 1_200


def test_words_survive_when_only_punctuation_changes():
    text = "The weather is nice, and the panel agrees. Everything is fine."
    humanizer = HumanizerService(rng=random.Random(7))

    rewritten = humanizer.rewrite(text)

    original_words = {w.strip(".,;").lower() for w in text.split()}
    extra = {"really", "well", "i", "think", "seems", "to", "and"}
    for word in rewritten.split():
        cleaned = word.strip(".,;").lower()
        assert cleaned in original_words or cleaned in extra or len(cleaned) >= 5


def test_default_source_is_unseeded_random():
    assert isinstance(HumanizerService().rng, random.Random)
