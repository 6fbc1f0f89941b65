from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from assignmate.api.deps import get_generation_service, get_humanizer
from assignmate.core.errors import GenerationError
from assignmate.main import app
from assignmate.services.humanizer import HumanizerService


class ConstantRandom:
    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


class ScriptedRandom:
    def __init__(self, values: list[float], fallback: float = 0.99) -> None:
        self.values = list(values)
        self.fallback = fallback

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.fallback


class FakeGenerator:
    def __init__(self, text: str = "Generated essay text.", error: str | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise GenerationError(self.error)
        return self.text


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def client(fake_generator):
    app.dependency_overrides[get_generation_service] = lambda: fake_generator
    app.dependency_overrides[get_humanizer] = lambda: HumanizerService(rng=ConstantRandom(0.99))
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
