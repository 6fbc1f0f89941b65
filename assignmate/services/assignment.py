from __future__ import annotations

import time
from typing import Protocol

from assignmate.core.errors import GenerationError
from assignmate.core.logging import get_logger
from assignmate.services.humanizer import HumanizerService
from assignmate.services.prompt_builder import build_prompt

logger = get_logger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


async def write_assignment(
    *,
    writing_sample: str,
    materials: str,
    assignment_prompt: str,
    generator: TextGenerator,
    humanizer: HumanizerService,
) -> str:
    start = time.perf_counter()
    instruction_block = build_prompt(writing_sample, materials, assignment_prompt)

    text = await generator.generate(instruction_block)
    if not text:
        raise GenerationError("Failed to generate response")

    text = humanizer.rewrite(text)
    logger.info(
        "assignment_written",
        prompt_chars=len(instruction_block),
        output_chars=len(text),
        latency_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return text
