from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from assignmate.api.deps import get_generation_service, get_humanizer
from assignmate.core.errors import ValidationError
from assignmate.schemas.generate import GenerateRequest, GenerateResponse
from assignmate.services.assignment import TextGenerator, write_assignment
from assignmate.services.humanizer import HumanizerService
from assignmate.utils.request_body import parse_body, read_json_body

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate_assignment(
    request: Request,
    generator: TextGenerator = Depends(get_generation_service),
    humanizer: HumanizerService = Depends(get_humanizer),
):
    payload = await read_json_body(request)
    body = parse_body(GenerateRequest, payload)

    if not body.writing_sample or not body.assignment_prompt:
        raise ValidationError("Writing sample and assignment prompt are required")

    text = await write_assignment(
        writing_sample=body.writing_sample,
        materials=body.materials or "",
        assignment_prompt=body.assignment_prompt,
        generator=generator,
        humanizer=humanizer,
    )
    return GenerateResponse(text=text, generated_text=text)
