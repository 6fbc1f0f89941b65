from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Request

from assignmate.core.errors import ValidationError
from assignmate.schemas.analyze import AnalyzeResponse
from assignmate.schemas.generate import GenerateRequest
from assignmate.services.materials import extract_materials
from assignmate.services.prompt_analyzer import analyze_prompt
from assignmate.services.style_analyzer import analyze_style
from assignmate.utils.request_body import parse_body, read_json_body

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_inputs(request: Request):
    """Return the style, material and prompt profiles without calling the backend.

    Request fields are camelCase like ``/generate``. Profile keys are snake_case,
    so a sample without sentences yields ``{"avg_sentence_length": 0}`` rather
    than ``avgSentenceLength``.
    """
    payload = await read_json_body(request)
    body = parse_body(GenerateRequest, payload)

    if not body.writing_sample:
        raise ValidationError("Writing sample is required")

    return AnalyzeResponse(
        style=analyze_style(body.writing_sample),
        materials=asdict(extract_materials(body.materials or "")),
        prompt=asdict(analyze_prompt(body.assignment_prompt)) if body.assignment_prompt else None,
    )
