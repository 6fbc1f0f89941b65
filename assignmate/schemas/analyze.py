from typing import Any

from pydantic import BaseModel


class DefinitionOut(BaseModel):
    term: str
    definition: str


class MaterialProfileOut(BaseModel):
    key_terms: list[str]
    definitions: list[DefinitionOut]
    numerical_facts: list[str]
    quotes: list[str]
    examples: list[str]
    headers: list[str]
    material_type: str
    word_count: int


class PromptProfileOut(BaseModel):
    assignment_type: str
    word_count: int | None
    deadline: str | None
    requires_citations: bool
    instruction_verbs: list[str]
    prompt_length: int


class AnalyzeResponse(BaseModel):
    style: dict[str, Any]
    materials: MaterialProfileOut
    prompt: PromptProfileOut | None = None
