from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    writing_sample: str | None = Field(default=None, alias="writingSample")
    assignment_prompt: str | None = Field(default=None, alias="assignmentPrompt")
    materials: str | None = Field(default="")


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    generated_text: str = Field(alias="generatedText")
