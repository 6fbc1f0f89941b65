from __future__ import annotations

from typing import Any, TypeVar

import pydantic
from fastapi import HTTPException, Request, status
from starlette.requests import ClientDisconnect

from assignmate.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


async def read_json_body(request: Request) -> dict[str, Any]:
    try:
        payload = await request.json()
    except ClientDisconnect as exc:
        raise HTTPException(status_code=499, detail="Client disconnected") from exc
    except ValueError as exc:
        # covers JSONDecodeError and non-UTF-8 bodies
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body") from exc

    if not isinstance(payload, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="JSON body must be an object")

    return payload


def parse_body(model: type[ModelT], payload: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
        raise ValidationError(f"Invalid request fields: {fields}") from exc
