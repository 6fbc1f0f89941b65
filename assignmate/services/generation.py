from __future__ import annotations

from typing import Any

import httpx

from assignmate.core.config import Settings, get_settings
from assignmate.core.errors import GenerationError
from assignmate.core.logging import get_logger

logger = get_logger(__name__)


class GenerationService:
    """Text generation through the Hugging Face Inference API.

    One POST per call. Failures are not retried; every failure mode surfaces
    as ``GenerationError``.
    """

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings or get_settings()
        self.transport = transport

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "max_new_tokens": self.settings.hf_max_new_tokens,
            "temperature": self.settings.hf_temperature,
            "top_p": self.settings.hf_top_p,
            "repetition_penalty": self.settings.hf_repetition_penalty,
            "return_full_text": self.settings.hf_return_full_text,
        }

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.huggingface_api_key:
            headers["Authorization"] = f"Bearer {self.settings.huggingface_api_key}"
        return headers

    @staticmethod
    def _extract_text(payload: Any) -> str | None:
        if isinstance(payload, list) and payload:
            payload = payload[0]
        if isinstance(payload, dict):
            text = payload.get("generated_text")
            if isinstance(text, str):
                return text
        return None

    async def generate(self, prompt: str) -> str:
        url = self.settings.hf_model_url
        request_payload = {"inputs": prompt, "parameters": self.parameters}

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.hf_timeout_seconds),
                headers=self._headers(),
                transport=self.transport,
            ) as client:
                response = await client.post(url, json=request_payload)
        except httpx.HTTPError as exc:
            logger.exception("generation_request_failed", model=self.settings.hf_model)
            raise GenerationError(f"Generation backend request failed: {exc}") from exc

        if response.status_code >= 400:
            logger.warning(
                "generation_http_error",
                model=self.settings.hf_model,
                status_code=response.status_code,
                preview=response.text[:180],
            )
            raise GenerationError(f"Generation backend returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("generation_unparseable_response", preview=response.text[:180])
            raise GenerationError("Generation backend returned an unparseable response") from exc

        if isinstance(payload, dict) and isinstance(payload.get("error"), str):
            logger.warning("generation_backend_error", preview=payload["error"][:180])
            raise GenerationError(payload["error"])

        text = self._extract_text(payload)
        if not text or not text.strip():
            raise GenerationError("Failed to generate response")

        logger.info("generation_completed", model=self.settings.hf_model, chars=len(text))
        return text
