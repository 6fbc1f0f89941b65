from functools import lru_cache
import json
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="AssignMate API", alias="APP_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    cors_allowed_origins: str = Field(default="http://localhost:3000", alias="CORS_ALLOWED_ORIGINS")

    huggingface_api_key: str = Field(default="", alias="HUGGINGFACE_API_KEY")
    hf_inference_url: str = Field(
        default="https://api-inference.huggingface.co/models",
        alias="HF_INFERENCE_URL",
    )
    hf_model: str = Field(default="mistralai/Mixtral-8x7B-Instruct-v0.1", alias="HF_MODEL")
    hf_max_new_tokens: int = Field(default=1024, alias="HF_MAX_NEW_TOKENS")
    hf_temperature: float = Field(default=0.85, alias="HF_TEMPERATURE")
    hf_top_p: float = Field(default=0.9, alias="HF_TOP_P")
    hf_repetition_penalty: float = Field(default=1.1, alias="HF_REPETITION_PENALTY")
    hf_return_full_text: bool = Field(default=False, alias="HF_RETURN_FULL_TEXT")
    hf_timeout_seconds: float | None = Field(default=None, alias="HF_TIMEOUT_SECONDS")

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return "INFO"
        normalized = value.strip().upper()
        if normalized in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return normalized
        return "INFO"

    @field_validator("hf_timeout_seconds", mode="before")
    @classmethod
    def empty_timeout_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @staticmethod
    def _normalize_origin(origin: str) -> str:
        candidate = origin.strip().strip("'\"")
        if not candidate:
            return ""

        if "://" not in candidate:
            candidate = f"https://{candidate}"

        parsed = urlsplit(candidate)
        if not parsed.scheme or not parsed.netloc:
            return ""

        # CORS matching is exact on scheme+host+port; paths must be removed.
        return f"{parsed.scheme}://{parsed.netloc}".rstrip("/")

    @property
    def cors_origins(self) -> list[str]:
        raw = self.cors_allowed_origins.strip()
        if not raw:
            return []

        values: list[str]
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
                if isinstance(parsed, list):
                    values = [str(item) for item in parsed]
                else:
                    values = [raw]
            except json.JSONDecodeError:
                values = [raw]
        else:
            values = raw.split(",")

        normalized = [self._normalize_origin(value) for value in values]
        return [origin for origin in normalized if origin]

    @property
    def hf_model_url(self) -> str:
        return f"{self.hf_inference_url.rstrip('/')}/{self.hf_model}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
