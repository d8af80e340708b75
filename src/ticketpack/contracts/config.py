"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

DEFAULT_MODEL = "moonshotai/kimi-k2-instruct-0905"
DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_ISSUE_BASE_URL = "https://linear.new"


class TicketPackConfig(BaseModel):
    oracle: str = "openai"
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None
    request_timeout: float = Field(default=120.0, gt=0)
    issue_base_url: str = DEFAULT_ISSUE_BASE_URL
    replay_path: Path | None = None
    max_file_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    max_pdf_pages: int = Field(default=50, ge=1)
    max_extracted_chars: int = Field(default=120_000, ge=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_oracle(self) -> TicketPackConfig:
        if self.oracle not in {"openai", "replay"}:
            raise ValueError("oracle must be one of: openai, replay")
        if self.oracle == "replay" and self.replay_path is None:
            raise ValueError("replay oracle requires replay_path")
        if not self.model.strip():
            raise ValueError("model must be a non-empty string")
        return self
