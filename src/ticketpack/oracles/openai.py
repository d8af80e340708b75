"""Generation oracle backed by an OpenAI-compatible chat completions API."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from openai import AsyncOpenAI, OpenAIError

from ticketpack.contracts.config import TicketPackConfig
from ticketpack.contracts.exceptions import ConfigError, OracleError
from ticketpack.contracts.oracle import GenerationOracle
from ticketpack.contracts.plan import PlanCore
from ticketpack.plan.schema import decode_plan_core, plan_core_json_schema

_LOG = logging.getLogger(__name__)

SCHEMA_NAME = "plan_core"


class OpenAICompatibleOracle(GenerationOracle):
    """Request a structured PlanCore from a chat completions endpoint.

    SDK-level retries are disabled; the orchestrator owns the retry policy.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            http_client=http_client or httpx.AsyncClient(timeout=timeout),
        )
        self._schema = plan_core_json_schema()

    @classmethod
    def from_config(
        cls,
        config: TicketPackConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> OpenAICompatibleOracle:
        api_key = (config.api_key or "").strip()
        if not api_key:
            raise ConfigError("api_key is required for the openai oracle (set GROQ_API_KEY or OPENAI_API_KEY)")
        return cls(
            api_key=api_key,
            model=config.model,
            base_url=config.base_url,
            timeout=config.request_timeout,
            http_client=http_client,
        )

    async def generate(self, prompt: str, *, temperature: float) -> PlanCore:
        _LOG.debug("Requesting plan from %s (prompt %d chars)", self._model, len(prompt))
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": SCHEMA_NAME, "schema": self._schema},
                },
            )
        except OpenAIError as exc:
            raise OracleError(f"oracle request failed: {exc}") from exc

        if not response.choices:
            raise OracleError("oracle returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise OracleError("oracle returned empty content")
        return decode_plan_core(self._parse_object(content))

    async def aclose(self) -> None:
        await self._client.close()

    @staticmethod
    def _parse_object(content: str) -> dict[str, Any]:
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as exc:
            raise OracleError(f"oracle returned invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise OracleError(f"oracle returned a JSON {type(payload).__name__}, expected an object")
        return payload
