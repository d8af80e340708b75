from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from ticketpack.contracts.config import TicketPackConfig
from ticketpack.contracts.exceptions import ConfigError, OracleError
from ticketpack.oracles.openai import SCHEMA_NAME, OpenAICompatibleOracle


def _completion(content: str | None) -> dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"},
        ],
    }


def _oracle(handler: Callable[[httpx.Request], httpx.Response]) -> OpenAICompatibleOracle:
    return OpenAICompatibleOracle(
        api_key="test-key",
        model="test-model",
        base_url="https://llm.test/v1",
        timeout=5.0,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_generate_sends_structured_request_and_decodes(candidate_payload: dict[str, Any]) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_completion(json.dumps(candidate_payload)))

    oracle = _oracle(handler)
    core = await oracle.generate("PROMPT", temperature=0.0)
    await oracle.aclose()

    assert core.meta.product_name == "Invoices"
    assert len(core.tickets) == 3
    assert len(seen) == 1
    request = seen[0]
    assert request.url.path == "/v1/chat/completions"
    assert request.headers["authorization"] == "Bearer test-key"
    body = json.loads(request.content)
    assert body["model"] == "test-model"
    assert body["temperature"] == 0.0
    assert body["messages"] == [{"role": "user", "content": "PROMPT"}]
    assert body["response_format"]["type"] == "json_schema"
    assert body["response_format"]["json_schema"]["name"] == SCHEMA_NAME
    assert body["response_format"]["json_schema"]["schema"]["additionalProperties"] is False


@pytest.mark.asyncio
async def test_missing_leaves_decode_leniently() -> None:
    oracle = _oracle(lambda request: httpx.Response(200, json=_completion('{"tickets": [{"title": "Only title"}]}')))

    core = await oracle.generate("PROMPT", temperature=0.0)

    assert core.tickets[0].title == "Only title"
    assert core.tickets[0].epic_id == ""


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("content", "message"),
    [
        (None, "empty content"),
        ("   ", "empty content"),
        ("{not json", "invalid JSON"),
        ("[1, 2]", "expected an object"),
    ],
)
async def test_bad_content_raises_oracle_error(content: str | None, message: str) -> None:
    oracle = _oracle(lambda request: httpx.Response(200, json=_completion(content)))

    with pytest.raises(OracleError, match=message):
        await oracle.generate("PROMPT", temperature=0.0)


@pytest.mark.asyncio
async def test_no_choices_raises_oracle_error() -> None:
    payload = {**_completion("{}"), "choices": []}
    oracle = _oracle(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(OracleError, match="no choices"):
        await oracle.generate("PROMPT", temperature=0.0)


@pytest.mark.asyncio
async def test_http_error_is_not_retried_and_raises_oracle_error() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, json={"error": {"message": "upstream down"}})

    oracle = _oracle(handler)

    with pytest.raises(OracleError, match="oracle request failed"):
        await oracle.generate("PROMPT", temperature=0.0)
    assert len(calls) == 1


def test_from_config_requires_api_key() -> None:
    with pytest.raises(ConfigError, match="api_key"):
        OpenAICompatibleOracle.from_config(TicketPackConfig(api_key="  "))


def test_from_config_builds_oracle() -> None:
    config = TicketPackConfig(api_key="secret")

    oracle = OpenAICompatibleOracle.from_config(config, http_client=httpx.AsyncClient())

    assert isinstance(oracle, OpenAICompatibleOracle)
