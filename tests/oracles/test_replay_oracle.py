from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from ticketpack.contracts.exceptions import OracleError
from ticketpack.oracles.replay import ReplayOracle


@pytest.mark.asyncio
async def test_replays_recorded_candidate(tmp_path: Path, candidate_payload: dict[str, Any]) -> None:
    path = tmp_path / "candidate.json"
    path.write_text(json.dumps(candidate_payload), encoding="utf-8")

    core = await ReplayOracle(path).generate("ignored", temperature=0.0)

    assert core.meta.product_name == "Invoices"
    assert [ticket.ticket_id for ticket in core.tickets] == ["T1", "T2", "T3"]


@pytest.mark.asyncio
async def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OracleError, match="failed reading replay file"):
        await ReplayOracle(tmp_path / "missing.json").generate("p", temperature=0.0)


@pytest.mark.asyncio
@pytest.mark.parametrize(("content", "message"), [("{oops", "invalid JSON"), ("[]", "root must be an object")])
async def test_bad_replay_content_raises(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "candidate.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(OracleError, match=message):
        await ReplayOracle(path).generate("p", temperature=0.0)
