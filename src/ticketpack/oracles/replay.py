"""Oracle that replays a recorded candidate plan from disk."""

from __future__ import annotations

import json
from pathlib import Path

from ticketpack.contracts.exceptions import OracleError
from ticketpack.contracts.oracle import GenerationOracle
from ticketpack.contracts.plan import PlanCore
from ticketpack.plan.schema import decode_plan_core


class ReplayOracle(GenerationOracle):
    """Return the candidate stored at *path*, ignoring the prompt.

    Useful for offline runs: the recorded JSON still goes through lenient
    decoding, repair, export and strict validation.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    async def generate(self, prompt: str, *, temperature: float) -> PlanCore:
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise OracleError(f"failed reading replay file: {self._path}") from exc
        except json.JSONDecodeError as exc:
            raise OracleError(f"invalid JSON in replay file: {self._path}") from exc
        if not isinstance(payload, dict):
            raise OracleError(f"replay file root must be an object: {self._path}")
        return decode_plan_core(payload)
