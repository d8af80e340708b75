"""Two-attempt plan generation against an unreliable oracle."""

from __future__ import annotations

import logging

from ticketpack.contracts.exceptions import GenerationFailed
from ticketpack.contracts.oracle import GenerationOracle
from ticketpack.contracts.plan import PlanCore
from ticketpack.contracts.progress import GenerationProgress, NullGenerationProgress
from ticketpack.contracts.request import PlanRequest
from ticketpack.generation.prompt import build_prompt, build_retry_prompt
from ticketpack.plan.normalizer import normalize_prd_text

_LOG = logging.getLogger(__name__)

UNKNOWN_ERROR = "unknown"
# Both attempts sample deterministically.
TEMPERATURE = 0.0


def _error_message(exc: BaseException) -> str:
    return str(exc) or UNKNOWN_ERROR


class PlanOrchestrator:
    """Normalize the PRD, prompt the oracle, and retry exactly once on failure.

    The retry is immediate: a failure is treated as a content or schema
    problem that a re-prompt can correct, not a transient transport issue.
    """

    def __init__(
        self,
        oracle: GenerationOracle,
        *,
        progress: GenerationProgress | None = None,
    ) -> None:
        self._oracle = oracle
        self._progress = progress or NullGenerationProgress()

    async def orchestrate(self, request: PlanRequest) -> PlanCore:
        """Return the decoded, not yet repaired, candidate plan.

        Raises:
            GenerationFailed: Both oracle attempts raised.
        """
        self._progress.phase_start("Normalize")
        cleaned = normalize_prd_text(request.prd)
        prompt = build_prompt(request, cleaned)
        self._progress.phase_done("Normalize")

        try:
            return await self._attempt("Generate", prompt)
        except Exception as exc:
            first_error = _error_message(exc)
            _LOG.warning("Plan generation attempt 1 failed: %s", first_error)

        try:
            return await self._attempt("Retry", build_retry_prompt(prompt, first_error))
        except Exception as exc:
            message = _error_message(exc)
            _LOG.error("Plan generation attempt 2 failed: %s", message)
            raise GenerationFailed(message) from exc

    async def _attempt(self, phase: str, prompt: str) -> PlanCore:
        self._progress.phase_start(phase)
        try:
            core = await self._oracle.generate(prompt, temperature=TEMPERATURE)
        except Exception as exc:
            self._progress.phase_error(phase, exc)
            raise
        self._progress.phase_done(phase)
        _LOG.debug("%s produced %d epic(s), %d ticket(s)", phase, len(core.epics), len(core.tickets))
        return core
