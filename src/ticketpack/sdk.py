"""SDK composition root for ticketpack."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from pydantic import ValidationError

from ticketpack.config import load_config
from ticketpack.contracts.config import TicketPackConfig
from ticketpack.contracts.exceptions import ConfigError, GenerationFailed, InputValidationError, PlanValidationError
from ticketpack.contracts.oracle import GenerationOracle
from ticketpack.contracts.plan import Plan, PlanCore, PlanExports
from ticketpack.contracts.progress import GenerationProgress, NullGenerationProgress
from ticketpack.contracts.renderer import PlanRenderer
from ticketpack.contracts.request import PlanRequest
from ticketpack.generation import PlanOrchestrator
from ticketpack.oracles import create_oracle
from ticketpack.plan import PlanRepairer, PlanValidator, QualityChecker
from ticketpack.renderers import IssueLinkBuilder, MarkdownRenderer, create_renderer

_LOG = logging.getLogger(__name__)

__all__ = ["TicketPack", "assemble_plan", "build_request", "load_config"]


def build_request(payload: Any) -> PlanRequest:
    """Validate a raw request payload (camelCase or snake_case keys).

    Raises:
        InputValidationError: The payload is not an object or fails field checks.
    """
    if isinstance(payload, PlanRequest):
        return payload
    if not isinstance(payload, dict):
        raise InputValidationError("request body must be a JSON object")
    try:
        return PlanRequest.model_validate(payload)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'request'}: {error['msg']}" for error in exc.errors()
        )
        raise InputValidationError(f"invalid request: {details}") from exc


def assemble_plan(
    core: PlanCore,
    *,
    renderer: PlanRenderer | None = None,
    link_builder: IssueLinkBuilder | None = None,
) -> Plan:
    """Attach Markdown and issue-link exports to an already repaired core."""
    renderer = renderer or MarkdownRenderer()
    link_builder = link_builder or IssueLinkBuilder()
    exports = PlanExports(markdown=renderer.render(core), linear=link_builder.build(core.tickets))
    return Plan(**dict(core), exports=exports)


class TicketPack:
    """ticketpack SDK public API.

    One instance can serve many requests; no plan state is kept between calls.
    """

    def __init__(
        self,
        *,
        oracle: GenerationOracle,
        config: TicketPackConfig | None = None,
        renderer: PlanRenderer | None = None,
        progress: GenerationProgress | None = None,
    ) -> None:
        self._oracle = oracle
        self._config = config or TicketPackConfig()
        self._renderer = renderer or MarkdownRenderer()
        self._progress = progress or NullGenerationProgress()
        self._link_builder = IssueLinkBuilder(self._config.issue_base_url)

    @classmethod
    def from_config(
        cls,
        config: TicketPackConfig,
        *,
        renderer_name: str = "markdown",
        progress: GenerationProgress | None = None,
    ) -> TicketPack:
        try:
            renderer = create_renderer(renderer_name)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        return cls(oracle=create_oracle(config), config=config, renderer=renderer, progress=progress)

    async def __aenter__(self) -> TicketPack:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._oracle.aclose()

    async def generate_plan(self, request: PlanRequest | dict[str, Any]) -> Plan:
        """Run the full pipeline and return a strictly valid Plan.

        Raises:
            InputValidationError: The request is malformed; the oracle is not called.
            GenerationFailed: Both oracle attempts failed, or the assembled plan
                failed strict validation.
        """
        plan_request = build_request(request)
        orchestrator = PlanOrchestrator(self._oracle, progress=self._progress)
        core = await orchestrator.orchestrate(plan_request)

        self._progress.phase_start("Repair")
        repaired = PlanRepairer().repair(core)
        for finding in QualityChecker().check(repaired):
            _LOG.warning("Plan below quality bar: %s", finding)
        self._progress.phase_done("Repair")

        self._progress.phase_start("Export")
        plan = assemble_plan(repaired, renderer=self._renderer, link_builder=self._link_builder)
        self._progress.phase_done("Export")

        self._progress.phase_start("Validate")
        try:
            PlanValidator().validate(plan)
        except PlanValidationError as exc:
            self._progress.phase_error("Validate", exc)
            raise GenerationFailed(str(exc)) from exc
        self._progress.phase_done("Validate")
        return plan
