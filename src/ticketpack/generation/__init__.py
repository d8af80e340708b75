"""Generation orchestration."""

from ticketpack.generation.orchestrator import PlanOrchestrator
from ticketpack.generation.prompt import build_prompt, build_retry_prompt

__all__ = ["PlanOrchestrator", "build_prompt", "build_retry_prompt"]
