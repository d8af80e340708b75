"""Generation oracle contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ticketpack.contracts.plan import PlanCore


class GenerationOracle(ABC):
    """Turns prompt text into a leniently decoded candidate plan.

    Implementations raise on transport errors or unusable output; they never
    return partial results.
    """

    @abstractmethod
    async def generate(self, prompt: str, *, temperature: float) -> PlanCore: ...  # pragma: no cover

    async def aclose(self) -> None:
        """Release any underlying resources."""
