"""Renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ticketpack.contracts.plan import PlanCore, Ticket


class PlanRenderer(ABC):
    @abstractmethod
    def render(self, core: PlanCore) -> str: ...  # pragma: no cover

    @abstractmethod
    def render_ticket(self, ticket: Ticket) -> str: ...  # pragma: no cover
