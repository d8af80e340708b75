"""Quality-bar inspection for generated plans."""

from __future__ import annotations

from dataclasses import dataclass

from ticketpack.contracts.plan import PlanCore


@dataclass(frozen=True)
class QualityBar:
    """Minimum counts requested from the generation oracle."""

    min_epics: int = 2
    min_tickets: int = 6
    max_tickets: int = 10
    min_edge_cases: int = 2
    min_acceptance_criteria: int = 3
    min_test_cases: int = 2
    min_events: int = 1
    min_event_properties: int = 2


class QualityChecker:
    """Report where a plan falls short of the quality bar.

    Findings are advisory: the pipeline logs them and still returns the plan.
    """

    def __init__(self, bar: QualityBar | None = None) -> None:
        self._bar = bar or QualityBar()

    def check(self, core: PlanCore) -> list[str]:
        bar = self._bar
        findings: list[str] = []

        if len(core.epics) < bar.min_epics:
            findings.append(f"expected at least {bar.min_epics} epics, got {len(core.epics)}")
        if not bar.min_tickets <= len(core.tickets) <= bar.max_tickets:
            findings.append(f"expected {bar.min_tickets}-{bar.max_tickets} tickets, got {len(core.tickets)}")

        for epic in core.epics:
            if len(epic.edge_cases) < bar.min_edge_cases:
                findings.append(f"epic {epic.epic_id} has {len(epic.edge_cases)} edge case(s)")

        for ticket in core.tickets:
            if len(ticket.acceptance_criteria) < bar.min_acceptance_criteria:
                findings.append(
                    f"ticket {ticket.ticket_id} has {len(ticket.acceptance_criteria)} acceptance criteria"
                )
            if len(ticket.qa.test_cases) < bar.min_test_cases:
                findings.append(f"ticket {ticket.ticket_id} has {len(ticket.qa.test_cases)} QA test case(s)")
            if len(ticket.analytics.events) < bar.min_events:
                findings.append(f"ticket {ticket.ticket_id} has no analytics events")
            for event in ticket.analytics.events:
                if len(event.properties) < bar.min_event_properties:
                    findings.append(
                        f"ticket {ticket.ticket_id} event '{event.name}' has {len(event.properties)} property(ies)"
                    )

        return findings
