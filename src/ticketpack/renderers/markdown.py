"""Markdown export of a repaired plan."""

from __future__ import annotations

from ticketpack.contracts.plan import Epic, PlanCore, Ticket
from ticketpack.contracts.renderer import PlanRenderer
from ticketpack.renderers.components import bullets, checklist, text_or_none

TICKET_SEPARATOR = "---"


class MarkdownRenderer(PlanRenderer):
    """Renders a plan as a single Markdown ticket pack."""

    def render(self, core: PlanCore) -> str:
        meta = core.meta
        summary = core.summary
        sections: list[str] = [
            f"# {text_or_none(meta.product_name)} - Ticket Pack",
            f"Platform: {meta.platform} | Confidence: {meta.confidence}/100",
            "\n\n".join(
                [
                    f"## Summary\nProblem: {text_or_none(summary.problem)}",
                    f"Target users:\n{bullets(summary.target_users)}",
                    f"Goals:\n{bullets(summary.goals)}",
                    f"Non-goals:\n{bullets(summary.non_goals)}",
                    f"Success metrics:\n{bullets(summary.success_metrics)}",
                ]
            ),
            f"## Assumptions\n{bullets(meta.assumptions)}",
        ]
        if meta.open_questions:
            sections.append(f"## Open questions\n{bullets(meta.open_questions)}")

        epic_blocks = [self._render_epic(epic) for epic in core.epics]
        sections.append("\n\n".join(["## Epics", *epic_blocks]) if epic_blocks else f"## Epics\n{bullets([])}")

        ticket_blocks = [self.render_ticket(ticket) for ticket in core.tickets]
        if ticket_blocks:
            sections.append("## Tickets")
            sections.append(f"\n\n{TICKET_SEPARATOR}\n\n".join(ticket_blocks) + f"\n\n{TICKET_SEPARATOR}")
        else:
            sections.append(f"## Tickets\n{bullets([])}")

        return "\n\n".join(sections) + "\n"

    def render_ticket(self, ticket: Ticket) -> str:
        """Render the card block for one ticket."""
        return "\n\n".join(
            [
                f"### {ticket.ticket_id} - {ticket.title}\n"
                f"Type: {ticket.type} | Priority: {ticket.priority} | Estimate: {ticket.estimate}",
                f"User story: {text_or_none(ticket.user_story)}",
                text_or_none(ticket.description),
                f"Acceptance criteria:\n{checklist(ticket.acceptance_criteria)}",
                f"Out of scope:\n{bullets(ticket.out_of_scope)}",
                f"Dependencies:\n{bullets(ticket.dependencies)}",
                f"QA test cases:\n{bullets(ticket.qa.test_cases)}",
                f"Analytics events:\n{self._render_events(ticket)}",
            ]
        )

    @staticmethod
    def _render_epic(epic: Epic) -> str:
        return (
            f"### {epic.epic_id} - {epic.title}\n"
            f"Outcome: {text_or_none(epic.outcome)}\n"
            f"Tickets:\n{bullets(epic.tickets)}\n"
            f"Edge cases:\n{bullets(epic.edge_cases)}"
        )

    @staticmethod
    def _render_events(ticket: Ticket) -> str:
        if not ticket.analytics.events:
            return bullets([])
        lines: list[str] = []
        for event in ticket.analytics.events:
            lines.append(f"- {text_or_none(event.name)}")
            if event.properties:
                lines.append(bullets(event.properties, indent="  "))
        return "\n".join(lines)
