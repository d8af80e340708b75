"""Pre-filled issue-creation links, one per ticket."""

from __future__ import annotations

from urllib.parse import quote_plus

from ticketpack.contracts.config import DEFAULT_ISSUE_BASE_URL
from ticketpack.contracts.plan import IssueLink, Ticket


def encode_query_value(value: str) -> str:
    """UTF-8 percent-encode *value* for a query string, spaces as ``+``."""
    return quote_plus(value, safe="")


def ticket_issue_description(ticket: Ticket) -> str:
    """Render the plain-text issue body for *ticket*."""
    lines: list[str] = [
        f"Type: {ticket.type}",
        f"Priority: {ticket.priority}",
        f"Estimate: {ticket.estimate}",
        "",
        f"User story: {ticket.user_story}",
        "",
        ticket.description,
        "",
        "Acceptance criteria:",
        *(f"- {criterion}" for criterion in ticket.acceptance_criteria),
    ]

    if ticket.out_of_scope:
        lines.extend(["", "Out of scope:", *(f"- {item}" for item in ticket.out_of_scope)])
    if ticket.dependencies:
        lines.extend(["", "Dependencies:", *(f"- {dep}" for dep in ticket.dependencies)])

    lines.extend(["", "QA test cases:", *(f"- {case}" for case in ticket.qa.test_cases)])
    lines.extend(["", "Analytics:"])
    for event in ticket.analytics.events:
        lines.append(f"- {event.name} ({', '.join(event.properties)})")

    return "\n".join(lines)


class IssueLinkBuilder:
    """Build ``title``/``description`` pre-filled "new issue" URLs."""

    def __init__(self, base_url: str = DEFAULT_ISSUE_BASE_URL) -> None:
        self._base_url = base_url.rstrip("/")

    def build_url(self, title: str, description: str) -> str:
        return f"{self._base_url}?title={encode_query_value(title)}&description={encode_query_value(description)}"

    def build(self, tickets: list[Ticket]) -> list[IssueLink]:
        return [
            IssueLink(
                ticket_id=ticket.ticket_id,
                linear_new_url=self.build_url(ticket.title, ticket_issue_description(ticket)),
            )
            for ticket in tickets
        ]
