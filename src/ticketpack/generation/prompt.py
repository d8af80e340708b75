"""Instruction payloads sent to the generation oracle."""

from __future__ import annotations

from ticketpack.contracts.request import PlanRequest

_INSTRUCTIONS = """\
You are a PRD-to-Ticket agent.

Hard requirements:
- Return ONLY a JSON object that matches the provided schema. No markdown. No extra keys.
- Always include EVERY field in the schema for EVERY object.
  - If unknown: use "" for strings, [] for arrays, {} for objects.
  - If an enumerated value is unknown use: platform "web", type "task", priority "P2", estimate "M".
- If critical info is missing, add up to 6 clarifying questions to meta.openQuestions,
  but still produce a best-effort plan.

ID rules (critical for schema validity):
- Epics MUST use epicId values: "E1", "E2", ... sequential.
- Tickets MUST use ticketId values: "T1", "T2", ... sequential.
- Every ticket MUST include "epicId" and it MUST match one of the epics[].epicId values.
- Every epic MUST include a "tickets" array listing ticketIds that belong to that epic.

Quality bar:
- 2-4 epics, 6-10 tickets total.
- Each epic must include at least 2 edgeCases.
- Each ticket must include:
  - at least 3 acceptanceCriteria
  - at least 2 qa.testCases
  - outOfScope for at least ~30% of tickets to show tradeoffs
  - analytics.events with at least 1 event and at least 2 properties

Output guidance:
- Summarize and rephrase, do NOT copy long passages from the PRD verbatim.
- Keep each ticket description to 2-5 lines.
- Keep acceptance criteria and test cases as short bullet-like strings."""

_RETRY_RULES = """\
Fix it by ensuring:
- Every ticket includes epicId and it matches an existing epicId (E1, E2, ...)
- No keys are omitted anywhere
- acceptanceCriteria has 3+ items for every ticket
- qa.testCases has 2+ items for every ticket
- analytics.events has at least 1 event for every ticket"""

NOT_SPECIFIED = "Not specified"


def _context_value(value: str | None, placeholder: str) -> str:
    if value is None or not value.strip():
        return placeholder
    return value.strip()


def build_prompt(request: PlanRequest, cleaned_prd: str) -> str:
    """Build the first-attempt payload; the PRD text is appended verbatim at the end."""
    platform = request.platform.value if request.platform is not None else None
    context = "\n".join(
        [
            "Context fields:",
            f"- productName: {_context_value(request.product_name, 'Unnamed product')}",
            f"- targetUser: {_context_value(request.target_user, NOT_SPECIFIED)}",
            f"- platform: {_context_value(platform, NOT_SPECIFIED)}",
            f"- constraints: {_context_value(request.constraints, 'None provided')}",
            f"- releaseDate: {_context_value(request.release_date, NOT_SPECIFIED)}",
        ]
    )
    return f"{_INSTRUCTIONS}\n\n{context}\n\nPRD:\n{cleaned_prd}"


def build_retry_prompt(prompt: str, error_message: str) -> str:
    """Amend *prompt* with the prior failure and the most commonly violated rules."""
    return (
        f"{prompt}\n\n"
        "IMPORTANT:\n"
        "A previous attempt failed schema validation with this error:\n"
        f"{error_message}\n\n"
        f"{_RETRY_RULES}"
    )
