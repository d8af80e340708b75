"""Strict validation of a fully assembled Plan."""

from __future__ import annotations

from collections import Counter

from ticketpack.contracts.exceptions import PlanValidationError
from ticketpack.contracts.plan import Plan


class PlanValidator:
    """Validate every invariant a returned Plan must satisfy.

    Unlike lenient decoding this fails hard: a violation here means the
    pipeline itself produced a broken plan.
    """

    def validate(self, plan: Plan) -> None:
        errors: list[str] = []

        self._validate_meta(plan, errors)
        epic_ids = self._validate_ids("epic", [epic.epic_id for epic in plan.epics], errors)
        self._validate_ids("ticket", [ticket.ticket_id for ticket in plan.tickets], errors)
        self._validate_epic_references(plan, epic_ids, errors)
        self._validate_epic_membership(plan, errors)
        self._validate_exports(plan, errors)

        if errors:
            raise PlanValidationError(errors)

    @staticmethod
    def _validate_meta(plan: Plan, errors: list[str]) -> None:
        if not 0 <= plan.meta.confidence <= 100:
            errors.append(f"confidence out of range: {plan.meta.confidence}")

    @staticmethod
    def _validate_ids(kind: str, ids: list[str], errors: list[str]) -> set[str]:
        for item_id, count in Counter(ids).items():
            if count > 1:
                errors.append(f"duplicate {kind} id: {item_id}")
        for position, item_id in enumerate(ids, start=1):
            if not item_id.strip():
                errors.append(f"{kind} at position {position} has an empty id")
        return set(ids)

    @staticmethod
    def _validate_epic_references(plan: Plan, epic_ids: set[str], errors: list[str]) -> None:
        for ticket in plan.tickets:
            if ticket.epic_id not in epic_ids:
                errors.append(f"ticket {ticket.ticket_id} epicId '{ticket.epic_id}' not found in epics")

    @staticmethod
    def _validate_epic_membership(plan: Plan, errors: list[str]) -> None:
        for epic in plan.epics:
            expected = [ticket.ticket_id for ticket in plan.tickets if ticket.epic_id == epic.epic_id]
            if epic.tickets != expected:
                errors.append(f"epic {epic.epic_id} tickets {epic.tickets} do not match member tickets {expected}")

    @staticmethod
    def _validate_exports(plan: Plan, errors: list[str]) -> None:
        if not plan.exports.markdown.strip():
            errors.append("exports.markdown is empty")
        link_ids = [link.ticket_id for link in plan.exports.linear]
        ticket_ids = [ticket.ticket_id for ticket in plan.tickets]
        if link_ids != ticket_ids:
            errors.append(f"exports.linear ticket ids {link_ids} do not match tickets {ticket_ids}")
        for link in plan.exports.linear:
            if not link.linear_new_url:
                errors.append(f"exports.linear entry for {link.ticket_id} has an empty url")
