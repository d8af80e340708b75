"""Referential integrity repair for generated plans."""

from __future__ import annotations

import logging

from ticketpack.contracts.plan import PlanCore, Ticket

_LOG = logging.getLogger(__name__)

FALLBACK_EPIC_ID = "E1"


class PlanRepairer:
    """Repair identifiers and epic/ticket cross-references.

    The repair is purely structural: it assigns missing ids by position,
    re-homes tickets that point at unknown epics onto the first epic, and
    recomputes each epic's ``tickets`` list from the tickets themselves. It
    never invents ticket content and never fails.
    """

    def repair(self, core: PlanCore) -> PlanCore:
        epic_ids = self._assign_ids([epic.epic_id for epic in core.epics], "E")
        epics = [
            epic.model_copy(update={"epic_id": epic_id}) for epic, epic_id in zip(core.epics, epic_ids, strict=True)
        ]
        valid_epic_ids = set(epic_ids)
        default_epic_id = epic_ids[0] if epic_ids else FALLBACK_EPIC_ID

        ticket_ids = self._assign_ids([ticket.ticket_id for ticket in core.tickets], "T")
        tickets = [
            self._repair_ticket(ticket, ticket_id, valid_epic_ids, default_epic_id)
            for ticket, ticket_id in zip(core.tickets, ticket_ids, strict=True)
        ]

        members: dict[str, list[str]] = {}
        for ticket in tickets:
            members.setdefault(ticket.epic_id, []).append(ticket.ticket_id)
        epics = [epic.model_copy(update={"tickets": members.get(epic.epic_id, [])}) for epic in epics]

        return core.model_copy(update={"epics": epics, "tickets": tickets})

    @staticmethod
    def _repair_ticket(ticket: Ticket, ticket_id: str, valid_epic_ids: set[str], default_epic_id: str) -> Ticket:
        epic_id = ticket.epic_id.strip()
        if epic_id not in valid_epic_ids:
            _LOG.debug("ticket %s references unknown epic %r, moved to %s", ticket_id, epic_id, default_epic_id)
            epic_id = default_epic_id
        return ticket.model_copy(update={"ticket_id": ticket_id, "epic_id": epic_id})

    @staticmethod
    def _assign_ids(values: list[str], prefix: str) -> list[str]:
        """Return one unique id per value.

        The first occurrence of each non-blank trimmed id keeps it, so other
        records' references to it stay valid. Blank and repeated ids then get
        the positional ``<prefix><n>``, suffixed ``-2``, ``-3``... while that
        is already taken.
        """
        trimmed = [value.strip() for value in values]
        used: set[str] = set()
        kept: list[str | None] = []
        for candidate in trimmed:
            if candidate and candidate not in used:
                used.add(candidate)
                kept.append(candidate)
            else:
                kept.append(None)

        ids: list[str] = []
        for index, (value, candidate) in enumerate(zip(values, kept, strict=True)):
            if candidate is None:
                candidate = f"{prefix}{index + 1}"
                suffix = 2
                while candidate in used:
                    candidate = f"{prefix}{index + 1}-{suffix}"
                    suffix += 1
                used.add(candidate)
                _LOG.debug("assigned id %s in place of %r", candidate, value)
            ids.append(candidate)
        return ids
