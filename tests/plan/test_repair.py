from __future__ import annotations

from typing import Any

from ticketpack.contracts.plan import Epic, PlanCore, Ticket
from ticketpack.plan.repair import FALLBACK_EPIC_ID, PlanRepairer
from ticketpack.plan.schema import decode_plan_core


def test_tickets_regrouped_from_ticket_epic_ids(candidate_payload: dict[str, Any]) -> None:
    repaired = PlanRepairer().repair(decode_plan_core(candidate_payload))

    assert [ticket.epic_id for ticket in repaired.tickets] == ["E1", "E1", "E2"]
    assert repaired.epics[0].tickets == ["T1", "T2"]
    assert repaired.epics[1].tickets == ["T3"]


def test_missing_ids_assigned_by_position() -> None:
    core = PlanCore(
        epics=[Epic(epic_id="E1"), Epic(epic_id="E2")],
        tickets=[
            Ticket(ticket_id="T1", epic_id="E1"),
            Ticket(ticket_id="T2", epic_id="E2"),
            Ticket(ticket_id="", epic_id="E2"),
        ],
    )

    repaired = PlanRepairer().repair(core)

    assert repaired.tickets[2].ticket_id == "T3"
    assert repaired.epics[1].tickets == ["T2", "T3"]


def test_unknown_epic_reference_moves_to_first_epic() -> None:
    core = PlanCore(
        epics=[Epic(epic_id="E1"), Epic(epic_id="E2")],
        tickets=[Ticket(ticket_id="T1", epic_id="E9"), Ticket(ticket_id="T2", epic_id="E2")],
    )

    repaired = PlanRepairer().repair(core)

    assert repaired.tickets[0].epic_id == "E1"
    assert repaired.epics[0].tickets == ["T1"]
    assert repaired.epics[1].tickets == ["T2"]


def test_ids_are_trimmed() -> None:
    core = PlanCore(
        epics=[Epic(epic_id=" E1 ")],
        tickets=[Ticket(ticket_id=" T1\n", epic_id="  E1")],
    )

    repaired = PlanRepairer().repair(core)

    assert repaired.epics[0].epic_id == "E1"
    assert repaired.tickets[0].ticket_id == "T1"
    assert repaired.tickets[0].epic_id == "E1"


def test_no_epics_falls_back_to_literal_epic_id() -> None:
    core = PlanCore(tickets=[Ticket(ticket_id="T1", epic_id="E4")])

    repaired = PlanRepairer().repair(core)

    assert repaired.epics == []
    assert repaired.tickets[0].epic_id == FALLBACK_EPIC_ID


def test_duplicate_ids_get_unique_replacements() -> None:
    core = PlanCore(
        epics=[Epic(epic_id="E1"), Epic(epic_id="E1")],
        tickets=[
            Ticket(ticket_id="T2", epic_id="E1"),
            Ticket(ticket_id="T2", epic_id="E2"),
        ],
    )

    repaired = PlanRepairer().repair(core)

    assert [epic.epic_id for epic in repaired.epics] == ["E1", "E2"]
    assert [ticket.ticket_id for ticket in repaired.tickets] == ["T2", "T2-2"]
    assert repaired.epics[1].tickets == ["T2-2"]


def test_stale_epic_ticket_lists_are_replaced() -> None:
    core = PlanCore(
        epics=[Epic(epic_id="E1", tickets=["T7", "T8"]), Epic(epic_id="E2", tickets=["T1"])],
        tickets=[Ticket(ticket_id="T1", epic_id="E1")],
    )

    repaired = PlanRepairer().repair(core)

    assert repaired.epics[0].tickets == ["T1"]
    assert repaired.epics[1].tickets == []


def test_repair_is_idempotent(candidate_payload: dict[str, Any]) -> None:
    repairer = PlanRepairer()
    once = repairer.repair(decode_plan_core(candidate_payload))

    assert repairer.repair(once) == once


def test_repair_preserves_ticket_content() -> None:
    ticket = Ticket(ticket_id="", epic_id="", title="Export", acceptance_criteria=["a", "b", "c"])

    repaired = PlanRepairer().repair(PlanCore(epics=[Epic(epic_id="E1")], tickets=[ticket]))

    assert repaired.tickets[0].title == "Export"
    assert repaired.tickets[0].acceptance_criteria == ["a", "b", "c"]
    assert repaired.tickets[0].ticket_id == "T1"


def test_explicit_ids_are_kept_when_a_blank_id_comes_first() -> None:
    core = PlanCore(
        epics=[Epic(epic_id=""), Epic(epic_id="E1")],
        tickets=[
            Ticket(ticket_id="", epic_id="E1", dependencies=["T1"]),
            Ticket(ticket_id="T1", epic_id="E1"),
        ],
    )

    repaired = PlanRepairer().repair(core)

    assert [epic.epic_id for epic in repaired.epics] == ["E1-2", "E1"]
    assert [ticket.ticket_id for ticket in repaired.tickets] == ["T1-2", "T1"]
    assert repaired.tickets[0].dependencies == ["T1"]
    assert repaired.epics[1].tickets == ["T1-2", "T1"]
    assert repaired.epics[0].tickets == []
