"""Shared test fixtures for ticketpack tests."""

from __future__ import annotations

from typing import Any

import pytest

from tests.fakes.plans import make_ticket
from ticketpack.contracts.plan import Epic, PlanCore, PlanMeta, PlanSummary


@pytest.fixture
def sample_core() -> PlanCore:
    """A repaired two-epic, three-ticket plan."""
    return PlanCore(
        meta=PlanMeta(product_name="Invoices", confidence=80, assumptions=["Stripe is billing source"]),
        summary=PlanSummary(problem="No invoice export", goals=["Export PDF"]),
        epics=[
            Epic(epic_id="E1", title="Export", outcome="Users export", tickets=["T1", "T2"], edge_cases=["a", "b"]),
            Epic(epic_id="E2", title="Audit", outcome="Exports audited", tickets=["T3"], edge_cases=["c", "d"]),
        ],
        tickets=[make_ticket("T1", "E1"), make_ticket("T2", "E1"), make_ticket("T3", "E2")],
    )


@pytest.fixture
def candidate_payload() -> dict[str, Any]:
    """A raw oracle candidate in camelCase wire format with a dangling epic reference."""
    return {
        "meta": {
            "productName": "Invoices",
            "platform": "web",
            "confidence": 75,
            "assumptions": ["Stripe"],
            "openQuestions": [],
        },
        "summary": {
            "problem": "No export",
            "targetUsers": ["Accountants"],
            "goals": ["Export"],
            "nonGoals": [],
            "successMetrics": ["50% adoption"],
        },
        "epics": [
            {"epicId": "E1", "title": "Export", "outcome": "Exports work", "tickets": [], "edgeCases": ["x", "y"]},
            {"epicId": "E2", "title": "Audit", "outcome": "Audited", "tickets": ["T9"], "edgeCases": ["z", "w"]},
        ],
        "tickets": [
            {"ticketId": "T1", "epicId": "E1", "type": "story", "title": "PDF button"},
            {"ticketId": "T2", "epicId": "E9", "type": "task", "title": "Renderer"},
            {"ticketId": "T3", "epicId": "E2", "type": "bug", "title": "Audit log"},
        ],
    }
