from __future__ import annotations

import pytest
from pydantic import ValidationError

from ticketpack.contracts.plan import Platform
from ticketpack.contracts.request import MIN_PRD_CHARS, PlanRequest


def test_request_accepts_camel_case_context_fields() -> None:
    request = PlanRequest.model_validate(
        {"prd": "x" * MIN_PRD_CHARS, "productName": "Invoices", "targetUser": "Finance", "platform": "mobile"}
    )

    assert request.product_name == "Invoices"
    assert request.target_user == "Finance"
    assert request.platform is Platform.MOBILE
    assert request.release_date is None


def test_request_rejects_short_prd() -> None:
    with pytest.raises(ValidationError):
        PlanRequest(prd="x" * (MIN_PRD_CHARS - 1))


def test_request_rejects_unknown_platform() -> None:
    with pytest.raises(ValidationError):
        PlanRequest(prd="x" * MIN_PRD_CHARS, platform="desktop")
