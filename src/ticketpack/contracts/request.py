"""Plan request contract."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from ticketpack.contracts.plan import Platform

MIN_PRD_CHARS = 20


class PlanRequest(BaseModel):
    """Input to plan generation: PRD text plus optional context fields."""

    prd: str = Field(min_length=MIN_PRD_CHARS)
    product_name: str | None = None
    target_user: str | None = None
    platform: Platform | None = None
    constraints: str | None = None
    release_date: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}
