"""Plan contracts.

Every leaf carries a fallback so that decoding an untrusted candidate never
fails outright: a missing or malformed leaf is replaced by its zero value
(or, for enumerations, a documented default variant). Strict checks on the
assembled result live in :mod:`ticketpack.plan.validator`.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, Field, StrictInt, ValidationError, ValidatorFunctionWrapHandler, WrapValidator
from pydantic.alias_generators import to_camel

DEFAULT_CONFIDENCE = 70


class Platform(StrEnum):
    WEB = "web"
    MOBILE = "mobile"
    API = "api"
    OTHER = "other"


class TicketType(StrEnum):
    STORY = "story"
    TASK = "task"
    BUG = "bug"
    SPIKE = "spike"


class Priority(StrEnum):
    P0 = "P0"
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"


class Estimate(StrEnum):
    S = "S"
    M = "M"
    L = "L"


def fallback(default: Callable[[], Any]) -> WrapValidator:
    """Return a wrap validator that substitutes ``default()`` on any validation failure."""

    def _validate(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return default()

    return WrapValidator(_validate)


def _confidence(value: Any, handler: ValidatorFunctionWrapHandler) -> int:
    try:
        score = handler(value)
    except ValidationError:
        return DEFAULT_CONFIDENCE
    return score if 0 <= score <= 100 else DEFAULT_CONFIDENCE


LenientStr = Annotated[str, fallback(str)]
LenientStrList = Annotated[list[str], fallback(list)]


class _Record(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class PlanMeta(_Record):
    product_name: LenientStr = ""
    platform: Annotated[Platform, fallback(lambda: Platform.WEB)] = Platform.WEB
    confidence: Annotated[StrictInt, WrapValidator(_confidence)] = Field(
        default=DEFAULT_CONFIDENCE, json_schema_extra={"minimum": 0, "maximum": 100}
    )
    assumptions: LenientStrList = Field(default_factory=list)
    open_questions: LenientStrList = Field(default_factory=list)


class PlanSummary(_Record):
    problem: LenientStr = ""
    target_users: LenientStrList = Field(default_factory=list)
    goals: LenientStrList = Field(default_factory=list)
    non_goals: LenientStrList = Field(default_factory=list)
    success_metrics: LenientStrList = Field(default_factory=list)


class AnalyticsEvent(_Record):
    name: LenientStr = ""
    properties: LenientStrList = Field(default_factory=list)


class TicketAnalytics(_Record):
    events: Annotated[list[AnalyticsEvent], fallback(list)] = Field(default_factory=list)


class TicketQA(_Record):
    test_cases: LenientStrList = Field(default_factory=list)


class Epic(_Record):
    """A grouping of related tickets sharing an outcome."""

    epic_id: LenientStr = ""
    title: LenientStr = ""
    outcome: LenientStr = ""
    tickets: LenientStrList = Field(default_factory=list)
    edge_cases: LenientStrList = Field(default_factory=list)


class Ticket(_Record):
    """A single unit of implementation work."""

    ticket_id: LenientStr = ""
    epic_id: LenientStr = ""
    type: Annotated[TicketType, fallback(lambda: TicketType.TASK)] = TicketType.TASK
    title: LenientStr = ""
    user_story: LenientStr = ""
    description: LenientStr = ""
    acceptance_criteria: LenientStrList = Field(default_factory=list)
    out_of_scope: LenientStrList = Field(default_factory=list)
    dependencies: LenientStrList = Field(default_factory=list)
    priority: Annotated[Priority, fallback(lambda: Priority.P2)] = Priority.P2
    estimate: Annotated[Estimate, fallback(lambda: Estimate.M)] = Estimate.M
    labels: LenientStrList = Field(default_factory=list)
    components: LenientStrList = Field(default_factory=list)
    qa: Annotated[TicketQA, fallback(TicketQA)] = Field(default_factory=TicketQA)
    analytics: Annotated[TicketAnalytics, fallback(TicketAnalytics)] = Field(default_factory=TicketAnalytics)


class PlanCore(_Record):
    """The generation target: metadata, summary, epics and tickets."""

    meta: Annotated[PlanMeta, fallback(PlanMeta)] = Field(default_factory=PlanMeta)
    summary: Annotated[PlanSummary, fallback(PlanSummary)] = Field(default_factory=PlanSummary)
    epics: Annotated[list[Epic], fallback(list)] = Field(default_factory=list)
    tickets: Annotated[list[Ticket], fallback(list)] = Field(default_factory=list)


class IssueLink(_Record):
    ticket_id: str
    linear_new_url: str


class PlanExports(_Record):
    markdown: str
    linear: list[IssueLink]


class Plan(PlanCore):
    """A PlanCore plus its export artifacts."""

    exports: PlanExports
