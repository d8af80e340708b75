"""Public contracts for ticketpack."""

from ticketpack.contracts.config import TicketPackConfig
from ticketpack.contracts.exceptions import (
    ConfigError,
    ExtractionError,
    FileTooLargeError,
    GenerationFailed,
    InputValidationError,
    OracleError,
    PlanValidationError,
    TicketPackError,
    UnsupportedFileTypeError,
)
from ticketpack.contracts.oracle import GenerationOracle
from ticketpack.contracts.plan import (
    AnalyticsEvent,
    Epic,
    Estimate,
    IssueLink,
    Plan,
    PlanCore,
    PlanExports,
    PlanMeta,
    PlanSummary,
    Platform,
    Priority,
    Ticket,
    TicketAnalytics,
    TicketQA,
    TicketType,
)
from ticketpack.contracts.progress import GenerationProgress, NullGenerationProgress
from ticketpack.contracts.renderer import PlanRenderer
from ticketpack.contracts.request import PlanRequest

__all__ = [
    "AnalyticsEvent",
    "ConfigError",
    "Epic",
    "Estimate",
    "ExtractionError",
    "FileTooLargeError",
    "GenerationFailed",
    "GenerationOracle",
    "GenerationProgress",
    "InputValidationError",
    "IssueLink",
    "NullGenerationProgress",
    "OracleError",
    "Plan",
    "PlanCore",
    "PlanExports",
    "PlanMeta",
    "PlanRenderer",
    "PlanRequest",
    "PlanSummary",
    "PlanValidationError",
    "Platform",
    "Priority",
    "Ticket",
    "TicketAnalytics",
    "TicketPackConfig",
    "TicketPackError",
    "TicketQA",
    "TicketType",
    "UnsupportedFileTypeError",
]
