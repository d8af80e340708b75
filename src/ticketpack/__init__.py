"""Public API surface for ticketpack."""

__version__ = "0.1.0"

from ticketpack.config import load_config
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
from ticketpack.contracts.plan import Epic, Plan, PlanCore, Ticket
from ticketpack.contracts.progress import GenerationProgress
from ticketpack.contracts.request import PlanRequest
from ticketpack.extraction import TextExtractor
from ticketpack.generation import PlanOrchestrator
from ticketpack.oracles import create_oracle
from ticketpack.plan import PlanRepairer, PlanValidator, decode_plan_core, normalize_prd_text
from ticketpack.renderers import IssueLinkBuilder, MarkdownRenderer, create_renderer
from ticketpack.sdk import TicketPack, assemble_plan, build_request

__all__ = [
    "ConfigError",
    "Epic",
    "ExtractionError",
    "FileTooLargeError",
    "GenerationFailed",
    "GenerationOracle",
    "GenerationProgress",
    "InputValidationError",
    "IssueLinkBuilder",
    "MarkdownRenderer",
    "OracleError",
    "Plan",
    "PlanCore",
    "PlanOrchestrator",
    "PlanRepairer",
    "PlanRequest",
    "PlanValidationError",
    "PlanValidator",
    "TextExtractor",
    "Ticket",
    "TicketPack",
    "TicketPackConfig",
    "TicketPackError",
    "UnsupportedFileTypeError",
    "__version__",
    "assemble_plan",
    "build_request",
    "create_oracle",
    "create_renderer",
    "decode_plan_core",
    "load_config",
    "normalize_prd_text",
]
