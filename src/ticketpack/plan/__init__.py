"""Plan decoding, repair and validation."""

from ticketpack.plan.normalizer import normalize_prd_text
from ticketpack.plan.quality import QualityBar, QualityChecker
from ticketpack.plan.repair import PlanRepairer
from ticketpack.plan.schema import decode_plan_core, plan_core_json_schema
from ticketpack.plan.validator import PlanValidator

__all__ = [
    "PlanRepairer",
    "PlanValidator",
    "QualityBar",
    "QualityChecker",
    "decode_plan_core",
    "normalize_prd_text",
    "plan_core_json_schema",
]
