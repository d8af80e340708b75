"""Lenient decoding of untrusted candidate plans.

This is the first of two validation tiers: :func:`decode_plan_core` accepts
anything and always returns a structurally complete :class:`PlanCore`. The
strict tier is :class:`ticketpack.plan.validator.PlanValidator`.
"""

from __future__ import annotations

import copy
from typing import Any

from ticketpack.contracts.plan import PlanCore


def decode_plan_core(candidate: Any) -> PlanCore:
    """Decode *candidate* into a PlanCore, substituting defaults for bad leaves.

    Non-mapping input decodes to an all-defaults plan.
    """
    if not isinstance(candidate, dict):
        return PlanCore()
    return PlanCore.model_validate(candidate)


def plan_core_json_schema() -> dict[str, Any]:
    """Return the JSON schema sent to the oracle for structured output.

    Structured-output backends reject objects whose ``required`` list does
    not name every property, so every object node lists all of its keys and
    forbids additional ones.
    """
    schema = copy.deepcopy(PlanCore.model_json_schema(by_alias=True))
    _require_all_keys(schema)
    return schema


def _require_all_keys(node: Any) -> None:
    if isinstance(node, dict):
        properties = node.get("properties")
        if node.get("type") == "object" and isinstance(properties, dict):
            node["required"] = list(properties)
            node["additionalProperties"] = False
        node.pop("default", None)
        for value in node.values():
            _require_all_keys(value)
    elif isinstance(node, list):
        for value in node:
            _require_all_keys(value)
