"""Reusable rendering components for plan exports."""

from __future__ import annotations

NONE_ITEM = "- None"


def bullets(items: list[str], *, indent: str = "") -> str:
    """Render a dash bullet list, or ``- None`` if empty.

    Args:
        items: List of strings to render as bullets.
        indent: Prefix placed before every bullet.

    Returns:
        Newline-joined bullet lines.
    """
    if not items:
        return f"{indent}{NONE_ITEM}"
    return "\n".join(f"{indent}- {item}" for item in items)


def checklist(items: list[str]) -> str:
    """Render unchecked task-list items, or ``- None`` if empty."""
    if not items:
        return NONE_ITEM
    return "\n".join(f"- [ ] {item}" for item in items)


def text_or_none(value: str) -> str:
    """Return *value* stripped, or ``None`` when blank."""
    return value.strip() or "None"
