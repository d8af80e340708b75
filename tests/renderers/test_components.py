"""Tests for rendering component helper functions."""

from __future__ import annotations

from ticketpack.renderers.components import NONE_ITEM, bullets, checklist, text_or_none


def test_bullets_empty():
    """Empty lists render as an explicit None bullet."""
    assert bullets([]) == NONE_ITEM == "- None"


def test_bullets_multiple_items():
    assert bullets(["a", "b"]) == "- a\n- b"


def test_bullets_indent():
    assert bullets(["a", "b"], indent="  ") == "  - a\n  - b"
    assert bullets([], indent="  ") == "  - None"


def test_checklist():
    assert checklist(["works", "fast"]) == "- [ ] works\n- [ ] fast"
    assert checklist([]) == "- None"


def test_text_or_none():
    assert text_or_none("  hello ") == "hello"
    assert text_or_none("   ") == "None"
