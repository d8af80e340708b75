"""PRD text normalization applied before prompting."""

from __future__ import annotations

import re

_INVISIBLE = re.compile("[\u200b-\u200d\ufeff]")
_HYPHENATED_BREAK = re.compile(r"([A-Za-z])-\n([A-Za-z])")
_BULLETS = re.compile("\u25aa\ufe0e?|[\u2022\u00b7\u25cf\u25a0]")
_PAGE_MARKER = re.compile(r"^[ \t]*Page[ \t]+\d+[ \t]*(?:of[ \t]+\d+)?[ \t]*$", re.IGNORECASE | re.MULTILINE)
_BLANK_RUN = re.compile(r"\n{3,}")


def normalize_prd_text(raw: str) -> str:
    """Clean raw PRD text into a canonical plain-text form.

    Unifies line endings, strips invisible characters, rejoins words split by
    a hyphenated line break, unifies bullet glyphs to ``-``, drops
    ``Page N (of M)`` lines, collapses blank runs and trims trailing
    whitespace. Idempotent on already-normalized text.
    """
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = _INVISIBLE.sub("", text)
    text = text.replace("\u00a0", " ")
    text = _HYPHENATED_BREAK.sub(r"\1\2", text)
    text = _BULLETS.sub("-", text)
    text = _PAGE_MARKER.sub("", text)
    # Trailing whitespace goes first so whitespace-only lines count as blank.
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    text = _BLANK_RUN.sub("\n\n", text)
    return text.strip()
