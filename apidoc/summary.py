"""Utility for shortening docstrings to a one-line summary."""

import re

SUMMARY_RE = re.compile(r"(?s)^\s*(.*?(?:\.(?=\s)|\n\s*\n|$))")


def summary(doc: str | None) -> str | None:
    """Return the first sentence or paragraph of a docstring."""
    if doc is None:
        return None
    m = SUMMARY_RE.match(doc)
    return m.group(1).strip() if m else doc.strip()
