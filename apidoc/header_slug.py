"""Utility for generating anchor ids for markdown headings."""

import re


def header_slug(s: str, separator: str = "-") -> str:
    """Generate a GitHub-ish anchor slug: lower, hyphenate non-alnum.

    Matches the ``slugify(value, separator)`` signature of the toc extension.
    """
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9]+", separator, s)
    s = re.sub(f"{re.escape(separator)}{{2,}}", separator, s).strip(separator)
    return s or "section"
