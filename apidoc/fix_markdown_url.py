"""Logic for pointing relative markdown links at generated HTML pages."""

import re

ABSOLUTE_URL_RE = re.compile(r"^([a-z]+:)?//")
MARKDOWN_EXT_RE = re.compile(r"\.(md|markdown)$")


def is_absolute_url(url: str) -> bool:
    """Check if the URL has a scheme or is protocol-relative."""
    return ABSOLUTE_URL_RE.match(url) is not None


def fix_markdown_url(url: str) -> str:
    """Rewrite a relative ``.md``/``.markdown`` link to ``.html``."""
    if is_absolute_url(url):
        return url
    return MARKDOWN_EXT_RE.sub(".html", url)
