"""Turn bare URLs in plain text into anchor tags.

Extraction and substitution are split so the text in between can be
HTML-escaped without touching the URLs, which are carried in a table local to
the call rather than in the text itself.
"""

import html
import re

URL_RE = re.compile(
    r"((?:https?|ftp|file)://[-A-Za-z0-9+()&@#/%?=~_|!:,.;]+[-A-Za-z0-9+()&@#/%=~_|])"
)
ANCHOR_TOKEN_RE = re.compile(r"__ANCHOR_(\d+)__")

AnchorTable = dict[int, str]


def extract_anchors(text: str | None) -> tuple[str | None, AnchorTable]:
    """Replace URLs with ``__ANCHOR_<i>__`` tokens and return the URL table."""
    anchors: AnchorTable = {}
    if text is None:
        return None, anchors

    def repl(m: re.Match) -> str:
        index = len(anchors)
        anchors[index] = m.group(1)
        return f"__ANCHOR_{index}__"

    return URL_RE.sub(repl, text), anchors


def replace_anchors(text: str | None, anchors: AnchorTable) -> str | None:
    """Substitute anchor tokens with links to the URLs they stand for."""
    if text is None:
        return None

    def repl(m: re.Match) -> str:
        url = anchors.get(int(m.group(1)))
        if url is None:
            return m.group(0)
        escaped = html.escape(url)
        return f'<a href="{escaped}">{escaped}</a>'

    return ANCHOR_TOKEN_RE.sub(repl, text)
