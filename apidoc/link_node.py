"""Data models for links encountered while rendering markdown."""

from dataclasses import dataclass
from enum import Enum


class LinkKind(Enum):
    """The syntax a link was written in."""

    WIKI_LINK = "wiki-link"
    MARKDOWN_LINK = "markdown-link"
    MARKDOWN_LINK_REFERENCE = "markdown-link-reference"


@dataclass(frozen=True)
class LinkNode:
    """A single link occurrence handed to the link resolver."""

    kind: LinkKind
    text: str
    target: str
