"""Data models for representing free-standing documents."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentInfo:
    """Represents a topic page, such as an introduction or a guide."""

    name: str  # output file stem
    title: str
    content: str
    format: str = "markdown"
