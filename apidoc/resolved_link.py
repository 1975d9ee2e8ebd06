"""Data models for the outcome of link resolution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedLink:
    """Represents a resolved (or unresolved) link target."""

    valid: bool
    url: str  # site-relative, e.g. foo.bar.html#var-baz

    @classmethod
    def unresolved(cls, url: str) -> "ResolvedLink":
        """Build a link that the renderer should leave as literal text."""
        return cls(valid=False, url=url)
