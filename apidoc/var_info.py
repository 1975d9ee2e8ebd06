"""Data models for representing documented vars."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class VarInfo:
    """Represents a documented public var (function, macro, value, etc.)."""

    name: str
    doc: str | None = None
    doc_format: str | None = None
    type: str = "var"  # var/macro/protocol/multimethod/etc.
    arglists: tuple[tuple[str, ...], ...] = ()
    members: tuple[VarInfo, ...] = ()
    type_sig: Any = None  # nested list tree of symbols
    path: str | None = None  # source path on disk
    file: str | None = None  # classpath-relative file
    line: int | None = None
    dynamic: bool = False
    added: str | None = None
    deprecated: str | bool | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
