"""Render var type signatures without redundant namespace qualifiers."""

from collections.abc import Collection
from typing import Any

IMPLIED_TYPE_NAMESPACES = ("clojure.core.typed",)


def strip_implied_namespaces(tree: Any, implied: Collection[str]) -> Any:
    """Replace ``ns/name`` symbols with ``name`` where ``ns`` is implied.

    Walks nested lists and tuples; any other node is returned unchanged.
    """
    if isinstance(tree, (list, tuple)):
        return type(tree)(strip_implied_namespaces(x, implied) for x in tree)
    if isinstance(tree, str):
        ns, sep, name = tree.partition("/")
        if sep and ns and name and ns in implied:
            return name
    return tree


def format_form(form: Any) -> str:
    """Print a nested list tree as an s-expression."""
    if isinstance(form, (list, tuple)):
        return "(" + " ".join(format_form(x) for x in form) + ")"
    if form is None:
        return "nil"
    if isinstance(form, bool):
        return "true" if form else "false"
    return str(form)


def type_sig(namespace_name: str, sig: Any) -> str:
    """Format a type signature as seen from inside ``namespace_name``."""
    implied = {namespace_name, *IMPLIED_TYPE_NAMESPACES}
    return format_form(strip_implied_namespaces(sig, implied))
