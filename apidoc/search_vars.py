"""Logic for locating a public var by name across namespaces."""

from collections.abc import Iterable

from apidoc.namespace_info import NamespaceInfo
from apidoc.var_info import VarInfo


def search_vars(
    namespaces: Iterable[NamespaceInfo],
    partial_var: str,
    starting_ns: str | None = None,
) -> tuple[NamespaceInfo, VarInfo] | None:
    """Find the namespace and var that ``partial_var`` refers to.

    ``partial_var`` is either a bare var name or ``ns.name/var``. The starting
    namespace is searched first, then all namespaces in name order; the
    first match wins.
    """
    var_ns, sep, var_name = partial_var.rpartition("/")
    if not sep or not var_ns or not var_name:
        var_ns, var_name = "", partial_var

    ordered = sorted(namespaces, key=lambda ns: ns.name)
    if starting_ns:
        ordered = [ns for ns in ordered if ns.name == starting_ns] + ordered

    for ns in ordered:
        if var_ns and ns.name != var_ns:
            continue
        for var in ns.publics:
            if var.name == var_name:
                return ns, var
    return None
