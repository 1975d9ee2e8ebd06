"""Utility for generating HTML anchor ids for vars."""

from urllib.parse import quote_plus


def var_id(var_name: str) -> str:
    """Generate a fragment-safe anchor id: ``var-`` plus the encoded name.

    The name is form-encoded and every ``%`` is then replaced with ``.``,
    so ``->foo`` becomes ``var--.3Efoo``. ``~`` is encoded too.
    """
    return "var-" + quote_plus(var_name, safe="*").replace("%", ".").replace("~", ".7E")
