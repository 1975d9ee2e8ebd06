"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Lists under these keys accumulate instead of being replaced.
ADDITIVE_KEYS = frozenset({"transforms"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for additive keys.
    - 'transforms' is additive and keeps declaration order.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = [*result[key], *value]
        else:
            result[key] = value
    return result
