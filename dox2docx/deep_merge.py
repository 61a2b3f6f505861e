"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Sections (dicts) are merged recursively.
    - A ``None`` value, as YAML gives for an empty section, keeps the base value.
    - Any other value in 'update' replaces the one in 'base'.
    """
    result = dict(base)
    for key, value in update.items():
        if value is None and key in result:
            continue
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
