"""
Deep merge helpers for configuration trees.

Used when layering a ``Config`` over its defaults and by ``Config.merge``.
Loading several files never deep merges: each file gets its own key.
"""
import copy
from typing import Any, Dict, Mapping


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two dictionaries.

    Nested dictionaries are merged recursively. Lists and scalars from
    ``override`` replace those in ``base``. Neither argument is modified.

    Args:
        base: The base dictionary
        override: The override dictionary (higher precedence)

    Returns:
        A new dictionary with merged values

    Examples:
        >>> base = {"a": {"x": 1, "y": 2}, "b": 3}
        >>> override = {"a": {"y": 20, "z": 30}, "c": 4}
        >>> deep_merge(base, override)
        {'a': {'x': 1, 'y': 20, 'z': 30}, 'b': 3, 'c': 4}
    """
    result = copy.deepcopy(dict(base))

    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)

    return result
