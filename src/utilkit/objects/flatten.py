"""Flattening of nested dictionaries"""

from __future__ import annotations

from typing import Any, Dict, Mapping

__all__ = ["flatten"]


def flatten(mapping: Mapping[Any, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested dictionaries into a single level.

    Keys of nested dictionaries are joined with dots, items of lists and tuples
    get their index in brackets::

        flatten({"a": {"b": 1}, "c": {"d": 2, "e": [3, 4]}})
        # {"a.b": 1, "c.d": 2, "c.e[0]": 3, "c.e[1]": 4}

    Empty dictionaries and lists leave no entry, all other values are kept as
    they are.
    """
    result: Dict[str, Any] = {}
    for key, value in mapping.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        _flatten_value(value, path, result)
    return result


def _flatten_value(value: Any, path: str, result: Dict[str, Any]) -> None:
    if isinstance(value, Mapping):
        result.update(flatten(value, path))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten_value(item, f"{path}[{index}]", result)
    else:
        result[path] = value
