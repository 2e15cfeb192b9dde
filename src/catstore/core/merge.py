"""
Merge strategies used by ``Store.update``.

A merge strategy takes the stored payload and the incoming payload and returns
a new payload. The store never merges on its own; it calls whatever strategy
it was constructed with.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

MergeFunc = Callable[[Mapping[str, Any], Mapping[str, Any]], dict[str, Any]]


def _copy_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return deep_merge(value, {})
    if isinstance(value, list):
        return list(value)
    return value


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Deep merge overrides into a copy of base.

    Nested mappings are merged key by key; any other value in *overrides*
    (lists included) replaces the one in *base*. Neither input is mutated,
    and nested mappings and lists are copied so the result can be edited freely.
    """
    result: dict[str, Any] = {}
    for key, value in base.items():
        if key in overrides:
            if isinstance(value, Mapping) and isinstance(overrides[key], Mapping):
                result[key] = deep_merge(value, overrides[key])
            else:
                result[key] = _copy_value(overrides[key])
        else:
            result[key] = _copy_value(value)
    # Add keys from overrides not in base
    for key, value in overrides.items():
        if key not in base:
            result[key] = _copy_value(value)
    return result


def shallow_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Top-level merge: nested mappings in *overrides* replace those in *base*."""
    return {key: _copy_value(value) for key, value in {**base, **overrides}.items()}
