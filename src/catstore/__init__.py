"""
catstore - a small in-process record store.

Records live in named categories, are identified by a string id unique within
their category, and support create/get/update/remove/clean.
"""

from __future__ import annotations

from ._version import get_version
from .config import StoreConfig, load_store_config
from .core.errors import (
    CategoryNotFoundError,
    ConfigError,
    MergeStrategyMissingError,
    StoreError,
    StoreTypeError,
)
from .core.ids import generate_id, is_generated_id
from .core.merge import MergeFunc, deep_merge, shallow_merge
from .core.records import Record
from .store import Store

__version__ = get_version()


def create_store(config: StoreConfig | None = None, merge: MergeFunc = deep_merge) -> Store:
    """Build a ``Store`` with the deep-merge update strategy wired in."""
    return Store(merge=merge, config=config)


__all__ = [
    "__version__",
    "Store",
    "StoreConfig",
    "load_store_config",
    "create_store",
    "Record",
    "MergeFunc",
    "deep_merge",
    "shallow_merge",
    "generate_id",
    "is_generated_id",
    "StoreError",
    "StoreTypeError",
    "CategoryNotFoundError",
    "MergeStrategyMissingError",
    "ConfigError",
]
