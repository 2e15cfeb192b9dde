"""Core catstore building blocks: errors, identifiers, merge strategies, records."""

from .errors import (
    CategoryNotFoundError,
    ConfigError,
    MergeStrategyMissingError,
    StoreError,
    StoreTypeError,
)
from .ids import generate_id, is_generated_id
from .merge import MergeFunc, deep_merge, shallow_merge
from .records import Record

__all__ = [
    "StoreError",
    "StoreTypeError",
    "CategoryNotFoundError",
    "MergeStrategyMissingError",
    "ConfigError",
    "generate_id",
    "is_generated_id",
    "MergeFunc",
    "deep_merge",
    "shallow_merge",
    "Record",
]
