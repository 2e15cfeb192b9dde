"""
Store configuration models.

Parses the [store] section from a TOML file and provides typed
configuration for ``Store``.
"""

from __future__ import annotations

import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from catstore.core.errors import ConfigError
from catstore.core.ids import generate_id


class StoreConfig(BaseModel):
    """Store configuration."""

    name: str = "default"
    categories: list[str] = Field(default_factory=list)
    id_factory: Callable[[], str] = Field(default=generate_id, exclude=True)


def load_store_config(toml_path: Path) -> StoreConfig:
    """
    Load store configuration from a TOML file.

    Args:
        toml_path: Path to the TOML file

    Returns:
        StoreConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is not valid TOML or the values don't validate
    """
    if not toml_path.exists():
        return StoreConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

    store_data: dict[str, Any] = data.get("store", {})
    if not isinstance(store_data, dict):
        raise ConfigError(f"[store] in {toml_path} must be a table")
    if not store_data:
        return StoreConfig()

    config_dict: dict[str, Any] = {}
    if "name" in store_data:
        config_dict["name"] = store_data["name"]
    if "categories" in store_data:
        config_dict["categories"] = store_data["categories"]

    try:
        return StoreConfig(**config_dict)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid [store] section in {toml_path}: {e}") from e
