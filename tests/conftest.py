"""Shared pytest fixtures for catstore tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from catstore import Record, Store, StoreConfig, deep_merge


@pytest.fixture
def store() -> Store:
    """Return an empty store with deep-merge updates."""
    return Store(merge=deep_merge)


@pytest.fixture
def bare_store() -> Store:
    """Return a store constructed without a merge strategy."""
    return Store()


@pytest.fixture
def counting_config() -> StoreConfig:
    """Return a config whose id factory yields id-1, id-2, ..."""
    counter = iter(range(1, 1_000_000))
    return StoreConfig(name="counting", id_factory=lambda: f"id-{next(counter)}")


@pytest.fixture
def ada() -> Record:
    """Return an unsaved user record without an id."""
    return Record(data={"name": "Ada", "address": {"city": "London", "zip": "N1"}})


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Return path to a TOML file with a [store] section."""
    path = tmp_path / "catstore.toml"
    path.write_text('[store]\nname = "app"\ncategories = ["users", "posts"]\n')
    return path
