"""
In-memory category store.

Keeps an ordered list of records per category and supports
create/get/update/remove/clean with id management.

Usage::

    store = Store(merge=deep_merge)

    [ada] = store.create("users", Record(data={"name": "Ada"}))
    store.get("users", ada.id)
    store.update("users", Record(id=ada.id, data={"name": "Ada L."}))
    store.remove("users", ada.id)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Literal

from catstore.config import StoreConfig
from catstore.core.errors import (
    CategoryNotFoundError,
    MergeStrategyMissingError,
    StoreTypeError,
    ensure_str,
)
from catstore.core.merge import MergeFunc
from catstore.core.records import Record

logger = logging.getLogger(__name__)


class Store:
    """In-memory store mapping category names to record lists.

    Not thread-safe: callers sharing one instance across threads must
    synchronize themselves. Batch operations are not atomic.

    Args:
        merge: Strategy used by ``update`` to combine payloads. Required for
            updates; the store raises ``MergeStrategyMissingError`` without it.
        config: Store configuration. Categories it lists are created up front.
    """

    def __init__(
        self,
        merge: MergeFunc | None = None,
        config: StoreConfig | None = None,
    ) -> None:
        self._storage: dict[str, list[Record]] = {}  # category -> records
        self._merge = merge
        self._config = config or StoreConfig()

        for category in self._config.categories:
            self.create_category(category)

    @property
    def name(self) -> str:
        return self._config.name

    def __len__(self) -> int:
        return sum(len(records) for records in self._storage.values())

    def __bool__(self) -> bool:
        # Truthy even with no records; len() counts records.
        return True

    def __repr__(self) -> str:
        return f"Store(name={self.name!r}, categories={len(self._storage)}, records={len(self)})"

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def create_category(self, category: str) -> bool:
        """Register an empty category.

        Returns:
            True if the category was created, False if it already existed.
        """
        if category in self._storage:
            return False
        self._storage[category] = []
        logger.debug("Store %s: created category %r", self.name, category)
        return True

    def has_category(self, category: str) -> bool:
        return category in self._storage

    def categories(self) -> list[str]:
        """Category names in creation order."""
        return list(self._storage)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, category: str, items: Record | Iterable[Record]) -> list[Record]:
        """Create one record or a batch of records.

        A single ``Record`` is treated as a one-element batch. See
        :meth:`create_many` for the per-item rules.

        Returns:
            The caller's record objects, as a list.
        """
        if isinstance(items, Record):
            return self.create_many(category, [items])
        if isinstance(items, Mapping):
            raise StoreTypeError(
                "Store.create: got a mapping; wrap it with Record.from_mapping().",
                category=category if isinstance(category, str) else None,
            )
        return self.create_many(category, items)

    def create_one(self, category: str, record: Record) -> Record:
        """Create a single record and return it (with ``id``/``index`` filled in)."""
        return self.create_many(category, [record])[0]

    def create_many(self, category: str, records: Iterable[Record]) -> list[Record]:
        """Insert *records* into *category*, creating the category if needed.

        For each record:
        - a missing ``id`` is generated and assigned in place;
        - an ``id`` already present in the category turns the insert into an
          :meth:`update` of that record;
        - otherwise ``index`` is set to the current category length and the
          record is appended.

        Items already processed stay applied if a later item raises.

        Returns:
            The caller's record objects, as a list.
        """
        ensure_str(category, "Category", "Store.create")
        batch = list(records)
        for record in batch:
            if not isinstance(record, Record):
                raise StoreTypeError(f"Store.create: Item {record!r} is not a Record.")
        self.create_category(category)

        for record in batch:
            if not record.id:
                record.id = self._config.id_factory()

            if self.get(category, record.id) is not None:
                logger.debug(
                    "Store %s: %r already has id %r, merging instead of inserting",
                    self.name,
                    category,
                    record.id,
                )
                self.update(category, record)
                continue

            record.index = len(self._storage[category])
            self._storage[category].append(record)
            logger.debug(
                "Store %s: inserted %r into %r at index %d",
                self.name,
                record.id,
                category,
                record.index,
            )

        return batch

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def _find_position(self, category: str, record_id: str) -> int | None:
        for position, record in enumerate(self._storage[category]):
            if record.id == record_id:
                return position
        return None

    def get(self, category: str, record_id: str) -> Record | None:
        """Look up a record by id.

        Returns:
            The record, or None if the category or id is unknown.

        Raises:
            StoreTypeError: If *category* or *record_id* is not a string.
        """
        ensure_str(category, "Category", "Store.get")
        ensure_str(record_id, "ID", "Store.get")

        if category not in self._storage:
            return None

        position = self._find_position(category, record_id)
        if position is None:
            return None
        return self._storage[category][position]

    def get_all(self) -> dict[str, list[Record]]:
        """Return the live category -> records mapping (not a copy)."""
        return self._storage

    def get_all_by_category(self, category: str) -> list[Record] | None:
        """Return the live record list for *category*, or None if unknown."""
        return self._storage.get(category)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, category: str, item: Record) -> bool:
        """Merge *item* into the stored record with the same id.

        The stored record is replaced in its slot by a new record holding
        the merged payload; its ``id`` and ``index`` are kept.

        Returns:
            True if a record was updated, False if no record has ``item.id``.

        Raises:
            CategoryNotFoundError: If *category* does not exist.
            StoreTypeError: If *category* or ``item.id`` is not a string.
            MergeStrategyMissingError: If the store has no merge strategy.
        """
        ensure_str(category, "Category", "Store.update")
        if category not in self._storage:
            raise CategoryNotFoundError(
                f'Store: Category "{category}" does not exist.', category=category
            )
        ensure_str(item.id, "ID", "Store.update")

        position = self._find_position(category, item.id)  # type: ignore[arg-type]
        if position is None:
            return False

        if self._merge is None:
            raise MergeStrategyMissingError(
                "Store was created without a merge strategy; pass merge= to update records.",
                category=category,
            )

        stored = self._storage[category][position]
        merged = Record(
            id=stored.id,
            index=stored.index,
            data=self._merge(stored.data, item.data),
        )
        self._storage[category][position] = merged
        logger.debug("Store %s: merged %r in %r", self.name, item.id, category)
        return True

    # ------------------------------------------------------------------
    # Remove
    # ------------------------------------------------------------------

    def remove(self, category: str, ids: str | Iterable[str]) -> bool:
        """Remove records by id. Accepts one id or a batch of ids.

        Unknown ids and unknown categories are skipped.

        Returns:
            Always True.
        """
        if isinstance(ids, str):
            return self.remove_many(category, [ids])
        return self.remove_many(category, ids)

    def remove_one(self, category: str, record_id: str) -> bool:
        """Remove the record with *record_id*. Always returns True."""
        return self.remove_many(category, [record_id])

    def remove_many(self, category: str, ids: Iterable[str]) -> bool:
        """Remove every record whose id is in *ids*. Always returns True."""
        for record_id in ids:
            if self.get(category, record_id) is None:
                logger.debug("Store %s: no %r in %r, skipping remove", self.name, record_id, category)
                continue
            self._storage[category] = [
                record for record in self._storage[category] if record.id != record_id
            ]
            logger.debug("Store %s: removed %r from %r", self.name, record_id, category)
        return True

    # ------------------------------------------------------------------
    # Clean
    # ------------------------------------------------------------------

    def clean(self, category: str) -> list[Record] | Literal[False]:
        """Drop every record in *category*, keeping the category itself.

        Returns:
            The new (empty) record list, or False if the category is unknown.
        """
        if category not in self._storage:
            return False
        self._storage[category] = []
        logger.debug("Store %s: cleaned %r", self.name, category)
        return self._storage[category]
