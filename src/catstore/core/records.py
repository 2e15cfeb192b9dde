"""
Record model for catstore.

A record is an open payload (``data``) plus two engine-managed fields:
``id`` (unique within a category) and ``index`` (position at insertion time).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

RESERVED_FIELDS = ("id", "index")


class Record(BaseModel):
    """
    A single stored item.

    Attributes:
        id: Identifier, unique within its category. ``None`` until assigned.
        index: Position in the category when the record was inserted.
            Not renumbered after removals.
        data: Caller-defined fields
    """

    id: str | None = None
    index: int | None = None
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Record:
        """Build a record from a flat mapping, lifting out ``id`` and ``index``."""
        payload = {k: v for k, v in mapping.items() if k not in RESERVED_FIELDS}
        return cls(id=mapping.get("id"), index=mapping.get("index"), data=payload)

    def to_mapping(self) -> dict[str, Any]:
        """Flatten to one dict: the payload plus whichever reserved fields are set."""
        result = dict(self.data)
        if self.id is not None:
            result["id"] = self.id
        if self.index is not None:
            result["index"] = self.index
        return result

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def get(self, key: str, default: Any = None) -> Any:
        """Return payload field *key*, or *default* if it is not set."""
        return self.data.get(key, default)
