"""Record identifier generation."""

from __future__ import annotations

import re
import secrets

GENERATED_ID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-$")


def _segment() -> str:
    # Value in [0x10000, 0x20000) always renders as 5 hex digits; drop the leading "1".
    return format(0x10000 + secrets.randbelow(0x10000), "x")[1:]


def generate_id() -> str:
    """Generate a short random record id like ``"3f2a9c1d-07be-a4f0-"``.

    Collisions are possible but unlikely; callers are not protected from them.
    """
    return _segment() + _segment() + "-" + _segment() + "-" + _segment() + "-"


def is_generated_id(value: object) -> bool:
    """Return True if *value* has the shape produced by :func:`generate_id`."""
    return isinstance(value, str) and GENERATED_ID_PATTERN.match(value) is not None
