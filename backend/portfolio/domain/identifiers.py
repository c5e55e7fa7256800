"""Record identifier helpers — allocation and path-parameter parsing."""

import re
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?)(?:(0[xX])([0-9a-fA-F]*)|([0-9]+))")


def next_id(collection: Iterable[dict[str, Any]]) -> int:
    """Return the next id for a collection: ``max(ids) + 1``, or 1 when empty.

    Ids are never gap-filled, so deleting a middle record leaves a hole.
    Records without an integer id do not take part.
    """
    ids = [
        record["id"]
        for record in collection
        if isinstance(record.get("id"), int) and not isinstance(record.get("id"), bool)
    ]
    return max(ids) + 1 if ids else 1


def parse_record_id(raw: str) -> int | None:
    """Parse a record id from a URL segment.

    Leading whitespace, an optional sign and a ``0x`` hex prefix are accepted;
    anything after the leading ASCII digits is ignored (``"12abc"`` -> 12,
    ``"0x1f"`` -> 31). Returns None when the segment does not start with a
    number, which callers treat as "no match".
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, hex_prefix, hex_digits, digits = match.groups()
    if hex_prefix:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2024-05-01T09:30:00.123Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
