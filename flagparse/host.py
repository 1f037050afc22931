from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from flagparse.collection import TypedCollection
from flagparse.parser import parse


def to_dict(collection: TypedCollection) -> dict[str, Any]:
    """Flatten the typed buckets into one dict, bucket by bucket."""
    out: dict[str, Any] = {}
    for _, mapping in collection.buckets():
        for k, v in mapping.items():
            out[k] = list(v) if isinstance(v, list) else v
    return out


def parse_command(command: str, boolean_flags: Iterable[str] = ()) -> dict[str, Any]:
    """parse() followed by to_dict(); the plain-dict entry point."""
    return to_dict(parse(command, boolean_flags))
