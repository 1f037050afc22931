from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from typing import Any

# Host emission order; list_booleans is emitted last.
BUCKET_ORDER: tuple[str, ...] = (
    "booleans",
    "strings",
    "integers",
    "floats",
    "list_strings",
    "list_integers",
    "list_floats",
    "list_booleans",
)


@dataclass
class TypedCollection:
    """
    Result of one `parse` call: flag name -> value, partitioned by concrete type.

    Braced list variants have already collapsed into the plain list buckets,
    so there are eight mappings for ten variants. A flag name lives in
    exactly one of them.
    """

    booleans: dict[str, bool] = field(default_factory=dict)
    strings: dict[str, str] = field(default_factory=dict)
    integers: dict[str, int] = field(default_factory=dict)
    floats: dict[str, float] = field(default_factory=dict)
    list_strings: dict[str, list[str]] = field(default_factory=dict)
    list_integers: dict[str, list[int]] = field(default_factory=dict)
    list_floats: dict[str, list[float]] = field(default_factory=dict)
    list_booleans: dict[str, list[bool]] = field(default_factory=dict)

    # ---------- read helpers ----------

    def buckets(self) -> Iterator[tuple[str, dict[str, Any]]]:
        """Yield (bucket_name, mapping) pairs in host emission order."""
        for name in BUCKET_ORDER:
            yield name, getattr(self, name)

    def bucket_for(self, name: str) -> str | None:
        """Name of the bucket holding `name`, or None if the flag is absent."""
        for bucket, mapping in self.buckets():
            if name in mapping:
                return bucket
        return None

    def get(self, name: str, default: Any = None) -> Any:
        bucket = self.bucket_for(name)
        if bucket is None:
            return default
        return getattr(self, bucket)[name]

    def names(self) -> list[str]:
        return [k for _, mapping in self.buckets() for k in mapping]

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.bucket_for(name) is not None

    def __len__(self) -> int:
        return sum(len(mapping) for _, mapping in self.buckets())
