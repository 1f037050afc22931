"""
Type inference for one flag's raw value list.

`classify` picks one of ten `TypeVariant`s from the textual form of the
values; `convert` turns the values into the concrete Python value for that
variant. The decision order is fixed:

  1. braced list  `[a, b, c]`   -> BRACED_LIST_{INTEGER, FLOAT, STRING}
  2. booleans     `true false`  -> BOOLEAN / LIST_BOOLEAN
  3. integers     `1 2 3`       -> INTEGER / LIST_INTEGER
  4. floats       `1 2.5`       -> FLOAT / LIST_FLOAT
  5. anything else              -> STRING (values joined with single spaces)

Booleans win over numbers, and a mix of integers and floats promotes to float.
There is no unbraced list of strings: several non-numeric tokens always
collapse to one string.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Sequence
from typing import Any

from flagparse.errors import ConversionInvariantViolation, EmptyValueList

BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_DIGITS = len(str(INT64_MAX))

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class TypeVariant(enum.Enum):
    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    LIST_BOOLEAN = "list_boolean"
    LIST_INTEGER = "list_integer"
    LIST_FLOAT = "list_float"
    BRACED_LIST_STRING = "braced_list_string"
    BRACED_LIST_INTEGER = "braced_list_integer"
    BRACED_LIST_FLOAT = "braced_list_float"

    @property
    def braced(self) -> bool:
        return self.name.startswith("BRACED_")


# ---------- literal predicates ----------


def is_bool_literal(s: str) -> bool:
    return s in BOOLEAN_LITERALS


def _int_value(s: str) -> int | None:
    """Value of a base-10 literal with an optional leading '-', or None if not an int64."""
    if _INT_RE.fullmatch(s) is None:
        return None
    # leading zeros do not count; longer digit runs cannot fit and must not reach int()
    digits = s.lstrip("-").lstrip("0") or "0"
    if len(digits) > INT64_DIGITS:
        return None
    n = -int(digits) if s.startswith("-") else int(digits)
    if not INT64_MIN <= n <= INT64_MAX:
        return None
    return n


def is_int_literal(s: str) -> bool:
    return _int_value(s) is not None


def is_float_literal(s: str) -> bool:
    return _FLOAT_RE.fullmatch(s) is not None


# ---------- list helpers ----------


def clean(values: Sequence[str]) -> list[str]:
    """Trim every value and drop the ones that end up empty."""
    return [s for s in (v.strip() for v in values) if s]


def is_braced(values: Sequence[str]) -> bool:
    """True when the first value opens with '[' and the last closes with ']'."""
    if not values:
        return False
    return values[0].strip().startswith("[") and values[-1].strip().endswith("]")


def unbrace(values: Sequence[str]) -> list[str]:
    """
    Split a bracketed list into its comma-separated items.

    The values are joined with single spaces first, so brackets and commas may
    be spread over any number of tokens: `["[", "1,", "2", ",3", "]"]` and
    `["[1,2,3]"]` both give `["1", "2", "3"]`.
    """
    items: list[str] = []
    for piece in " ".join(values).split(","):
        piece = piece.strip()
        if piece.startswith("["):
            piece = piece[1:]
        if piece.endswith("]"):
            piece = piece[:-1]
        piece = piece.strip()
        if piece:
            items.append(piece)
    return items


# ---------- classification ----------


def classify(values: Sequence[str]) -> TypeVariant:
    vals = clean(values)
    if not vals:
        raise EmptyValueList("no values left after trimming")

    if is_braced(vals):
        items = unbrace(vals)
        if not items:
            raise EmptyValueList("bracketed list has no items")
        if all(is_int_literal(s) for s in items):
            return TypeVariant.BRACED_LIST_INTEGER
        if all(is_float_literal(s) for s in items):
            return TypeVariant.BRACED_LIST_FLOAT
        return TypeVariant.BRACED_LIST_STRING

    single = len(vals) == 1
    if all(is_bool_literal(s) for s in vals):
        return TypeVariant.BOOLEAN if single else TypeVariant.LIST_BOOLEAN
    if all(is_int_literal(s) for s in vals):
        return TypeVariant.INTEGER if single else TypeVariant.LIST_INTEGER
    if all(is_float_literal(s) for s in vals):
        return TypeVariant.FLOAT if single else TypeVariant.LIST_FLOAT
    return TypeVariant.STRING


# ---------- conversion ----------


def _to_bools(vals: list[str]) -> list[bool]:
    try:
        return [BOOLEAN_LITERALS[s] for s in vals]
    except KeyError as exc:
        raise ConversionInvariantViolation(f"not a boolean literal: {exc.args[0]!r}") from exc


def _to_ints(vals: list[str]) -> list[int]:
    out: list[int] = []
    for s in vals:
        n = _int_value(s)
        if n is None:
            raise ConversionInvariantViolation(f"not an integer literal: {s!r}")
        out.append(n)
    return out


def _to_floats(vals: list[str]) -> list[float]:
    for s in vals:
        if not is_float_literal(s):
            raise ConversionInvariantViolation(f"not a float literal: {s!r}")
    return [float(s) for s in vals]


def _first(items: list[Any]) -> Any:
    if len(items) != 1:
        raise ConversionInvariantViolation(f"expected a single value, got {len(items)}")
    return items[0]


# One converter per variant; receives the cleaned values.
_CONVERTERS: dict[TypeVariant, Callable[[list[str]], Any]] = {
    TypeVariant.BOOLEAN: lambda vals: _first(_to_bools(vals)),
    TypeVariant.STRING: lambda vals: " ".join(vals),
    TypeVariant.INTEGER: lambda vals: _first(_to_ints(vals)),
    TypeVariant.FLOAT: lambda vals: _first(_to_floats(vals)),
    TypeVariant.LIST_BOOLEAN: _to_bools,
    TypeVariant.LIST_INTEGER: _to_ints,
    TypeVariant.LIST_FLOAT: _to_floats,
    TypeVariant.BRACED_LIST_STRING: lambda vals: unbrace(vals),
    TypeVariant.BRACED_LIST_INTEGER: lambda vals: _to_ints(unbrace(vals)),
    TypeVariant.BRACED_LIST_FLOAT: lambda vals: _to_floats(unbrace(vals)),
}

_BUCKETS: dict[TypeVariant, str] = {
    TypeVariant.BOOLEAN: "booleans",
    TypeVariant.STRING: "strings",
    TypeVariant.INTEGER: "integers",
    TypeVariant.FLOAT: "floats",
    TypeVariant.LIST_BOOLEAN: "list_booleans",
    TypeVariant.LIST_INTEGER: "list_integers",
    TypeVariant.LIST_FLOAT: "list_floats",
    TypeVariant.BRACED_LIST_STRING: "list_strings",
    TypeVariant.BRACED_LIST_INTEGER: "list_integers",
    TypeVariant.BRACED_LIST_FLOAT: "list_floats",
}


def bucket_name(variant: TypeVariant) -> str:
    """TypedCollection attribute that values of `variant` are stored in."""
    return _BUCKETS[variant]


def convert(variant: TypeVariant, values: Sequence[str]) -> Any:
    """
    Convert `values` (already classified as `variant`) to its Python value.

    Raises ConversionInvariantViolation if an element does not parse, which
    means `variant` did not come from `classify(values)`.
    """
    vals = clean(values)
    if not vals:
        raise EmptyValueList("no values left after trimming")
    return _CONVERTERS[variant](vals)


def infer(values: Sequence[str]) -> tuple[TypeVariant, Any]:
    """classify + convert in one step."""
    variant = classify(values)
    return variant, convert(variant, values)
