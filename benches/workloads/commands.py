# benches/workloads/commands.py
from __future__ import annotations

from collections.abc import Generator, Sequence
from dataclasses import dataclass, field

import numpy as np
from faker import Faker

__all__ = [
    "KINDS",
    "EXPECTED_BUCKET",
    "SyntheticCommand",
    "value_tokens",
    "command_stream",
]

# value kind -> TypedCollection bucket the parser should put it in
EXPECTED_BUCKET: dict[str, str] = {
    "switch": "booleans",  # declared boolean flag, no value token
    "bool": "booleans",
    "int": "integers",
    "float": "floats",
    "string": "strings",
    "list_bool": "list_booleans",
    "list_int": "list_integers",
    "list_float": "list_floats",
    "braced_int": "list_integers",
    "braced_float": "list_floats",
    "braced_string": "list_strings",
}

KINDS: tuple[str, ...] = tuple(EXPECTED_BUCKET)


@dataclass
class SyntheticCommand:
    text: str
    boolean_flags: set[str] = field(default_factory=set)
    expected: dict[str, str] = field(default_factory=dict)  # flag -> bucket


def _word(fake: Faker, i: int) -> str:
    # suffix keeps the word from ever reading as a bool/number literal
    return f"{fake.word().lower()}-{i}"


def _braced(items: list[str], spaced: bool) -> list[str]:
    """Render a bracketed list either as one token or spread over several."""
    if not spaced:
        return ["[" + ",".join(items) + "]"]
    toks = ["["]
    for j, it in enumerate(items):
        toks.append(it + ("," if j < len(items) - 1 else ""))
    toks.append("]")
    return toks


def value_tokens(
    kind: str, *, rng: np.random.Generator, fake: Faker, width: int = 3
) -> list[str]:
    """Value tokens for one flag of the given kind (empty for 'switch')."""
    if kind not in EXPECTED_BUCKET:
        raise ValueError(f"unknown kind: {kind!r}")
    if width < 2:
        raise ValueError("width must be >= 2")

    n = int(rng.integers(2, width + 1))
    if kind == "switch":
        return []
    if kind == "bool":
        return [str(bool(rng.integers(0, 2))).lower()]
    if kind == "int":
        return [str(int(rng.integers(-10_000, 10_000)))]
    if kind == "float":
        return [f"{rng.normal(0.0, 100.0):.4f}"]
    if kind == "string":
        return [_word(fake, j) for j in range(n)]
    if kind == "list_bool":
        return [str(bool(b)).lower() for b in rng.integers(0, 2, size=n)]
    if kind == "list_int":
        return [str(int(v)) for v in rng.integers(-1000, 1000, size=n)]
    if kind == "list_float":
        # first element always fractional so the list never reads as ints
        return [f"{rng.random():.3f}"] + [str(int(v)) for v in rng.integers(0, 100, size=n - 1)]

    spaced = bool(rng.integers(0, 2))
    if kind == "braced_int":
        items = [str(int(v)) for v in rng.integers(-1000, 1000, size=n)]
    elif kind == "braced_float":
        items = [f"{v:.3f}" for v in rng.normal(0.0, 10.0, size=n)]
    else:
        items = [_word(fake, j) for j in range(n)]
    return _braced(items, spaced)


def command_stream(
    *,
    count: int,
    flags_per_command: int = 6,
    kinds: Sequence[str] = KINDS,
    width: int = 3,
    seed: int = 0,
) -> Generator[SyntheticCommand, None, None]:
    """
    Emit `count` synthetic commands, each with `flags_per_command` distinct flags
    whose kinds are drawn uniformly from `kinds`. Deterministic via seed.
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    if flags_per_command <= 0:
        raise ValueError("flags_per_command must be positive")
    if not kinds:
        raise ValueError("kinds must not be empty")
    for k in kinds:
        if k not in EXPECTED_BUCKET:
            raise ValueError(f"unknown kind: {k!r}")

    rng = np.random.default_rng(seed)
    fake = Faker("en_US")
    fake.seed_instance(seed)

    for _ in range(count):
        cmd = SyntheticCommand(text="")
        toks: list[str] = []
        for i in range(flags_per_command):
            kind = kinds[int(rng.integers(0, len(kinds)))]
            name = f"{fake.word().lower()}_{i}"
            toks.append("--" + name)
            toks.extend(value_tokens(kind, rng=rng, fake=fake, width=width))
            if kind == "switch":
                cmd.boolean_flags.add(name)
            cmd.expected[name] = EXPECTED_BUCKET[kind]
        cmd.text = " ".join(toks)
        yield cmd
