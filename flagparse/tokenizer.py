from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

FLAG_PREFIX = "--"
BOOLEAN_FLAG_VALUE = "true"


def is_flag(token: str) -> bool:
    return token.startswith(FLAG_PREFIX)


def accumulate(command: str, boolean_flags: Iterable[str] = ()) -> dict[str, list[str]]:
    """
    Group the whitespace-separated tokens of `command` under their owning flag.

    - `--name v1 v2`  -> {"name": ["v1", "v2"]}
    - `--name` with name in `boolean_flags` -> {"name": ["true"]}; the cursor
      closes, so following values are not attached to it.
    - values seen while no flag is open are dropped.
    - a non-boolean flag with no values produces no entry.
    - a repeated flag replaces the earlier entry (last write wins).
    """
    bool_names = frozenset(boolean_flags)
    out: dict[str, list[str]] = {}

    current: str | None = None  # open flag, None when values would be dropped
    values: list[str] = []

    for tok in command.split():
        if is_flag(tok):
            if current is not None and values:
                _commit(out, current, values)
                values = []
            name = tok[len(FLAG_PREFIX) :]
            if name in bool_names:
                _commit(out, name, [BOOLEAN_FLAG_VALUE])
                current = None
            else:
                current = name
        elif current is not None:
            values.append(tok)
        else:
            logger.debug("dropping value %r: no open flag", tok)

    if current is not None and values:
        _commit(out, current, values)

    return out


def _commit(out: dict[str, list[str]], name: str, values: list[str]) -> None:
    if name in out:
        logger.debug("--%s repeated; replacing %r with %r", name, out[name], values)
    out[name] = values
