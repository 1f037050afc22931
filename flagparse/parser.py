from __future__ import annotations

import logging
from collections.abc import Iterable

from flagparse.collection import TypedCollection
from flagparse.errors import FlagParseError
from flagparse.inference import bucket_name, classify, convert
from flagparse.tokenizer import accumulate

logger = logging.getLogger(__name__)


def parse(command: str, boolean_flags: Iterable[str] = ()) -> TypedCollection:
    """
    Parse `command` into a TypedCollection.

    Parameters
    ----------
    command : str
        Whitespace-separated tokens; tokens starting with `--` open a flag.
    boolean_flags : Iterable[str]
        Flag names (without `--`) that take no value and are stored as True.

    Raises
    ------
    EmptyValueList
        A flag's value list is empty after trimming, e.g. `--xs []`.
    ConversionInvariantViolation
        The classifier accepted a value the converter could not parse.

    Any error aborts the whole call; no partial result is returned.
    """
    grouped = accumulate(command, boolean_flags)
    out = TypedCollection()

    for name, values in grouped.items():
        try:
            variant = classify(values)
            value = convert(variant, values)
        except FlagParseError as exc:
            if exc.flag is None:
                exc.flag = name
            raise
        logger.debug("--%s -> %s", name, variant.value)
        getattr(out, bucket_name(variant))[name] = value

    return out
