"""
Parse the command line given to this module and print it as JSON.

    python -m flagparse --verbose --name Alice --count 3
    python -m flagparse --boolean-flags verbose,dry_run --verbose --name Alice

Boolean flag names come from a leading `--boolean-flags a,b` option and from
the FLAGPARSE_BOOLEAN_FLAGS environment variable (comma-separated); both are
merged.
"""

from __future__ import annotations

import json
import os
import sys

from flagparse.errors import FlagParseError
from flagparse.host import parse_command

ENV_BOOLEAN_FLAGS = "FLAGPARSE_BOOLEAN_FLAGS"
BOOLEAN_FLAGS_OPTION = "--boolean-flags"


def _split_names(raw: str) -> set[str]:
    return {s.strip() for s in raw.split(",") if s.strip()}


def main(argv: list[str]) -> int:
    boolean_flags = _split_names(os.environ.get(ENV_BOOLEAN_FLAGS, ""))

    if argv and argv[0] == BOOLEAN_FLAGS_OPTION:
        if len(argv) < 2:
            print(f"[flagparse] ERROR: {BOOLEAN_FLAGS_OPTION} needs a value", file=sys.stderr)
            return 2
        boolean_flags |= _split_names(argv[1])
        argv = argv[2:]

    try:
        result = parse_command(" ".join(argv), boolean_flags)
    except FlagParseError as e:
        print(f"[flagparse] ERROR: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    # skip module name
    raise SystemExit(main(sys.argv[1:]))
