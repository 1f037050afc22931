# benches/runners/bench_parse.py
"""
Benchmark flagparse.parse over synthetic command strings.

Flow per run:
  1) Build `count` commands with benches.workloads.commands.command_stream.
  2) Time parse(command, boolean_flags) for each one.
  3) Check every flag landed in the bucket the generator expected.
  4) Report latency distribution (microseconds) and commands per second.

Flags (read with flagparse itself; `a,b` or `[a,b]` values are swept):
  --flags_per_command 4,8
  --width 3                      # max values per list flag
  --kinds int,float,braced_int   # subset of benches.workloads.commands.KINDS
  --count 10000
  --seed 0
  --csv_out results.csv
  --print                        # print each run's result
"""

from __future__ import annotations

import json
import statistics
import sys
import time
from typing import Any

import benches.utils.utils as utils
from benches.utils.write_csv import write_rows_to_csv
from benches.workloads.commands import KINDS, command_stream
from flagparse import parse
from flagparse.errors import FlagParseError
from flagparse.host import parse_command

RUNNER_BOOLEAN_FLAGS = {"print"}

# ---------------- single-run bench ----------------


def run_bench(
    *,
    flags_per_command: int = 6,
    width: int = 3,
    kinds: tuple[str, ...] = KINDS,
    count: int = 10000,
    seed: int = 0,
) -> dict[str, Any]:
    """Parse `count` generated commands and measure per-command latency."""
    commands = list(
        command_stream(
            count=count,
            flags_per_command=flags_per_command,
            kinds=kinds,
            width=width,
            seed=seed,
        )
    )

    lat_us: list[float] = []
    mismatches = 0
    t0 = time.perf_counter()
    for cmd in commands:
        ts = time.perf_counter()
        res = parse(cmd.text, cmd.boolean_flags)
        te = time.perf_counter()
        lat_us.append((te - ts) * 1e6)

        for name, bucket in cmd.expected.items():
            if res.bucket_for(name) != bucket:
                mismatches += 1

    t1 = time.perf_counter()
    dur = max(t1 - t0, 1e-9)

    return {
        # params
        "flags_per_command": flags_per_command,
        "width": width,
        "kinds": list(kinds),
        "count": count,
        "seed": seed,
        # metrics
        "duration_s": dur,
        "lat_us_mean": statistics.fmean(lat_us) if lat_us else 0.0,
        "lat_us_p95": utils._pctl(lat_us, 95.0),
        "lat_us_p99": utils._pctl(lat_us, 99.0),
        "cmds_per_s": count / dur,
        "mismatches": mismatches,
    }


# ---------------- driver ----------------


def main(argv: list[str]) -> int:
    defaults = {
        "flags_per_command": 6,
        "width": 3,
        "kinds": ",".join(KINDS),
        "count": 10000,
        "seed": 42,
        "csv_out": None,
        "print": False,
    }
    csv_prefix = "./benches/results/raw/parse_bench/"

    try:
        flags = parse_command(" ".join(argv), RUNNER_BOOLEAN_FLAGS)
    except FlagParseError as e:
        print(f"[bench_parse] ERROR: {e}", file=sys.stderr)
        return 2
    cfg = {**defaults, **flags}

    sweep_keys = ["flags_per_command", "width", "count", "seed"]
    sweep = {k: utils._as_list(cfg[k]) for k in sweep_keys}
    kinds = tuple(str(k) for k in utils._as_list(cfg["kinds"]))

    results: list[dict[str, Any]] = []
    for params in utils._cartesian(sweep):
        # axes split from a plain "a,b" string are still text
        params = {k: int(v) for k, v in params.items()}
        res = run_bench(kinds=kinds, **params)
        results.append(res)

        if cfg["print"]:
            print(json.dumps(res, indent=2))

    if cfg.get("csv_out"):
        out = write_rows_to_csv(results, csv_prefix + str(cfg["csv_out"]))
        print(f"[bench_parse] csv: {out}", file=sys.stderr)

    print(json.dumps({"runs": len(results)}, indent=2))
    return 0


if __name__ == "__main__":
    # Run as: python -m benches.runners.bench_parse [flags...]
    raise SystemExit(main(sys.argv[1:]))
