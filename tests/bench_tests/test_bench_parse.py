import csv
import json
import os

import pytest

from benches.runners import bench_parse

RUN = os.environ.get("RUN_BENCH_TESTS") == "1"


def test_run_bench_small():
    res = bench_parse.run_bench(flags_per_command=3, count=50, seed=1)
    assert res["count"] == 50
    assert res["mismatches"] == 0
    assert res["cmds_per_s"] > 0
    assert res["lat_us_p99"] >= res["lat_us_p95"] >= 0


def test_main_sweeps_and_writes_csv(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    rc = bench_parse.main(
        ["--flags_per_command", "[2,3]", "--count", "10", "--seed", "1,2", "--csv_out", "r.csv"]
    )
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"runs": 4}

    path = tmp_path / "benches" / "results" / "raw" / "parse_bench" / "r.csv"
    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [(r["flags_per_command"], r["seed"]) for r in rows] == [
        ("2", "1"),
        ("2", "2"),
        ("3", "1"),
        ("3", "2"),
    ]
    assert all(r["mismatches"] == "0" for r in rows)


def test_main_rejects_bad_flags(capsys):
    assert bench_parse.main(["--count", "[]"]) == 2
    assert "[bench_parse] ERROR" in capsys.readouterr().err


@pytest.mark.skipif(not RUN, reason="full bench disabled; set RUN_BENCH_TESTS=1 to enable")
def test_full_default_bench(capsys):
    assert bench_parse.main(["--print"]) == 0
    out = capsys.readouterr().out
    assert '"mismatches": 0' in out
