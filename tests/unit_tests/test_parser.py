import threading

import pytest

from flagparse import (
    ConversionInvariantViolation,
    EmptyValueList,
    FlagParseError,
    TypedCollection,
    parse,
)
from flagparse.collection import BUCKET_ORDER


def assert_only(res: TypedCollection, **expected_buckets):
    """Every bucket not named in `expected_buckets` must be empty."""
    for name in BUCKET_ORDER:
        assert getattr(res, name) == expected_buckets.get(name, {}), name


# 1) End-to-end examples
def test_mixed_command_with_boolean_flag():
    res = parse("--verbose --name Alice --count 3", {"verbose"})
    assert_only(
        res,
        booleans={"verbose": True},
        strings={"name": "Alice"},
        integers={"count": 3},
    )


def test_every_bucket_gets_filled():
    cmd = (
        "--on true --title hello world --n 7 --lr 0.01 "
        "--tags [a, b c] --ids [ 1, 2 , 3 ] --ws [0.5,1] "
        "--mask true false true --sizes 1 2 3 --ratios 0.5 1"
    )
    res = parse(cmd)
    assert_only(
        res,
        booleans={"on": True},
        strings={"title": "hello world"},
        integers={"n": 7},
        floats={"lr": 0.01},
        list_strings={"tags": ["a", "b c"]},
        list_integers={"ids": [1, 2, 3], "sizes": [1, 2, 3]},
        list_floats={"ws": [0.5, 1.0], "ratios": [0.5, 1.0]},
        list_booleans={"mask": [True, False, True]},
    )


def test_duplicate_flag_keeps_last_occurrence():
    res = parse("--x 1 --x 2")
    assert_only(res, integers={"x": 2})


def test_duplicate_flag_can_change_type():
    res = parse("--x 1 --x hello")
    assert_only(res, strings={"x": "hello"})


@pytest.mark.parametrize("cmd", ["", "   ", "\t\n"])
def test_blank_command_gives_empty_collection(cmd):
    res = parse(cmd)
    assert res.is_empty()
    assert len(res) == 0
    assert_only(res)


def test_flag_without_values_is_absent_everywhere():
    res = parse("--ghost --n 1")
    assert "ghost" not in res
    assert res.bucket_for("ghost") is None
    assert_only(res, integers={"n": 1})


def test_oversized_number_lands_in_floats():
    big = "9" * 5000
    res = parse(f"--big {big} --xs [1, {big}] --n 3")
    assert set(res.floats) == {"big"}
    assert set(res.list_floats) == {"xs"}
    assert res.list_floats["xs"][0] == 1.0
    assert res.integers == {"n": 3}


# 2) Errors abort the whole call
def test_empty_braced_list_aborts_and_names_flag():
    with pytest.raises(EmptyValueList) as exc_info:
        parse("--ok 1 --xs [ ] --more 2")
    assert exc_info.value.flag == "xs"
    assert "--xs" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_invariant_violation_propagates_with_flag(monkeypatch):
    import flagparse.parser as parser_mod
    from flagparse.inference import TypeVariant

    # force a wrong classification to reach the converter
    monkeypatch.setattr(parser_mod, "classify", lambda values: TypeVariant.INTEGER)
    with pytest.raises(ConversionInvariantViolation) as exc_info:
        parse("--name Alice")
    assert exc_info.value.flag == "name"
    assert isinstance(exc_info.value, FlagParseError)


# 3) Collection helpers
def test_collection_lookup_helpers():
    res = parse("--v --n 3 --xs [1,2]", ["v"])
    assert res.get("n") == 3
    assert res.get("xs") == [1, 2]
    assert res.get("missing", "dflt") == "dflt"
    assert res.bucket_for("v") == "booleans"
    assert res.names() == ["v", "n", "xs"]
    assert "v" in res and 3 not in res
    assert len(res) == 3


def test_each_call_gets_its_own_collection():
    a = parse("--n 1")
    b = parse("--n 1")
    assert a == b and a is not b
    a.integers["n"] = 99
    assert b.integers["n"] == 1


# 4) Concurrency: no shared state between calls
def test_parallel_calls_are_independent():
    errors: list[BaseException] = []

    def worker(i: int):
        try:
            for _ in range(200):
                res = parse(f"--id {i} --tag t{i} --v", {"v"})
                assert res.integers == {"id": i}
                assert res.strings == {"tag": f"t{i}"}
        except AssertionError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert not errors
