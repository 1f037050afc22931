import pytest

import benches.utils.utils as utils


def test_pctl_interpolates_and_clamps():
    xs = [4.0, 1.0, 3.0, 2.0]
    assert utils._pctl([], 50) == 0.0
    assert utils._pctl(xs, 0) == 1.0
    assert utils._pctl(xs, 100) == 4.0
    assert utils._pctl(xs, 150) == 4.0
    assert utils._pctl(xs, 50) == pytest.approx(2.5)


def test_cartesian_varies_first_axis_slowest():
    runs = list(utils._cartesian({"a": [1, 2], "b": ["x", "y"]}))
    assert runs == [
        {"a": 1, "b": "x"},
        {"a": 1, "b": "y"},
        {"a": 2, "b": "x"},
        {"a": 2, "b": "y"},
    ]


def test_as_list_accepts_parsed_values():
    assert utils._as_list([1, 2]) == [1, 2]
    assert utils._as_list("a, b,") == ["a", "b"]
    assert utils._as_list(3) == [3]
