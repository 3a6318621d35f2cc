import pytest

from ajustepol.timing import is_pow2, marker_name, timestamp


def test_timestamp_is_monotonic():
    first = timestamp()
    second = timestamp()
    assert second >= first


def test_timestamp_measures_elapsed_milliseconds():
    start = timestamp()
    total = sum(range(200000))
    elapsed = timestamp() - start
    assert total > 0
    assert elapsed >= 0.0


def test_marker_name_example():
    assert marker_name("ABC", 10) == "ABC_10"


def test_marker_name_zero():
    assert marker_name("tSL", 0) == "tSL_0"


def test_marker_name_negative_wraps_unsigned():
    assert marker_name("x", -1) == "x_4294967295"


@pytest.mark.parametrize("n", [1, 2, 4, 8, 1024, 2**20])
def test_is_pow2_true(n):
    assert is_pow2(n) is True


@pytest.mark.parametrize("n", [3, 5, 6, 12, 1000])
def test_is_pow2_false(n):
    assert is_pow2(n) is False


@pytest.mark.parametrize("n", [0, -4])
def test_is_pow2_rejects_non_positive(n):
    with pytest.raises(ValueError):
        is_pow2(n)