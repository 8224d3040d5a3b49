import numpy as np
import pytest
from seqops.core.errors import LengthMismatch
from seqops.ops.cumulative import cum_sum, cum_prod


@pytest.fixture
def s():
    return np.array([1.0, -2.0, 3.0, -4.0])


def test_cum_prod(s):
    dst = np.empty(len(s))
    out = cum_prod(dst, s)

    assert out is dst
    np.testing.assert_array_equal(dst, [1.0, -2.0, -6.0, 24.0])
    np.testing.assert_array_equal(s, [1.0, -2.0, 3.0, -4.0])


def test_cum_sum(s):
    dst = np.empty(len(s))
    cum_sum(dst, s)

    np.testing.assert_array_equal(dst, [1.0, -1.0, 2.0, -2.0])
    np.testing.assert_array_equal(s, [1.0, -2.0, 3.0, -4.0])


def test_cum_sum_matches_partial_sums():
    rng = np.random.default_rng(7)
    src = rng.uniform(-10, 10, size=64)
    dst = np.empty_like(src)

    cum_sum(dst, src)

    expected = [sum(src[: i + 1]) for i in range(len(src))]
    np.testing.assert_allclose(dst, expected, rtol=1e-12, atol=1e-12)


def test_cum_sum_not_idempotent_in_general(s):
    once = np.empty(4)
    twice = np.empty(4)
    cum_sum(once, s)
    cum_sum(twice, once)
    assert not np.array_equal(once, twice)


def test_cum_sum_idempotent_on_zeros():
    src = np.zeros(4)
    once = np.empty(4)
    twice = np.empty(4)
    cum_sum(once, src)
    cum_sum(twice, once)
    np.testing.assert_array_equal(once, twice)


def test_cum_sum_zero_tail_still_changes_on_reapplication():
    src = np.array([3.0, 0.0, 0.0, 0.0])
    once = np.empty(4)
    twice = np.empty(4)
    cum_sum(once, src)
    cum_sum(twice, once)
    np.testing.assert_array_equal(once, [3.0, 3.0, 3.0, 3.0])
    np.testing.assert_array_equal(twice, [3.0, 6.0, 9.0, 12.0])


@pytest.mark.parametrize(
    "op, expected",
    [
        (cum_sum, [1.0, -1.0, 2.0, -2.0]),
        (cum_prod, [1.0, -2.0, -6.0, 24.0]),
    ],
)
def test_cumulative_in_place_aliasing(s, op, expected):
    op(s, s)
    np.testing.assert_array_equal(s, expected)


@pytest.mark.parametrize("op", [cum_sum, cum_prod])
def test_cumulative_empty(op):
    dst = np.empty(0)
    out = op(dst, [])
    assert out.shape == (0,)


@pytest.mark.parametrize("op", [cum_sum, cum_prod])
def test_cumulative_length_mismatch(op, s):
    dst = np.zeros(3)
    with pytest.raises(LengthMismatch):
        op(dst, s)
    np.testing.assert_array_equal(dst, [0.0, 0.0, 0.0])
