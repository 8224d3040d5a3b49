import jax
import jax.numpy as jnp
import pytest
from seqops.functional import cum_sum, cum_prod, fold_left, fold_right


def combine(a, b):
    return jnp.where(a < b, a * b, a - b)


def plus(acc, x):
    return acc + x


@pytest.fixture
def s():
    return jnp.array([1.0, -2.0, 3.0, -4.0])


def test_x64_enabled_on_import():
    assert jnp.asarray(1.0).dtype == jnp.float64


def test_cum_sum(s):
    result = cum_sum(s)
    assert isinstance(result, jax.Array)
    assert jnp.array_equal(result, jnp.array([1.0, -1.0, 2.0, -2.0]))
    assert jnp.array_equal(s, jnp.array([1.0, -2.0, 3.0, -4.0]))


def test_cum_prod(s):
    result = cum_prod(s)
    assert jnp.array_equal(result, jnp.array([1.0, -2.0, -6.0, 24.0]))


def test_fold_left():
    s = jnp.array([9.0, -2.0, 21.0, 4.0])
    result = fold_left(combine, s, 5.0)
    assert result.shape == ()
    assert jnp.isclose(result, 22.0)


def test_fold_right():
    s = jnp.array([9.0, -2.0, 21.0, 4.0])
    result = fold_right(combine, s, 5.0)
    assert result.shape == ()
    assert jnp.isclose(result, 11.0)


@pytest.mark.parametrize("fold", [fold_left, fold_right])
def test_fold_empty_returns_initial(fold):
    result = fold(combine, jnp.zeros((0,)), 5.0)
    assert jnp.isclose(result, 5.0)


def test_fold_left_is_differentiable():
    s = jnp.array([1.0, 2.0, 3.0])

    def total(x):
        return fold_left(plus, x, 0.0)

    grad = jax.grad(total)(s)
    assert jnp.allclose(grad, jnp.ones(3))


def test_folds_compose_under_vmap():
    batch = jnp.array([[9.0, -2.0, 21.0, 4.0], [9.0, -2.0, 21.0, 4.0]])
    results = jax.vmap(lambda row: fold_left(combine, row, 5.0))(batch)
    assert jnp.allclose(results, jnp.array([22.0, 22.0]))
