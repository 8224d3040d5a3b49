import numpy as np
import pytest
from seqops.core.config import settings
from seqops.core.types import as_source, as_destination, as_scalar


def test_as_source_does_not_copy_float64():
    a = np.array([1.0, 2.0])
    assert as_source(a) is a


def test_as_source_converts_lists_and_ints():
    out = as_source([1, 2, 3])
    assert out.dtype == np.float64
    np.testing.assert_array_equal(out, [1.0, 2.0, 3.0])


@pytest.mark.parametrize("values", [3.0, [[1.0, 2.0], [3.0, 4.0]]])
def test_as_source_rejects_non_1d(values):
    with pytest.raises(ValueError):
        as_source(values)


def test_as_destination_returns_same_object():
    a = np.zeros(3)
    assert as_destination(a) is a


def test_as_destination_rejects_tuple():
    with pytest.raises(TypeError):
        as_destination((1.0, 2.0))


def test_as_destination_rejects_2d():
    with pytest.raises(ValueError):
        as_destination(np.zeros((2, 2)))


def test_as_destination_strict_dtype():
    with pytest.raises(ValueError, match="float64"):
        as_destination(np.zeros(3, dtype=np.float32))


def test_as_destination_relaxed_dtype(monkeypatch):
    monkeypatch.setattr(settings, "STRICT_DTYPE", False)

    a = np.zeros(3, dtype=np.float32)
    assert as_destination(a) is a

    with pytest.raises(ValueError, match="float array"):
        as_destination(np.zeros(3, dtype=np.int64))


def test_as_scalar():
    assert as_scalar(2) == 2.0
    assert isinstance(as_scalar(np.float32(1.5)), float)
    with pytest.raises(ValueError):
        as_scalar([1.0, 2.0])
