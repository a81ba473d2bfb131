import pytest
from hypothesis import given
from hypothesis import strategies as st

from h5types.dim import dims, ndim, size

extents = st.lists(st.integers(min_value=0, max_value=50), max_size=6)


def test_scalar_shape():
    assert ndim(()) == 0
    assert dims(()) == []
    assert size(()) == 1


def test_single_int_shape():
    assert ndim(7) == 1
    assert dims(7) == [7]
    assert size(7) == 7


def test_zero_extent_gives_empty_size():
    assert size((4, 0, 3)) == 0


@given(extents)
def test_tuple_and_list_agree(shape):
    assert dims(tuple(shape)) == shape
    assert dims(list(shape)) == shape
    assert ndim(tuple(shape)) == len(shape)


@given(extents, st.integers(min_value=0, max_value=50))
def test_size_extends_multiplicatively(shape, extra):
    assert size(shape + [extra]) == size(shape) * extra


@given(extents)
def test_trailing_one_keeps_size(shape):
    assert size(shape + [1]) == size(shape)
    assert ndim(shape + [1]) == ndim(shape) + 1


def test_negative_extent_rejected():
    with pytest.raises(ValueError):
        dims((2, -1))
    with pytest.raises(ValueError):
        size(-3)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        dims((2.0, 3))
    with pytest.raises(TypeError):
        ndim("ab")
    with pytest.raises(TypeError):
        size(None)