import pytest

from exdrill.drills.colors import (
    Color,
    ColorLengthError,
    ColorRangeError,
    IntoColorError,
    color_from,
)


@pytest.mark.parametrize(
    "values",
    [
        (256, 1000, 10000),
        (-1, -10, -256),
        (-1, 255, 255),
        [1000, 10000, 256],
        [-10, -256, -1],
        [-1, 255, 255],
    ],
)
def test_out_of_range(values):
    with pytest.raises(ColorRangeError):
        color_from(values)


@pytest.mark.parametrize("values", [(183, 65, 14), [183, 65, 14]])
def test_correct(values):
    assert color_from(values) == Color(red=183, green=65, blue=14)


def test_slice_out_of_range_positive():
    arr = [10000, 256, 1000]
    with pytest.raises(ColorRangeError):
        color_from(arr[:])


def test_slice_out_of_range_negative():
    arr = [-256, -1, -10]
    with pytest.raises(ColorRangeError):
        color_from(arr[:])


def test_slice_sum():
    with pytest.raises(ColorRangeError):
        color_from([-1, 255, 255][:])


def test_slice_correct():
    values = [183, 65, 14]
    assert color_from(values[:]) == Color(183, 65, 14)


def test_slice_excess_length():
    with pytest.raises(ColorLengthError):
        color_from([0, 0, 0, 0])


def test_slice_insufficient_length():
    with pytest.raises(ColorLengthError):
        color_from([0, 0])


def test_errors_share_base():
    with pytest.raises(IntoColorError):
        color_from([])


def test_bounds_inclusive():
    assert color_from((0, 255, 0)) == Color(0, 255, 0)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        color_from((1.5, 2, 3))