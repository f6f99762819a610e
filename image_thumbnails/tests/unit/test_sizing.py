import pytest

from thumbnailer.exceptions import SizingError
from thumbnailer.sizing import divisor_for, plan_dimensions


def test_plan_dimensions_example():
    assert divisor_for(1000, 100) == 10
    assert plan_dimensions(1000, 600, 100) == (100, 60)


def test_divisor_is_floored():
    # 1000 / 300 = 3.33 -> 3, so the height is 600 / 3
    assert divisor_for(1000, 300) == 3
    assert plan_dimensions(1000, 600, 300) == (300, 200)


def test_height_rounds_half_away_from_zero():
    # 15 / 2 = 7.5 -> 8
    assert plan_dimensions(200, 15, 100) == (100, 8)
    # 13 / 2 = 6.5 -> 7 (round half to even would give 6)
    assert plan_dimensions(200, 13, 100) == (100, 7)
    # 10 / 3 = 3.33 -> 3
    assert plan_dimensions(300, 10, 100) == (100, 3)
    # 11 / 3 = 3.67 -> 4
    assert plan_dimensions(300, 11, 100) == (100, 4)


def test_aspect_ratio_within_one_pixel():
    width, height = plan_dimensions(4000, 3000, 400)
    assert width == 400
    assert abs(height - 400 * 3000 / 4000) <= 1


@pytest.mark.parametrize("target_width", [1000, 1001, 5000])
def test_target_not_smaller_than_source_raises(target_width):
    with pytest.raises(SizingError):
        plan_dimensions(1000, 600, target_width)


@pytest.mark.parametrize(
    "source_width, source_height, target_width",
    [(1000, 600, 0), (1000, 600, -5), (0, 600, 100), (1000, 0, 100)],
)
def test_non_positive_sizes_raise(source_width, source_height, target_width):
    with pytest.raises(SizingError):
        plan_dimensions(source_width, source_height, target_width)


def test_height_rounding_to_zero_raises():
    # 1 / 10 rounds to 0
    with pytest.raises(SizingError):
        plan_dimensions(1000, 1, 100)


def test_sizing_error_is_value_error():
    with pytest.raises(ValueError):
        divisor_for(100, 100)
