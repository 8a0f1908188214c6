import pytest

from activity_heatmap import palette
from activity_heatmap.errors import InvalidInput
from activity_heatmap.palette import (
    DEFAULT_SWATCHES,
    EMPTY_COLOR,
    ColorPalette,
    bucket_index,
    dot_color,
    swatches_from_colormap,
)

FOUR = ("#000000", "#111111", "#222222", "#333333")


def test_zero_is_always_empty_swatch():
    for max_value in (None, 0, 1, 5, 1000):
        assert dot_color(0, max_value, DEFAULT_SWATCHES) == DEFAULT_SWATCHES[0]


@pytest.mark.parametrize("num_swatches", [2, 3, 4, 5, 9])
@pytest.mark.parametrize("max_value", [1, 2, 5, 7, 100])
def test_max_value_lands_in_last_bucket(num_swatches, max_value):
    assert bucket_index(max_value, max_value, num_swatches) == num_swatches - 1


@pytest.mark.parametrize("max_value", [1, 3, 10, 57])
def test_buckets_are_non_decreasing(max_value):
    indexes = [bucket_index(v, max_value, 5) for v in range(1, max_value + 1)]
    assert indexes == sorted(indexes)
    assert all(1 <= i <= 4 for i in indexes)


def test_bucket_index_clamps_values_above_max():
    assert bucket_index(50, 5, 4) == 3


def test_example_buckets_with_four_swatches():
    assert bucket_index(3, 5, 4) == 2
    assert dot_color(3, 5, FOUR) == FOUR[2]
    assert dot_color(0, 5, FOUR) == FOUR[0]
    assert dot_color(5, 5, FOUR) == FOUR[3]


def test_all_zero_series_never_buckets(monkeypatch):
    def fail(*args):
        raise AssertionError("bucket formula evaluated without data")

    monkeypatch.setattr(palette, "bucket_index", fail)
    assert dot_color(0, None, DEFAULT_SWATCHES) == EMPTY_COLOR
    assert dot_color(0, 0, DEFAULT_SWATCHES) == EMPTY_COLOR


def test_palette_needs_two_swatches():
    with pytest.raises(InvalidInput):
        ColorPalette(swatches=("#ffffff",))
    assert ColorPalette(swatches=("#ffffff", "#000000")).swatches[1] == "#000000"


def test_swatches_from_colormap():
    swatches = swatches_from_colormap("Greens", 6)
    assert len(swatches) == 6
    assert swatches[0] == EMPTY_COLOR
    assert all(c.startswith("#") and len(c) == 7 for c in swatches)
    assert len(set(swatches[1:])) == 5


def test_swatches_from_unknown_colormap():
    with pytest.raises(InvalidInput):
        swatches_from_colormap("not-a-palette")
    with pytest.raises(InvalidInput):
        swatches_from_colormap("Greens", 1)


@pytest.mark.parametrize("max_value,num_swatches", [(1, 5), (2, 5), (3, 5), (1, 2), (2, 9)])
def test_small_max_value_still_reaches_last_swatch(max_value, num_swatches):
    assert bucket_index(max_value, max_value, num_swatches) == num_swatches - 1
    assert bucket_index(1, max_value, num_swatches) >= 1


def test_palette_rejects_unparseable_colors():
    with pytest.raises(InvalidInput):
        ColorPalette(swatches=("nocolor", "#ffffff"))
    with pytest.raises(InvalidInput):
        ColorPalette(text_color="not a color")
