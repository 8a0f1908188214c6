"""Swatch sets and the value-to-swatch bucketing used for grid cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import seaborn as sns
from matplotlib.colors import is_color_like

from .errors import InvalidInput

EMPTY_COLOR = "#ebedf0"

DEFAULT_SWATCHES: Tuple[str, ...] = (
    EMPTY_COLOR,
    "#c6e48b",
    "#7bc96f",
    "#239a3b",
    "#196127",
)


@dataclass(frozen=True)
class ColorPalette:
    """Colors for the chart surface and its cells.

    ``swatches[0]`` is used for days without activity, the remaining
    entries form an ascending intensity ramp.
    """

    background_color: str = "#ffffff"
    background_stroke_color: str = "#ffffff"
    text_color: str = "#333333"
    swatches: Tuple[str, ...] = DEFAULT_SWATCHES

    def __post_init__(self) -> None:
        if len(self.swatches) < 2:
            raise InvalidInput("A color palette needs at least two swatches")
        colors = (self.background_color, self.background_stroke_color, self.text_color, *self.swatches)
        for color in colors:
            if not is_color_like(color):
                raise InvalidInput(f"Invalid color {color!r}")


def swatches_from_colormap(name: str, count: int = 5, empty: str = EMPTY_COLOR) -> Tuple[str, ...]:
    """Build a swatch set from a seaborn or matplotlib palette name.

    The ramp gets ``count - 1`` colors sampled from ``name``, prefixed by
    the ``empty`` color.
    """
    if count < 2:
        raise InvalidInput("A color palette needs at least two swatches")
    try:
        ramp = sns.color_palette(name, n_colors=count - 1).as_hex()
    except ValueError as e:
        raise InvalidInput(f"Unknown color palette {name!r}") from e
    return (empty, *ramp)


def bucket_index(value: int, max_value: int, num_swatches: int) -> int:
    """Swatch index for a positive value.

    Positive values are spread linearly over swatches 1..num_swatches-1 so
    that ``value == max_value`` lands in the last one. ``max_value`` must be
    positive; callers handle the all-zero case before bucketing.
    """
    if value >= max_value:
        return num_swatches - 1
    idx = (value - 1) * (num_swatches - 1) // max_value + 1
    return min(max(idx, 1), num_swatches - 1)


def dot_color(value: int, max_value: Optional[int], swatches: Sequence[str]) -> str:
    if value == 0 or not max_value or max_value <= 0:
        return swatches[0]
    return swatches[bucket_index(value, max_value, len(swatches))]
