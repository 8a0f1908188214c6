"""Grid geometry: title anchor, chart area and cell placement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import ChartConfig
from .settings import DAYS_PER_WEEK
from .types import Box, Renderer


@dataclass(frozen=True)
class LayoutResult:
    title_x: int
    title_y: int
    chart_x: int
    chart_y: int
    chart_width: int
    chart_height: int
    num_weeks: int
    max_value: Optional[int]  # None when every day is zero


def num_weeks(num_days: int, current_day: int) -> int:
    # The first current_day rows of week 0 hold no data
    return math.ceil((num_days + current_day) / DAYS_PER_WEEK)


def chart_area_dim(num_dots: int, dot_size: int, dot_spacing: int) -> int:
    return num_dots * dot_size + (num_dots - 1) * dot_spacing


def observed_max(days: Sequence[int]) -> Optional[int]:
    """Largest value in ``days``, or None when every day is zero."""
    peak = int(np.max(days))
    return peak if peak > 0 else None


def compute_layout(r: Renderer, config: ChartConfig, days: Sequence[int]) -> LayoutResult:
    """Measure the title and place the chart area on the canvas.

    Leaves the title font and size set on ``r``.
    """
    style = config.get_title_style()
    r.set_font(style.font)
    r.set_font_size(style.font_size)

    title = config.title if style.show else ""
    title_box = r.measure_text(title)
    title_x = int((config.width - title_box.width) // 2)
    title_y = int(style.padding_top + title_box.height)

    weeks = num_weeks(len(days), config.current_day)
    chart_width = chart_area_dim(weeks, config.dot_size, config.dot_spacing)
    chart_height = chart_area_dim(DAYS_PER_WEEK, config.dot_size, config.dot_spacing)

    return LayoutResult(
        title_x=title_x,
        title_y=title_y,
        chart_x=(config.width - chart_width) // 2,
        chart_y=(config.height - title_y - chart_height) // 2,
        chart_width=chart_width,
        chart_height=chart_height,
        num_weeks=weeks,
        max_value=observed_max(days),
    )


def cell_position(index: int, current_day: int, weeks: int, left_to_right: bool = True) -> Tuple[int, int]:
    """(column, row) of the day at ``index`` in the series.

    Only columns are mirrored when ``left_to_right`` is False.
    """
    col, row = divmod(index + current_day, DAYS_PER_WEEK)
    if not left_to_right:
        col = weeks - 1 - col
    return col, row


def cell_box(layout: LayoutResult, col: int, row: int, dot_size: int, dot_spacing: int) -> Box:
    x = layout.chart_x + col * (dot_size + dot_spacing)
    y = layout.chart_y + row * (dot_size + dot_spacing)
    return Box(left=x, top=y, right=x + dot_size, bottom=y + dot_size)
