"""Immutable configuration for a single activity chart render."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

import numpy as np
from matplotlib.colors import is_color_like

from . import settings
from .errors import InvalidInput
from .palette import ColorPalette
from .styles import Style


def title_font_size(width: int, height: int) -> float:
    """Title size in points, stepped on the smaller canvas dimension."""
    dim = min(width, height)
    if dim >= 2048:
        return 48
    elif dim >= 1024:
        return 24
    elif dim >= 512:
        return 18
    elif dim >= 256:
        return 12
    return 10


@dataclass(frozen=True)
class ChartConfig:
    """Everything needed to draw one chart besides the day values.

    ``current_day`` is the weekday row (0-6) of the first value in the
    series. With ``left_to_right`` False the newest week is drawn on the
    left. Axes are toggled through the ``show`` flag of their style.
    """

    title: str = ""
    title_style: Style = field(default_factory=Style)

    width: int = settings.DEFAULT_WIDTH
    height: int = settings.DEFAULT_HEIGHT
    dpi: float = settings.DEFAULT_DPI

    dot_size: int = settings.DEFAULT_DOT_SIZE
    dot_spacing: int = settings.DEFAULT_DOT_SPACING

    current_day: int = 0
    left_to_right: bool = True

    font: Any = None
    palette: ColorPalette = field(default_factory=ColorPalette)

    background: Style = field(default_factory=Style)
    dot_style: Style = field(default_factory=Style)
    x_axis: Style = field(default_factory=Style)
    y_axis: Style = field(default_factory=Style)

    month_labels: Tuple[str, ...] = settings.MONTH_LABELS
    weekday_labels: Tuple[str, ...] = settings.WEEKDAY_LABELS

    def get_title_style(self) -> Style:
        return self.title_style.inherit_from(
            Style(
                font=self.font,
                font_size=title_font_size(self.width, self.height),
                font_color=self.palette.text_color,
                padding_top=settings.DEFAULT_TITLE_TOP,
                text_align="left",
            )
        )

    def get_background_style(self) -> Style:
        return self.background.inherit_from(
            Style(
                fill_color=self.palette.background_color,
                stroke_color=self.palette.background_stroke_color,
                stroke_width=settings.DEFAULT_STROKE_WIDTH,
            )
        )

    def get_axis_style(self, axis: Style) -> Style:
        return axis.inherit_from(
            Style(
                font=self.font,
                font_size=settings.DEFAULT_AXIS_FONT_SIZE,
                font_color=self.palette.text_color,
                text_align="left",
            )
        )

    def get_dot_style(self, color: str) -> Style:
        # Stroke follows the fill unless overridden
        return self.dot_style.inherit_from(
            Style(
                fill_color=color,
                stroke_color=color,
                stroke_width=settings.DEFAULT_STROKE_WIDTH,
            )
        )

    def validate(self, days: Sequence[int]) -> List[int]:
        """Check the config against ``days`` and return them as plain ints."""
        if isinstance(self.current_day, bool) or not isinstance(self.current_day, (int, np.integer)):
            raise InvalidInput(f"current_day must be an integer, got {self.current_day!r}")
        if not 0 <= self.current_day < settings.DAYS_PER_WEEK:
            raise InvalidInput(f"current_day must be in [0, 6], got {self.current_day}")
        for name in ("width", "height", "dot_size", "dot_spacing"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidInput(f"{name} must be an integer, got {value!r}")
        if isinstance(self.dpi, bool) or not isinstance(self.dpi, (int, float, np.number)):
            raise InvalidInput(f"dpi must be a number, got {self.dpi!r}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidInput(f"Invalid canvas size {self.width}x{self.height}")
        if self.dpi <= 0:
            raise InvalidInput(f"Invalid DPI {self.dpi}")
        if self.dot_size <= 0 or self.dot_spacing < 0:
            raise InvalidInput(f"Invalid dot size {self.dot_size} / spacing {self.dot_spacing}")
        if len(self.weekday_labels) != settings.DAYS_PER_WEEK:
            raise InvalidInput("weekday_labels must have exactly 7 entries")
        if not self.month_labels:
            raise InvalidInput("month_labels must not be empty")
        for style in (self.title_style, self.background, self.dot_style, self.x_axis, self.y_axis):
            for color in (style.fill_color, style.stroke_color, style.font_color):
                if color is not None and not is_color_like(color):
                    raise InvalidInput(f"Invalid style color {color!r}")

        if days is None:
            raise InvalidInput("Please provide at least one day of activity")
        try:
            values = np.asarray(days)
        except ValueError as e:
            raise InvalidInput("Days must be a flat sequence of integers") from e
        if values.ndim != 1:
            raise InvalidInput("Days must be a flat sequence of integers")
        if values.size == 0:
            raise InvalidInput("Please provide at least one day of activity")
        if not np.issubdtype(values.dtype, np.integer):
            raise InvalidInput("Days must be a flat sequence of integers")
        if (values < 0).any():
            raise InvalidInput("Days must not contain negative values")
        return values.tolist()
