"""Activity chart orchestration.

A render validates its input, lays the grid out once and then draws
background, title, cells and axes in that order before asking the
renderer for the encoded image.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional, Sequence

from . import axes
from .backends import png_renderer
from .config import ChartConfig
from .errors import EncodeError
from .layout import LayoutResult, cell_box, cell_position, compute_layout
from .palette import dot_color
from .settings import AXIS_GUTTER
from .styles import Style
from .types import Box, Renderer, RendererProvider

log = logging.getLogger(__name__)


class RenderStage(enum.Enum):
    VALIDATING = "validating"
    LAYING_OUT = "laying_out"
    DRAWING_BACKGROUND = "drawing_background"
    DRAWING_TITLE = "drawing_title"
    DRAWING_GRID = "drawing_grid"
    DRAWING_AXES = "drawing_axes"
    FINALIZING = "finalizing"
    DONE = "done"


class _RenderPass:
    """State of one render call: its renderer and layout are never shared."""

    def __init__(self, config: ChartConfig, provider: RendererProvider):
        self.config = config
        self.provider = provider
        self.days: List[int] = []
        self.r: Optional[Renderer] = None
        self.layout: Optional[LayoutResult] = None
        self.stage = RenderStage.VALIDATING

    def _enter(self, stage: RenderStage) -> None:
        log.debug("Activity chart: %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def run(self, days: Sequence[int]) -> bytes:
        self.days = self.config.validate(days)
        log.debug(
            "Rendering %d days on a %dx%d canvas at %s dpi",
            len(self.days),
            self.config.width,
            self.config.height,
            self.config.dpi,
        )

        self._enter(RenderStage.LAYING_OUT)
        self.r = self.provider(self.config.width, self.config.height)
        self.r.set_dpi(self.config.dpi)
        self.layout = compute_layout(self.r, self.config, self.days)
        if self.layout.max_value is None:
            log.warning("All %d days are zero, drawing an empty grid", len(self.days))

        self._enter(RenderStage.DRAWING_BACKGROUND)
        self.draw_background()
        self._enter(RenderStage.DRAWING_TITLE)
        self.draw_title()
        self._enter(RenderStage.DRAWING_GRID)
        self.draw_dots()
        self._enter(RenderStage.DRAWING_AXES)
        self.draw_x_axis()
        self.draw_y_axis()

        self._enter(RenderStage.FINALIZING)
        try:
            data = self.r.finalize()
        except EncodeError:
            raise
        except Exception as e:
            raise EncodeError("Unable to encode activity chart") from e
        self._enter(RenderStage.DONE)
        return data

    def draw_background(self) -> None:
        style = self.config.get_background_style()
        if not style.show:
            return
        self.r.draw_box(
            Box(0, 0, self.config.width, self.config.height),
            style.fill_color,
            style.stroke_color,
            style.stroke_width,
        )

    def draw_title(self) -> None:
        style = self.config.get_title_style()
        if not style.show or not self.config.title:
            return
        self._set_text_style(style)
        self.r.draw_text(self.config.title, self.layout.title_x, self.layout.title_y, style.text_align)

    def draw_dots(self) -> None:
        cfg = self.config
        swatches = cfg.palette.swatches
        for i, value in enumerate(self.days):
            col, row = cell_position(i, cfg.current_day, self.layout.num_weeks, cfg.left_to_right)
            box = cell_box(self.layout, col, row, cfg.dot_size, cfg.dot_spacing)
            style = cfg.get_dot_style(dot_color(value, self.layout.max_value, swatches))
            self.r.draw_box(box, style.fill_color, style.stroke_color, style.stroke_width)

    def _set_text_style(self, style: Style) -> None:
        self.r.set_font(style.font)
        self.r.set_font_color(style.font_color)
        self.r.set_font_size(style.font_size)

    def draw_x_axis(self) -> None:
        style = self.config.get_axis_style(self.config.x_axis)
        if not style.show:
            return
        self._set_text_style(style)
        y = self.layout.chart_y - AXIS_GUTTER
        positions = axes.month_label_positions(
            self.r, self.config.month_labels, self.layout.chart_x, self.layout.chart_width
        )
        for label, x in positions:
            self.r.draw_text(label, x, y, style.text_align)

    def draw_y_axis(self) -> None:
        style = self.config.get_axis_style(self.config.y_axis)
        if not style.show:
            return
        self._set_text_style(style)
        positions = axes.weekday_label_positions(
            self.r, self.config.weekday_labels, self.layout, self.config.dot_size, self.config.dot_spacing
        )
        for label, x, y in positions:
            self.r.draw_text(label, x, y, style.text_align)


class ActivityChart:
    """Draws a daily activity grid, one dot per day and one column per week."""

    def __init__(self, config: Optional[ChartConfig] = None, **options):
        self.config = config if config is not None else ChartConfig(**options)

    def render(self, days: Sequence[int], provider: Optional[RendererProvider] = None) -> bytes:
        """Render ``days`` (oldest first) and return the encoded image.

        Raises:
            InvalidInput: before anything is drawn, for an empty series or a
                bad configuration.
            EncodeError: when the renderer cannot produce the final bytes.
        """
        return _RenderPass(self.config, provider or png_renderer).run(days)


def render(config: ChartConfig, days: Sequence[int], provider: Optional[RendererProvider] = None) -> bytes:
    return ActivityChart(config).render(days, provider)
