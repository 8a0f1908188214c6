"""Matplotlib implementation of the renderer port.

The figure gets a single axes spanning the whole canvas with a pixel
coordinate system whose origin is the top left corner, so chart geometry
maps one to one onto the output image.
"""

from __future__ import annotations

import functools
import logging
import os
from io import BytesIO
from typing import Any

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties
from matplotlib.patches import Rectangle

from . import settings
from .errors import EncodeError, InvalidInput
from .types import Box, TextBox

log = logging.getLogger(__name__)

POINTS_PER_INCH = 72.0


class MatplotlibRenderer:
    def __init__(self, width: int, height: int, *, dpi: float = settings.DEFAULT_DPI, format: str = "png"):
        if format.lower() not in {"png", "svg"}:
            raise InvalidInput("format must be 'png' or 'svg'")
        self.width = width
        self.height = height
        self.format = format.lower()
        self.dpi = dpi

        self.fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.canvas = FigureCanvasAgg(self.fig)
        self.ax = self.fig.add_axes((0, 0, 1, 1))
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()

        self._font = FontProperties()
        self._font_size = settings.DEFAULT_AXIS_FONT_SIZE
        self._font_color = "#333333"

    def set_dpi(self, dpi: float) -> None:
        # Keep the pixel size fixed
        self.dpi = dpi
        self.fig.set_dpi(dpi)
        self.fig.set_size_inches(self.width / dpi, self.height / dpi)

    def set_font(self, font: Any) -> None:
        """Accepts None (matplotlib default), a FontProperties, a font file path or a family name."""
        if font is None:
            self._font = FontProperties()
        elif isinstance(font, FontProperties):
            self._font = font.copy()
        elif os.path.isfile(str(font)):
            self._font = FontProperties(fname=str(font))
        else:
            self._font = FontProperties(family=str(font))

    def set_font_size(self, size: float) -> None:
        self._font_size = size

    def set_font_color(self, color: str) -> None:
        self._font_color = color

    def _font_properties(self) -> FontProperties:
        props = self._font.copy()
        props.set_size(self._font_size)
        return props

    def measure_text(self, text: str) -> TextBox:
        if not text:
            return TextBox(0, 0)
        renderer = self.canvas.get_renderer()
        w, h, _ = renderer.get_text_width_height_descent(text, self._font_properties(), ismath=False)
        return TextBox(w, h)

    def draw_box(self, box: Box, fill_color: str, stroke_color: str, stroke_width: float) -> None:
        self.ax.add_patch(
            Rectangle(
                (box.left, box.top),
                box.width,
                box.height,
                facecolor=fill_color,
                edgecolor=stroke_color,
                linewidth=stroke_width * POINTS_PER_INCH / self.dpi,
            )
        )

    def draw_text(self, text: str, x: float, y: float, align: str = "left") -> None:
        self.ax.text(
            x,
            y,
            text,
            fontproperties=self._font_properties(),
            color=self._font_color,
            ha=align,
            va="baseline",
        )

    def finalize(self) -> bytes:
        buffer = BytesIO()
        try:
            self.fig.savefig(buffer, format=self.format, dpi=self.dpi)
        except Exception as e:
            raise EncodeError(f"Unable to encode chart as {self.format}") from e
        buffer.seek(0)
        data = buffer.read()
        log.debug("Encoded %dx%d %s chart (%d bytes)", self.width, self.height, self.format, len(data))
        return data


png_renderer = MatplotlibRenderer
svg_renderer = functools.partial(MatplotlibRenderer, format="svg")
