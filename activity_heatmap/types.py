"""Geometry types and the renderer port the chart draws through."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol


@dataclass(frozen=True)
class Box:
    """Pixel rectangle, y grows downwards."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class TextBox:
    width: float
    height: float


class Renderer(Protocol):  # pragma: no cover - structural only
    """Drawing surface a chart is rendered onto.

    One instance belongs to one render call: it carries the current font,
    size and color between calls.
    """

    def set_dpi(self, dpi: float) -> None: ...

    def set_font(self, font: Any) -> None: ...

    def set_font_size(self, size: float) -> None: ...

    def set_font_color(self, color: str) -> None: ...

    def measure_text(self, text: str) -> TextBox: ...

    def draw_box(
        self, box: Box, fill_color: str, stroke_color: str, stroke_width: float
    ) -> None: ...

    def draw_text(self, text: str, x: float, y: float, align: str = "left") -> None: ...

    def finalize(self) -> bytes: ...


RendererProvider = Callable[[int, int], Renderer]
