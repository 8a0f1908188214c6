"""Month and weekday label placement around the grid.

Month labels are spread evenly across the grid width and are not tied to
the dates the series actually covers.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .layout import LayoutResult
from .settings import AXIS_GUTTER
from .types import Renderer


def month_label_positions(
    r: Renderer, labels: Sequence[str], chart_x: float, chart_width: float
) -> List[Tuple[str, float]]:
    """Left edge x of each month label, evenly gapped over ``chart_width``.

    Uses the font currently set on ``r``.
    """
    widths = [r.measure_text(label).width for label in labels]
    gap = (chart_width - sum(widths)) / (len(labels) - 1) if len(labels) > 1 else 0.0

    positions = []
    x = float(chart_x)
    for label, width in zip(labels, widths):
        positions.append((label, x))
        x += width + gap
    return positions


def weekday_label_positions(
    r: Renderer,
    labels: Sequence[str],
    layout: LayoutResult,
    dot_size: int,
    dot_spacing: int,
    gutter: int = AXIS_GUTTER,
) -> List[Tuple[str, float, float]]:
    """(label, x, y) for every non-empty weekday label.

    Labels share one left edge, placed so the widest one ends ``gutter``
    pixels before the grid.
    """
    measured = [(row, label, r.measure_text(label)) for row, label in enumerate(labels) if label]
    if not measured:
        return []

    max_width = max(box.width for _, _, box in measured)
    x = layout.chart_x - max_width - gutter
    return [
        (label, x, layout.chart_y + row * (dot_size + dot_spacing) + box.height)
        for row, label, box in measured
    ]
