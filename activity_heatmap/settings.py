"""Defaults for chart geometry and the command line output sink."""

from __future__ import annotations

import os
from typing import Final

DEFAULT_WIDTH: Final = 1024
DEFAULT_HEIGHT: Final = 400
DEFAULT_DPI: Final = 92.0

DEFAULT_DOT_SIZE: Final = 16
DEFAULT_DOT_SPACING: Final = 2
DEFAULT_STROKE_WIDTH: Final = 1.0

DAYS_PER_WEEK: Final = 7
DEFAULT_TITLE_TOP: Final = 10  # pixels above the title
DEFAULT_AXIS_FONT_SIZE: Final = 10.0
AXIS_GUTTER: Final = 5  # pixels between labels and the grid

MONTH_LABELS: Final = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
WEEKDAY_LABELS: Final = ("", "Mon", "", "Wed", "", "Fri", "")

DEFAULT_CHART_DAYS: Final = 30

# Rendering to a local file instead of stdout, see cli.py
DEBUG_CHART: Final = os.environ.get("ACTIVITY_HEATMAP_DEBUG_CHART") == "1"
DEBUG_CHART_FILE: Final = os.environ.get("ACTIVITY_HEATMAP_DEBUG_FILE", "debug.png")
