"""Calendar style activity heatmaps: one dot per day, one column per week."""

from .chart import ActivityChart, RenderStage, render  # noqa: F401
from .config import ChartConfig  # noqa: F401
from .errors import EncodeError, HeatmapError, InvalidInput  # noqa: F401
from .palette import ColorPalette, swatches_from_colormap  # noqa: F401
from .styles import Style  # noqa: F401
from .types import Box, Renderer, RendererProvider, TextBox  # noqa: F401

__version__ = "0.1.0"
