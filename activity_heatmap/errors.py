"""Error kinds surfaced by the render entry point."""


class HeatmapError(Exception):
    """Base class for every error raised by activity_heatmap."""


class InvalidInput(HeatmapError, ValueError):
    """The chart configuration or the series cannot be rendered.

    Always raised before the renderer is created, so nothing is drawn.
    """


class EncodeError(HeatmapError):
    """The renderer could not serialize the finished image."""
