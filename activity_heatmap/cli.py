"""Render an activity chart from a JSON document on stdin.

Input either carries the day values directly::

    {"title": "Runs", "days": [3, 0, 5], "current_day": 2}

or raw unix timestamps that are bucketed into the window ending at
``now``::

    {"title": "Runs", "events": [1700000000, ...], "now": 1700100000, "num_days": 30}

The PNG goes to stdout, or to a local file when ACTIVITY_HEATMAP_DEBUG_CHART=1.
"""

import argparse
import json
import logging
import sys
import time

from . import settings
from .chart import ActivityChart
from .config import ChartConfig
from .errors import HeatmapError, InvalidInput
from .palette import ColorPalette, swatches_from_colormap
from .series import series_for_window
from .sinks import FileSink, select_sink
from .styles import Style, hidden


def build_chart(parsed):
    """ChartConfig and day values described by a parsed input document."""
    if not isinstance(parsed, dict):
        raise InvalidInput("Input must be a JSON object")

    if "days" in parsed:
        days = parsed["days"]
        current_day = 0
    else:
        num_days = parsed.get("num_days", settings.DEFAULT_CHART_DAYS)
        now = parsed.get("now", int(time.time()))
        try:
            days, current_day = series_for_window(parsed.get("events", []), now, num_days)
        except InvalidInput:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Invalid events, now or num_days: {e}") from e
    current_day = parsed.get("current_day", current_day)

    try:
        if "colors" in parsed:
            palette = ColorPalette(swatches=tuple(parsed["colors"]))
        elif "colormap" in parsed:
            palette = ColorPalette(swatches=swatches_from_colormap(parsed["colormap"], parsed.get("num_colors", 5)))
        else:
            palette = ColorPalette()
    except InvalidInput:
        raise
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Invalid colors: {e}") from e

    title = parsed.get("title", "")
    if not isinstance(title, str):
        raise InvalidInput(f"title must be a string, got {title!r}")

    axis_style = Style() if parsed.get("axes", True) else hidden()
    config = ChartConfig(
        title=title,
        width=parsed.get("width", settings.DEFAULT_WIDTH),
        height=parsed.get("height", settings.DEFAULT_HEIGHT),
        dpi=parsed.get("dpi", settings.DEFAULT_DPI),
        dot_size=parsed.get("dot_size", settings.DEFAULT_DOT_SIZE),
        dot_spacing=parsed.get("dot_spacing", settings.DEFAULT_DOT_SPACING),
        current_day=current_day,
        left_to_right=parsed.get("left_to_right", True),
        font=parsed.get("font"),
        palette=palette,
        x_axis=axis_style,
        y_axis=axis_style,
    )
    return config, days


def main(argv=None, stdin=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-o", "--output", help="write the chart to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every render stage")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Read JSON input from stdin
    raw_input = (stdin or sys.stdin).read()
    try:
        parsed = json.loads(raw_input)
        config, days = build_chart(parsed)
        content = ActivityChart(config).render(days)
    except json.JSONDecodeError as e:
        print(f"activity-heatmap: invalid JSON input: {e}", file=sys.stderr)
        return 2
    except HeatmapError as e:
        print(f"activity-heatmap: {e}", file=sys.stderr)
        return 1

    # Output PNG to stdout unless a file was asked for
    sink = FileSink(args.output) if args.output else select_sink()
    sink.write(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
