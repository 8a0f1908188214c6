# /// script
# requires-python = ">=3.10"
# dependencies = ["activity-heatmap", "pandas", "matplotlib", "seaborn", "numpy"]
#
# [tool.uv.sources]
# activity-heatmap = { path = "../../.." }
# ///

# Reads a chart document as JSON on stdin and writes the PNG to stdout.
# With ACTIVITY_HEATMAP_DEBUG_CHART=1 the PNG is written to debug.png instead.

import sys

from activity_heatmap.cli import main

if __name__ == "__main__":
    sys.exit(main())
