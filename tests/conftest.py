# Recording renderer: satisfies the renderer port without rasterizing,
# text is measured as CHAR_WIDTH pixels per character and TEXT_HEIGHT high.

import matplotlib

matplotlib.use("Agg")

import pytest

from activity_heatmap.types import TextBox

CHAR_WIDTH = 6
TEXT_HEIGHT = 10


class RecordingRenderer:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.calls = []
        self.font_size = None

    def set_dpi(self, dpi):
        self.calls.append(("set_dpi", dpi))

    def set_font(self, font):
        self.calls.append(("set_font", font))

    def set_font_size(self, size):
        self.font_size = size
        self.calls.append(("set_font_size", size))

    def set_font_color(self, color):
        self.calls.append(("set_font_color", color))

    def measure_text(self, text):
        self.calls.append(("measure_text", text))
        return TextBox(CHAR_WIDTH * len(text), TEXT_HEIGHT if text else 0)

    def draw_box(self, box, fill_color, stroke_color, stroke_width):
        self.calls.append(("draw_box", box, fill_color, stroke_color, stroke_width))

    def draw_text(self, text, x, y, align="left"):
        self.calls.append(("draw_text", text, x, y, align))

    def finalize(self):
        self.calls.append(("finalize",))
        return b"recorded"

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def renderer():
    return RecordingRenderer(400, 300)


@pytest.fixture
def provider():
    """Renderer provider remembering every renderer it handed out."""
    created = []

    def make(width, height):
        r = RecordingRenderer(width, height)
        created.append(r)
        return r

    make.created = created
    return make
