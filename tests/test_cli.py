import io
import json

import pytest

from activity_heatmap import cli
from activity_heatmap.errors import InvalidInput
from activity_heatmap.palette import DEFAULT_SWATCHES, EMPTY_COLOR
from activity_heatmap.sinks import StdoutSink

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
NOW = 1704888000


def run(document, *argv):
    raw = document if isinstance(document, str) else json.dumps(document)
    return cli.main(list(argv), stdin=io.StringIO(raw))


def test_writes_png_to_output_file(tmp_path):
    out = tmp_path / "chart.png"
    doc = {"title": "Runs", "days": [3, 0, 5], "width": 300, "height": 200, "dpi": 100}
    assert run(doc, "-o", str(out)) == 0
    assert out.read_bytes().startswith(PNG_SIGNATURE)


def test_writes_png_to_stdout(monkeypatch):
    buffer = io.BytesIO()
    monkeypatch.setattr(cli, "select_sink", lambda: StdoutSink(buffer))
    assert run({"days": [1, 2], "width": 300, "height": 200, "dpi": 100}) == 0
    assert buffer.getvalue().startswith(PNG_SIGNATURE)


def test_invalid_json(capsys):
    assert run("{not json") == 2
    assert "invalid JSON" in capsys.readouterr().err


def test_invalid_current_day(capsys):
    assert run({"days": [1], "current_day": 9}) == 1
    assert "current_day" in capsys.readouterr().err


def test_build_chart_from_days():
    config, days = cli.build_chart({"days": [1, 2], "current_day": 4, "left_to_right": False})
    assert days == [1, 2]
    assert config.current_day == 4
    assert config.left_to_right is False
    assert config.palette.swatches == DEFAULT_SWATCHES


def test_build_chart_from_events():
    config, days = cli.build_chart({"events": [NOW, NOW - 10], "now": NOW, "num_days": 3})
    assert days == [0, 0, 2]
    assert config.current_day == 1


def test_build_chart_palettes():
    config, _ = cli.build_chart({"days": [1], "colors": ["#000", "#fff"]})
    assert config.palette.swatches == ("#000", "#fff")

    config, _ = cli.build_chart({"days": [1], "colormap": "Blues", "num_colors": 4})
    assert len(config.palette.swatches) == 4
    assert config.palette.swatches[0] == EMPTY_COLOR


def test_build_chart_without_axes():
    config, _ = cli.build_chart({"days": [1], "axes": False})
    assert not config.x_axis.show and not config.y_axis.show


def test_build_chart_rejects_non_objects():
    with pytest.raises(InvalidInput):
        cli.build_chart([1, 2, 3])


@pytest.mark.parametrize(
    "doc",
    [
        {"days": [1], "width": "wide"},
        {"days": [1], "dpi": "high"},
        {"days": 5},
        {"days": [1], "title": 12},
        {"days": [1], "colors": ["nocolor", "#ffffff"]},
        {"days": [1], "colors": 3},
        {"events": [NOW], "now": NOW, "num_days": "30"},
        {"events": ["yesterday"], "now": NOW},
        {"events": [NOW], "now": "today"},
    ],
)
def test_bad_documents_exit_with_message(capsys, doc):
    assert run(doc) == 1
    assert capsys.readouterr().err.startswith("activity-heatmap: ")
